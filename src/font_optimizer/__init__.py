"""Font Optimizer.

Fetches web font stylesheets and synthesizes metric override fallback rules
that reduce layout shift while the web font is loading.
"""

__version__ = "0.1.0"
