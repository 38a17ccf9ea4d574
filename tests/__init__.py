"""Font Optimizer Test Suite.

Stylesheet downloads run against an in-process fake host; no test needs
network access.
"""
