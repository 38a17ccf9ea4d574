"""Services for Font Optimizer."""
