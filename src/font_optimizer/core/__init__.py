"""Core definitions shared across Font Optimizer."""
