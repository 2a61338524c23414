"""shapectl — closed-shape runtime validation for untrusted configuration."""

__version__ = "0.3.0"
