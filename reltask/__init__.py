"""reltask: changelog-aware release tasks."""

__version__ = "0.1.0"
