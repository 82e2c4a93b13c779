"""HR payroll domain core with a FastAPI adapter."""

__version__ = "1.0.0"
