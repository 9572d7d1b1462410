"""Vehicle ownership cost engine — listing facts × owner configuration → cost breakdown."""

__version__ = "1.0.0"
