"""Document state controller (New/Open/Save/Save As) with a PyQt6 demo editor."""

__version__ = "1.0.0"
