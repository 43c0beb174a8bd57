"""Linear, position-indexed scene stepper for visual-novel style dialogue."""

__version__ = "0.1.0"
