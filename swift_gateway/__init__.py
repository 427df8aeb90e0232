"""SWIFT MT799 message gateway."""

__version__ = "1.0.0"
