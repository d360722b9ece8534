"""Text-handling routines of a vi-style editor: formatting, insert input, motions, window geometry, registers and operators."""

__version__ = "0.1.0"
__all__ = [
    "appending",
    "formatting",
    "insertion",
    "lineinput",
    "operators",
    "registers",
    "structure",
    "window",
]