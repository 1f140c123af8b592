"""Desktop mind-mapping tool with a Tkinter editor and a compact binary map format."""

__version__ = "0.5.0b0"

__all__ = ["__version__"]