"""Space Impact: a side-scrolling arcade shooter built on pygame."""

__version__ = "1.0.0"
