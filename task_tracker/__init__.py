"""Task tracker - tasks with priorities, due dates and tags in a local JSON store."""

__version__ = "0.1.0"
