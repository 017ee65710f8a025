"""Seven Days: a curses survival role-playing game with a JSON story book."""

__version__ = "0.1.0"
__all__ = ["__version__"]