"""Left-leaning red-black tree of string keys with file tools and a console menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]