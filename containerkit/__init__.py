"""Key-value containers, including a binary search tree map."""

__version__ = "0.1.0"
__all__ = ["bstmap"]