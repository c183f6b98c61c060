"""Dictionary-based Thai word segmentation, word wrapping and a word-count command."""

__version__ = "0.1.0"
__all__ = ["__version__"]