"""bodymap — interactive anatomical diagram backend."""

__version__ = "0.1.0"
