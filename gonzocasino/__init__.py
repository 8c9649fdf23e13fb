"""A console casino where players bet gonzos on games of chance."""

__version__ = "0.1.0"
__all__ = ["__version__"]