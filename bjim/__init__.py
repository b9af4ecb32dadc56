"""Bullet-journal style management of Markdown journals: configuration, pages, task migration and periodic collections."""

__version__ = "0.3.0"
__all__ = ["__version__"]