"""Custom, menu and modal forms for game clients, with inline submit callbacks."""

__version__ = "0.1.0"
__all__ = ["elements", "custom", "menu", "modal"]