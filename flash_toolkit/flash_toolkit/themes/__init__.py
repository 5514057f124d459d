from .locator import ThemeLocator

__all__ = ["ThemeLocator"]
