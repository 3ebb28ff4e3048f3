from .browser_viewmodel import BrowserViewModel

__all__ = ["BrowserViewModel"]
