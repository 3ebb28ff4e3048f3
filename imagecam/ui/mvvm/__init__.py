from .bindable import BindableProperty, BindableBase

__all__ = ["BindableProperty", "BindableBase"]
