"""
Change-notifying attributes for view models.

    class BrowserViewModel(BindableBase):
        currentFolderChanged = Signal(str)
        current_folder = BindableProperty("", "currentFolderChanged")

Assigning ``vm.current_folder`` emits ``currentFolderChanged`` and
``propertyChanged("current_folder", value)``, but only when the value differs.
"""
from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import QObject, Signal


class BindableProperty:
    """
    Descriptor backed by ``BindableBase._values``.

    Args:
        default: Value before the first assignment.
        signal: Name of the class-level Qt signal to emit on change.
        coerce: Applied to every assigned value before comparison.
    """

    def __init__(self, default: Any = None, signal: Optional[str] = None,
                 coerce: Optional[Callable[[Any], Any]] = None):
        self.default = default
        self.signal = signal
        self.coerce = coerce
        self.name = ""

    def __set_name__(self, owner, name: str):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj._values.get(self.name, self.default)

    def __set__(self, obj: "BindableBase", value: Any):
        if self.coerce is not None:
            value = self.coerce(value)
        if obj._values.get(self.name, self.default) == value:
            return
        obj._values[self.name] = value
        if self.signal:
            getattr(obj, self.signal).emit(value)
        obj.propertyChanged.emit(self.name, value)


class BindableBase(QObject):
    """QObject with a value store for BindableProperty and a generic change signal."""

    propertyChanged = Signal(str, object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._values: Dict[str, Any] = {}

    @classmethod
    def bindable_properties(cls) -> Dict[str, BindableProperty]:
        found = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, BindableProperty):
                    found[name] = attr
        return found

    def bind(self, name: str, slot: Callable[[Any], Any]):
        """Connect ``slot`` to the property's signal and push the current value."""
        prop = self.bindable_properties().get(name)
        if prop is None or not prop.signal:
            raise AttributeError(f"{type(self).__name__} has no bindable property '{name}'")
        getattr(self, prop.signal).connect(slot)
        slot(getattr(self, name))
