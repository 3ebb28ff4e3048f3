from .entry_list_model import EntryListModel

__all__ = ["EntryListModel"]
