"""Presenter implementations for GUI."""

from .gui_entry_observer import GUIEntryObserver
from .gui_presenter import GUIPresenter

__all__ = ["GUIEntryObserver", "GUIPresenter"]
