"""Background persistence for the editing session."""

from pageforge.sync.autosave import AutoSaveScheduler, AutoSaveState

__all__ = ["AutoSaveScheduler", "AutoSaveState"]
