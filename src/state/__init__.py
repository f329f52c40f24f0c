"""Client-side application state stores."""

from pageforge.state.base import StateStore
from pageforge.state.stores import (
    CartItem,
    CartStore,
    FiltersStore,
    Notification,
    NotificationsStore,
    PreferencesStore,
    UIStore,
    User,
    UserStore,
)

__all__ = [
    "CartItem",
    "CartStore",
    "FiltersStore",
    "Notification",
    "NotificationsStore",
    "PreferencesStore",
    "StateStore",
    "UIStore",
    "User",
    "UserStore",
]
