"""Application-wide client state: user, cart, UI, filters, notices, preferences."""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, Field

from pageforge.notify import NoticeLevel
from pageforge.state.base import StateStore

NOTIFICATION_TTL = 5.0
DEFAULT_PRICE_RANGE = (0.0, 10000.0)


# ── User ─────────────────────────────────────────────────────────────


class UserRole(StrEnum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER
    avatar: str | None = None


class UserState(BaseModel):
    user: User | None = None
    is_authenticated: bool = False


class UserStore(StateStore[UserState]):
    state_type = UserState
    storage_name = "user-storage"

    def set_user(self, user: User | None) -> UserState:
        return self.set(user=user, is_authenticated=user is not None)

    def logout(self) -> UserState:
        return self.set(user=None, is_authenticated=False)

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated


# ── Cart ─────────────────────────────────────────────────────────────


class CartItem(BaseModel):
    id: str
    name: str
    price: float
    quantity: int = 1
    image: str | None = None


class CartState(BaseModel):
    items: list[CartItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(item.price * item.quantity for item in self.items)


class CartStore(StateStore[CartState]):
    """Shopping cart; adding an existing item increases its quantity."""

    state_type = CartState
    storage_name = "cart-storage"

    def add_item(self, item: CartItem) -> CartState:
        items = [i.model_copy() for i in self.state.items]
        for existing in items:
            if existing.id == item.id:
                existing.quantity += item.quantity
                break
        else:
            items.append(item)
        return self._replace(CartState(items=items))

    def remove_item(self, item_id: str) -> CartState:
        return self._replace(CartState(items=[i for i in self.state.items if i.id != item_id]))

    def update_quantity(self, item_id: str, quantity: int) -> CartState:
        """Set an item's quantity; zero or less removes it."""
        if quantity <= 0:
            return self.remove_item(item_id)
        items = [
            i.model_copy(update={"quantity": quantity}) if i.id == item_id else i
            for i in self.state.items
        ]
        return self._replace(CartState(items=items))

    def clear(self) -> CartState:
        return self.reset()

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.state.items)

    @property
    def total(self) -> float:
        return self.state.total


# ── UI ───────────────────────────────────────────────────────────────


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class UIState(BaseModel):
    sidebar_open: bool = True
    theme: Theme = Theme.SYSTEM
    active_modal: str | None = None


class UIStore(StateStore[UIState]):
    state_type = UIState
    storage_name = "ui-storage"

    def toggle_sidebar(self) -> UIState:
        return self.set(sidebar_open=not self.state.sidebar_open)

    def set_sidebar_open(self, open_: bool) -> UIState:
        return self.set(sidebar_open=open_)

    def set_theme(self, theme: Theme | str) -> UIState:
        return self.set(theme=Theme(theme))

    def open_modal(self, modal_id: str) -> UIState:
        return self.set(active_modal=modal_id)

    def close_modal(self) -> UIState:
        return self.set(active_modal=None)


# ── Filters ──────────────────────────────────────────────────────────


class SortBy(StrEnum):
    NAME = "name"
    PRICE = "price"
    DATE = "date"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class FiltersState(BaseModel):
    search_query: str = ""
    category: str | None = None
    price_range: tuple[float, float] = DEFAULT_PRICE_RANGE
    sort_by: SortBy = SortBy.DATE
    sort_order: SortOrder = SortOrder.DESC


class FiltersStore(StateStore[FiltersState]):
    """Search and listing filters; kept in memory only."""

    state_type = FiltersState

    def set_search_query(self, query: str) -> FiltersState:
        return self.set(search_query=query)

    def set_category(self, category: str | None) -> FiltersState:
        return self.set(category=category)

    def set_price_range(self, low: float, high: float) -> FiltersState:
        if low > high:
            raise ValueError(f"price range is inverted: {low} > {high}")
        return self.set(price_range=(low, high))

    def set_sort(self, sort_by: SortBy | str, order: SortOrder | str | None = None) -> FiltersState:
        changes: dict[str, object] = {"sort_by": SortBy(sort_by)}
        if order is not None:
            changes["sort_order"] = SortOrder(order)
        return self.set(**changes)

    def reset_filters(self) -> FiltersState:
        return self.reset()


# ── Notifications ────────────────────────────────────────────────────


class Notification(BaseModel):
    id: str
    level: NoticeLevel
    message: str
    timestamp: float


class NotificationsState(BaseModel):
    notifications: list[Notification] = Field(default_factory=list)


class NotificationsStore(StateStore[NotificationsState]):
    """Transient notices; each expires ``ttl`` seconds after it was added.

    Also usable as the editor's notifier.
    """

    state_type = NotificationsState

    def __init__(
        self,
        ttl: float = NOTIFICATION_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        super().__init__()

    def add(self, level: NoticeLevel | str, message: str) -> Notification:
        notice = Notification(
            id=uuid.uuid4().hex[:9],
            level=NoticeLevel(level),
            message=message,
            timestamp=self._clock(),
        )
        self._replace(NotificationsState(notifications=[*self.state.notifications, notice]))
        return notice

    def notify(self, level: NoticeLevel, message: str) -> None:
        self.add(level, message)

    def remove(self, notice_id: str) -> NotificationsState:
        kept = [n for n in self.state.notifications if n.id != notice_id]
        return self._replace(NotificationsState(notifications=kept))

    def clear(self) -> NotificationsState:
        return self.reset()

    def active(self, now: float | None = None) -> list[Notification]:
        """Drop expired notices and return the rest, oldest first."""
        now = self._clock() if now is None else now
        live = [n for n in self.state.notifications if n.timestamp > now - self.ttl]
        if len(live) != len(self.state.notifications):
            self._replace(NotificationsState(notifications=live))
        return live


# ── Preferences ──────────────────────────────────────────────────────


class Language(StrEnum):
    EN = "en"
    BN = "bn"


class Currency(StrEnum):
    USD = "USD"
    BDT = "BDT"


class NotificationChannels(BaseModel):
    email: bool = True
    push: bool = True
    sms: bool = False


class PreferencesState(BaseModel):
    language: Language = Language.EN
    currency: Currency = Currency.USD
    notifications: NotificationChannels = Field(default_factory=NotificationChannels)


class PreferencesStore(StateStore[PreferencesState]):
    state_type = PreferencesState
    storage_name = "preferences-storage"

    CHANNELS: ClassVar[tuple[str, ...]] = ("email", "push", "sms")

    def set_language(self, language: Language | str) -> PreferencesState:
        return self.set(language=Language(language))

    def set_currency(self, currency: Currency | str) -> PreferencesState:
        return self.set(currency=Currency(currency))

    def update_notification_preference(self, channel: str, enabled: bool) -> PreferencesState:
        if channel not in self.CHANNELS:
            raise ValueError(f"Unknown notification channel '{channel}'")
        channels = self.state.notifications.model_copy(update={channel: enabled})
        return self.set(notifications=channels)
