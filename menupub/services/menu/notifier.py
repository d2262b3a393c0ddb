"""
Menu change notifications.

Any insert/update/delete of a category, subcategory, menu item or add-on
is announced once its transaction commits. Notifications carry no row
data: subscribers are expected to drop what they hold and refetch.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session

from menupub.models.menu import Category, Subcategory, MenuItem, Addon

log = logging.getLogger(__name__)

MENU_MODELS = (Category, Subcategory, MenuItem, Addon)

_PENDING_KEY = "menu_changes"


@dataclass(frozen=True)
class MenuChange:
    restaurant_id: Optional[str]
    table: str
    event: str  # insert, update, delete


Subscriber = Callable[[MenuChange], None]


class MenuChangeBus:
    def __init__(self):
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, change: MenuChange) -> None:
        log.info("menu change: restaurant=%s table=%s event=%s", change.restaurant_id, change.table, change.event)
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                # The write already committed; one bad subscriber must not hide it from the rest
                log.exception("menu change subscriber failed: %r", callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


menu_change_bus = MenuChangeBus()


def _restaurant_id(obj) -> Optional[str]:
    # Read the loaded value only; never trigger a lazy load inside a flush
    return inspect(obj).dict.get("restaurant_id")


@event.listens_for(Session, "after_flush")
def _collect_menu_changes(session, flush_context):
    pending = session.info.setdefault(_PENDING_KEY, [])
    for kind, objects in (("insert", session.new), ("update", session.dirty), ("delete", session.deleted)):
        for obj in objects:
            if isinstance(obj, MENU_MODELS):
                pending.append(MenuChange(_restaurant_id(obj), obj.__tablename__, kind))


@event.listens_for(Session, "after_commit")
def _publish_menu_changes(session):
    pending = session.info.pop(_PENDING_KEY, [])
    # One notification per table and restaurant is enough to trigger a refetch
    seen = set()
    for change in pending:
        marker = (change.restaurant_id, change.table)
        if marker in seen:
            continue
        seen.add(marker)
        menu_change_bus.publish(change)


@event.listens_for(Session, "after_soft_rollback")
def _discard_menu_changes(session, previous_transaction):
    session.info.pop(_PENDING_KEY, None)
