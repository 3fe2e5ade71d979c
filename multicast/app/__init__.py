"""Couche application : bus d'évènements, éditeurs et abonnés."""

from .event_bus import EventBus
from .events import PriceChangedEvent
from .notifier import Notifier, subscribe, unsubscribe
from .progress import ConsoleProgressWriter, FileProgressWriter, hard_work
from .stock import PRICE_CHANGED, PriceAlertMonitor, Stock

__all__ = [
    "EventBus",
    "Notifier",
    "PriceChangedEvent",
    "PRICE_CHANGED",
    "PriceAlertMonitor",
    "Stock",
    "ConsoleProgressWriter",
    "FileProgressWriter",
    "hard_work",
    "subscribe",
    "unsubscribe",
]
