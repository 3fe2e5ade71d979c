"""Action cotée publiant `price_changed`, et un abonné d'alerte de prix."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Tuple, Union

from multicast.app.events import PriceChangedEvent
from multicast.app.notifier import Notifier
from multicast.config import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

PRICE_CHANGED = "price_changed"

PriceLike = Union[Decimal, int, float, str]


def _to_decimal(value: PriceLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class Stock(Notifier):
    """Titre dont chaque changement de prix est notifié aux abonnés."""

    def __init__(self, symbol: str, price: PriceLike = Decimal(0)) -> None:
        super().__init__(PRICE_CHANGED)
        self._symbol = symbol
        self._price = _to_decimal(price)

    def __repr__(self) -> str:
        return f"Stock({self._symbol!r}, {self._price})"

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: PriceLike) -> None:
        new_price = _to_decimal(value)
        if new_price == self._price:
            return
        old_price = self._price
        self._price = new_price
        self.on_price_changed(PriceChangedEvent(last_price=old_price, new_price=new_price))

    def on_price_changed(self, event: PriceChangedEvent) -> None:
        """Point d'extension : les sous-classes peuvent enrichir la diffusion."""

        self._raise(PRICE_CHANGED, event)


class PriceAlertMonitor:
    """Enregistre une alerte quand la hausse relative dépasse `threshold`."""

    def __init__(self, threshold: Decimal = DEFAULT_SETTINGS.alert_threshold) -> None:
        self.threshold = threshold
        self.alerts: List[Tuple[str, PriceChangedEvent]] = []

    def on_price_changed(self, sender: Stock, event: PriceChangedEvent) -> None:
        change = event.relative_change
        if change is None or change <= self.threshold:
            return
        self.alerts.append((sender.symbol, event))
        logger.warning(
            "Alert, %s up %.1f%% (%s -> %s)",
            sender.symbol,
            change * 100,
            event.last_price,
            event.new_price,
        )
