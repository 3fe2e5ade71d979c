"""Évènements publiés par la couche application (`multicast.app`)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class PriceChangedEvent:
    """Émis lorsqu'un prix surveillé change : ancienne et nouvelle valeur."""

    last_price: Decimal
    new_price: Decimal

    @property
    def relative_change(self) -> Optional[Decimal]:
        """Variation relative `(new - last) / last`, `None` si l'ancien prix est nul."""

        if self.last_price == 0:
            return None
        return (self.new_price - self.last_price) / self.last_price
