"""Éditeur d'évènements : une `EventBus` par type de notification.

Les sous-classes déclarent leurs types de notification à la construction et
déclenchent la diffusion depuis le setter du champ surveillé, jamais via une
méthode publique exposée aux abonnés.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from multicast.app.event_bus import EventBus, Subscriber
from multicast.engine.callback_list import CallbackList

logger = logging.getLogger(__name__)


class Notifier:
    """Base des entités qui notifient leurs abonnés lors d'un changement d'état.

    Les handlers sont appelés avec `(sender, event)`. `is_dispatching` vaut
    vrai tant qu'une diffusion est en cours (y compris depuis un handler).
    """

    def __init__(self, *kinds: str) -> None:
        if not kinds:
            raise ValueError("Un Notifier doit déclarer au moins un type de notification")
        self._buses: Dict[str, EventBus] = {kind: EventBus() for kind in kinds}
        self._dispatch_depth = 0

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(self._buses)

    @property
    def is_dispatching(self) -> bool:
        return self._dispatch_depth > 0

    def callbacks(self, kind: Optional[str] = None) -> CallbackList:
        """Liste courante des abonnés de `kind` (valeur immuable)."""

        return self._bus(kind).callbacks

    def subscribe(self, target: Subscriber, kind: Optional[str] = None) -> Callable[[], None]:
        """Abonne `target` à `kind` et retourne une fonction d'unsubscribe."""

        return self._bus(kind).subscribe(target)

    def unsubscribe(self, target: Subscriber, kind: Optional[str] = None) -> None:
        """Retire la dernière occurrence de `target` ; ignoré s'il est absent."""

        self._bus(kind).unsubscribe(target)

    def _raise(self, kind: str, event: Any) -> None:
        """Diffuse `event` aux abonnés de `kind` ; les erreurs ne sont pas capturées."""

        bus = self._bus(kind)
        logger.debug("%r: diffusion %s (%r)", self, kind, event)
        self._dispatch_depth += 1
        try:
            bus.publish(self, event)
        finally:
            self._dispatch_depth -= 1

    def _bus(self, kind: Optional[str]) -> EventBus:
        if kind is None:
            if len(self._buses) != 1:
                raise ValueError(
                    f"Type de notification requis parmi {sorted(self._buses)}"
                )
            return next(iter(self._buses.values()))
        try:
            return self._buses[kind]
        except KeyError:
            raise KeyError(f"Type de notification inconnu: {kind!r}") from None


def subscribe(
    notifier: Notifier, target: Subscriber, kind: Optional[str] = None
) -> Callable[[], None]:
    """Abonne `target` au `notifier` et retourne une fonction d'unsubscribe."""

    return notifier.subscribe(target, kind)


def unsubscribe(notifier: Notifier, target: Subscriber, kind: Optional[str] = None) -> None:
    """Désabonne `target` du `notifier` ; no-op s'il n'est pas abonné."""

    notifier.unsubscribe(target, kind)
