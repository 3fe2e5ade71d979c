"""Bus d'évènements minimaliste adossé à une `CallbackList`."""

from __future__ import annotations

import logging
from typing import Any, Callable

from multicast.engine.callback_list import CallbackList
from multicast.engine.dispatcher import invoke
from multicast.engine.signature import EVENT_HANDLER, Signature

logger = logging.getLogger(__name__)

Subscriber = Callable[..., Any]


class EventBus:
    """Publie des évènements aux observateurs enregistrés.

    L'implémentation est volontairement synchrone et simple : chaque publication
    appelle immédiatement les abonnés dans l'ordre d'enregistrement. Une
    exception levée par un abonné interrompt la diffusion et remonte à
    l'appelant de `publish`.

    Les abonnements remplacent la liste interne par une nouvelle instance ;
    une publication en cours continue donc sur le snapshot pris à son début.
    """

    __slots__ = ("_callbacks",)

    def __init__(self, signature: Signature = EVENT_HANDLER) -> None:
        self._callbacks = CallbackList.empty(signature)

    @property
    def callbacks(self) -> CallbackList:
        """Liste courante des abonnés (valeur immuable)."""

        return self._callbacks

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Enregistre un abonné et retourne une fonction d'unsubscribe."""

        self._callbacks += callback
        logger.debug("Abonné ajouté à %s: %r", self._callbacks.signature.name, callback)
        removed = False

        def unsubscribe() -> None:
            nonlocal removed
            # Idempotent : un second appel ne retire pas un éventuel doublon.
            if not removed:
                removed = True
                self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        """Retire la dernière occurrence de l'abonné ; ignoré s'il est absent."""

        self._callbacks -= callback

    def publish(self, *args: Any) -> Any:
        """Diffuse l'évènement à tous les abonnés courants."""

        return invoke(self._callbacks, *args)
