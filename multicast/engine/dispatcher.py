"""Invocation synchrone d'une `CallbackList`."""

from __future__ import annotations

import logging
from typing import Any

from multicast.engine.callback_list import CallbackList

logger = logging.getLogger(__name__)


def invoke(callbacks: CallbackList, *args: Any) -> Any:
    """Appelle chaque cible d'un snapshot de `callbacks`, dans l'ordre.

    Pour une signature avec valeur de retour, renvoie la valeur de la dernière
    cible (les précédentes sont calculées puis ignorées) ; une liste vide
    renvoie `signature.default`. Une signature « void » renvoie toujours
    `None`.

    La première exception levée par une cible interrompt la diffusion : les
    cibles suivantes ne sont pas appelées et l'exception remonte telle quelle.
    """

    signature = callbacks.signature
    if len(args) != signature.arity:
        raise TypeError(
            f"{signature.name} attend {signature.arity} argument(s), reçu {len(args)}"
        )

    targets = callbacks.snapshot()
    logger.debug("Dispatch %s vers %d cible(s)", signature.name, len(targets))

    result = signature.default
    for target in targets:
        result = target(*args)

    return result if signature.returns_value else None
