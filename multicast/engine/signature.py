"""Signatures de callbacks (équivalent Python d'un type délégué)."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from multicast.engine.errors import SignatureMismatch


@dataclass(frozen=True)
class Signature:
    """Forme fixe (paramètres, valeur de retour) partagée par une liste de cibles.

    `returns_value` distingue les signatures « void » des signatures dont le
    dispatcher doit renvoyer la dernière valeur. `default` est la valeur
    renvoyée par l'invocation d'une liste vide.
    """

    name: str
    parameters: Tuple[str, ...]
    returns_value: bool = False
    default: Any = None

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def validate(self, target: Callable[..., Any]) -> None:
        """Vérifie qu'une cible peut être appelée avec `arity` arguments positionnels."""

        if not callable(target):
            raise SignatureMismatch(self.name, target, "la cible n'est pas appelable")

        try:
            target_signature = inspect.signature(target)
        except (TypeError, ValueError):
            # Builtins sans signature introspectable : acceptés tels quels.
            return

        try:
            target_signature.bind(*(None,) * self.arity)
        except TypeError as exc:
            expected = ", ".join(self.parameters) or "aucun paramètre"
            raise SignatureMismatch(
                self.name, target, f"attendu ({expected}): {exc}"
            ) from exc


TRANSFORMER = Signature("Transformer", ("x",), returns_value=True, default=0)
PROGRESS_REPORTER = Signature("ProgressReporter", ("percent_complete",))
EVENT_HANDLER = Signature("EventHandler", ("sender", "event"))
