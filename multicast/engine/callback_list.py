"""Liste immuable et ordonnée de cibles de callbacks.

`combine` et `remove` ne modifient jamais une liste existante : ils renvoient
une nouvelle instance (idiome `callbacks += handler` / `callbacks -= handler`).
L'ordre d'insertion est conservé et les doublons sont autorisés ; chaque
occurrence est invoquée séparément.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Tuple, Union

from multicast.engine.errors import SignatureMismatch
from multicast.engine.signature import Signature

Target = Callable[..., Any]


@dataclass(frozen=True)
class CallbackList:
    """Séquence immuable de cibles partageant une même `Signature`."""

    signature: Signature
    targets: Tuple[Target, ...] = ()

    def __post_init__(self) -> None:
        targets = tuple(self.targets)
        for target in targets:
            self.signature.validate(target)
        object.__setattr__(self, "targets", targets)

    @classmethod
    def empty(cls, signature: Signature) -> "CallbackList":
        return cls(signature=signature)

    @classmethod
    def of(cls, signature: Signature, *targets: Target) -> "CallbackList":
        """Construit une liste en combinant les cibles dans l'ordre donné."""

        callbacks = cls.empty(signature)
        for target in targets:
            callbacks = callbacks.combine(target)
        return callbacks

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[Target]:
        return iter(self.targets)

    def __bool__(self) -> bool:
        return bool(self.targets)

    def __add__(self, other: Union[Target, "CallbackList"]) -> "CallbackList":
        return self.combine(other)

    def __sub__(self, other: Union[Target, "CallbackList"]) -> "CallbackList":
        return self.remove(other)

    def combine(self, other: Union[Target, "CallbackList"]) -> "CallbackList":
        """Renvoie une nouvelle liste avec `other` ajouté en fin."""

        if isinstance(other, CallbackList):
            self._check_same_signature(other)
            if not other.targets:
                return self
            return CallbackList(self.signature, self.targets + other.targets)

        self.signature.validate(other)
        return CallbackList(self.signature, self.targets + (other,))

    def remove(self, other: Union[Target, "CallbackList"]) -> "CallbackList":
        """Retire la dernière occurrence de `other` ; no-op si absente."""

        if isinstance(other, CallbackList):
            self._check_same_signature(other)
            run = other.targets
        else:
            run = (other,)

        size = len(run)
        if size == 0 or size > len(self.targets):
            return self

        for start in range(len(self.targets) - size, -1, -1):
            if self.targets[start:start + size] == run:
                remaining = self.targets[:start] + self.targets[start + size:]
                return CallbackList(self.signature, remaining)
        return self

    def snapshot(self) -> Tuple[Target, ...]:
        """Vue ordonnée, indépendante des combinaisons ultérieures."""

        return self.targets

    def _check_same_signature(self, other: "CallbackList") -> None:
        if other.signature != self.signature:
            raise SignatureMismatch(
                self.signature.name,
                other,
                f"liste de signature {other.signature.name}",
            )


def combine(callbacks: CallbackList, target: Union[Target, CallbackList]) -> CallbackList:
    """Renvoie une nouvelle liste avec `target` ajouté en fin."""

    return callbacks.combine(target)


def remove(callbacks: CallbackList, target: Union[Target, CallbackList]) -> CallbackList:
    """Renvoie une nouvelle liste sans la dernière occurrence de `target`."""

    return callbacks.remove(target)


def snapshot(callbacks: CallbackList) -> Tuple[Target, ...]:
    """Renvoie la séquence ordonnée courante, figée."""

    return callbacks.snapshot()
