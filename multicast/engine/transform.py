"""Application d'une fonction plug-in sur chaque élément d'une séquence."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from multicast.engine.signature import TRANSFORMER


def square(x: Any) -> Any:
    return x * x


def apply_in_place(values: MutableSequence[Any], transform: Callable[[Any], Any]) -> None:
    """Remplace `values[i]` par `transform(values[i])`, par indices croissants.

    Accepte toute séquence mutable indexable (listes, `numpy.ndarray`, ...).
    """

    TRANSFORMER.validate(transform)
    for index in range(len(values)):
        values[index] = transform(values[index])
