"""Rapport de progression multicast pour un travail long.

`hard_work` invoque une `CallbackList` de `ProgressReporter` à chaque étape ;
plusieurs observateurs indépendants (console, fichier) peuvent s'y combiner.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Any, Callable, TextIO, Union

from multicast.config import DEFAULT_SETTINGS
from multicast.engine.callback_list import CallbackList
from multicast.engine.dispatcher import invoke
from multicast.engine.errors import SignatureMismatch
from multicast.engine.signature import PROGRESS_REPORTER


def hard_work(
    reporter: Union[CallbackList, Callable[[int], Any]],
    steps: int = DEFAULT_SETTINGS.progress_steps,
    pause: float = DEFAULT_SETTINGS.progress_pause,
) -> None:
    """Simule un travail en `steps` étapes et rapporte le pourcentage accompli."""

    if not isinstance(reporter, CallbackList):
        # Un simple appelable est traité comme une liste à une seule cible.
        reporter = CallbackList.of(PROGRESS_REPORTER, reporter)
    if reporter.signature != PROGRESS_REPORTER:
        raise SignatureMismatch(
            PROGRESS_REPORTER.name, reporter, f"liste de signature {reporter.signature.name}"
        )
    if steps <= 0:
        raise ValueError(f"steps doit être strictement positif (reçu: {steps})")

    for step in range(steps):
        invoke(reporter, step * 100 // steps)
        if pause:
            time.sleep(pause)


class ConsoleProgressWriter:
    """Écrit chaque pourcentage sur une ligne du flux donné."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def __call__(self, percent_complete: int) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{percent_complete}\n")


class FileProgressWriter:
    """Remplace le contenu du fichier par le dernier pourcentage reçu."""

    def __init__(self, path: str | Path = DEFAULT_SETTINGS.progress_file) -> None:
        self.path = Path(path)

    def __call__(self, percent_complete: int) -> None:
        self.path.write_text(str(percent_complete), encoding="utf-8")
