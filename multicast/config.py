"""Paramètres du paquet `multicast`.

Les valeurs par défaut reproduisent les démonstrations d'origine (alerte à
+10 %, dix étapes de progression). Chaque champ peut être surchargé par une
variable d'environnement `MULTICAST_*` via `Settings.from_env()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping

ENV_PREFIX = "MULTICAST_"


@dataclass(frozen=True)
class Settings:
    """Configuration immuable, validée à la construction."""

    alert_threshold: Decimal = Decimal("0.1")
    progress_steps: int = 10
    progress_pause: float = 0.0
    progress_file: str = "progress.txt"

    def __post_init__(self) -> None:
        if self.alert_threshold < 0:
            raise ValueError(
                f"alert_threshold doit être positif ou nul (reçu: {self.alert_threshold})"
            )
        if self.progress_steps <= 0:
            raise ValueError(
                f"progress_steps doit être strictement positif (reçu: {self.progress_steps})"
            )
        if self.progress_pause < 0:
            raise ValueError(
                f"progress_pause doit être positif ou nul (reçu: {self.progress_pause})"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Construit des paramètres à partir de l'environnement (ou d'un mapping)."""

        env = os.environ if environ is None else environ
        defaults = cls()

        def _read(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value is not None and value.strip() else None

        raw_threshold = _read("ALERT_THRESHOLD")
        raw_steps = _read("PROGRESS_STEPS")
        raw_pause = _read("PROGRESS_PAUSE")

        try:
            threshold = Decimal(raw_threshold) if raw_threshold else defaults.alert_threshold
        except InvalidOperation as exc:
            raise ValueError(
                f"{ENV_PREFIX}ALERT_THRESHOLD invalide: {raw_threshold!r}"
            ) from exc

        return cls(
            alert_threshold=threshold,
            progress_steps=int(raw_steps) if raw_steps else defaults.progress_steps,
            progress_pause=float(raw_pause) if raw_pause else defaults.progress_pause,
            progress_file=_read("PROGRESS_FILE") or defaults.progress_file,
        )


DEFAULT_SETTINGS = Settings()
