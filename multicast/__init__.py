"""Listes de callbacks immuables, dispatch synchrone et éditeurs d'évènements."""

from .config import DEFAULT_SETTINGS, Settings
from .engine import (
    EVENT_HANDLER,
    PROGRESS_REPORTER,
    TRANSFORMER,
    CallbackList,
    Signature,
    SignatureMismatch,
    apply_in_place,
    combine,
    invoke,
    remove,
    snapshot,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "Settings",
    "CallbackList",
    "Signature",
    "SignatureMismatch",
    "TRANSFORMER",
    "PROGRESS_REPORTER",
    "EVENT_HANDLER",
    "apply_in_place",
    "combine",
    "invoke",
    "remove",
    "snapshot",
]
