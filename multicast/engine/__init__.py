"""Moteur de callbacks : signatures, listes immuables, dispatch et transformations."""

from .callback_list import CallbackList, combine, remove, snapshot
from .dispatcher import invoke
from .errors import SignatureMismatch
from .signature import EVENT_HANDLER, PROGRESS_REPORTER, TRANSFORMER, Signature
from .transform import apply_in_place, square

__all__ = [
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
    "square",
]
