"""Erreurs levées par le moteur de callbacks."""

from __future__ import annotations


class SignatureMismatch(TypeError):
    """Une cible ne respecte pas la signature déclarée de la liste.

    Levée à l'enregistrement (jamais au moment du dispatch).
    """

    def __init__(self, signature_name: str, target: object, reason: str) -> None:
        super().__init__(f"{target!r} incompatible avec {signature_name}: {reason}")
        self.signature_name = signature_name
        self.target = target
        self.reason = reason
