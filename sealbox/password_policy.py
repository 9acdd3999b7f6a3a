# --------------------------------------------------------------
# File: password_policy.py
# Description: Evaluación orientativa de la robustez de passphrases.
# --------------------------------------------------------------
"""Puerta de política previa a proteger archivos.

El pipeline no impone ninguna robustez mínima; esta evaluación la usa la
interfaz para bloquear passphrases débiles antes de enviar el lote.
"""

from __future__ import annotations

import re
from typing import List

from sealbox.config import MIN_PASSWORD_SCORE
from sealbox.models import PasswordStrength

COMMON = {
    "123456",
    "123456789",
    "12345678",
    "qwerty",
    "password",
    "111111",
    "123123",
    "000000",
    "abc123",
    "letmein",
    "iloveyou",
    "admin",
    "welcome",
    "monkey",
    "dragon",
    "football",
    "baseball",
    "princess",
    "qwertyuiop",
    "passw0rd",
}

LABELS = ["Very Weak", "Weak", "Fair", "Good", "Strong"]

LOWER = re.compile(r"[a-z]")
UPPER = re.compile(r"[A-Z]")
DIGIT = re.compile(r"[0-9]")
SYMBOL = re.compile(r"[^a-zA-Z0-9]")

MIN_LENGTH = 8


def check_password_strength(password: str) -> PasswordStrength:
    """Puntúa la passphrase de 0 a 5 y sugiere mejoras.

    Suma un punto por longitud mínima, minúsculas, mayúsculas, dígitos y
    símbolos. Las contraseñas de la lista de comunes puntúan 0.

    Args:
        password (str): Passphrase propuesta.

    Returns:
        PasswordStrength: Puntuación, etiqueta y sugerencias.

    """

    suggestions: List[str] = []
    score = 0

    checks = [
        (len(password) >= MIN_LENGTH, f"Use at least {MIN_LENGTH} characters"),
        (LOWER.search(password) is not None, "Include lowercase letters"),
        (UPPER.search(password) is not None, "Include uppercase letters"),
        (DIGIT.search(password) is not None, "Include numbers"),
        (SYMBOL.search(password) is not None, "Include special characters"),
    ]
    for passed, suggestion in checks:
        if passed:
            score += 1
        else:
            suggestions.append(suggestion)

    if password.lower() in COMMON:
        score = 0
        suggestions.append("Avoid common passwords")

    label = LABELS[min(score, len(LABELS) - 1)]
    return PasswordStrength(score=score, label=label, suggestions=suggestions)


def is_acceptable(password: str, min_score: int = MIN_PASSWORD_SCORE) -> bool:
    """Indica si la passphrase supera la puntuación mínima configurada."""

    return bool(password) and check_password_strength(password).score >= min_score
