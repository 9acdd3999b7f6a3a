# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores del pipeline de protección de archivos.
# --------------------------------------------------------------
"""Excepciones propias de SealBox y sus mensajes visibles para el usuario."""

from __future__ import annotations


class SealBoxError(Exception):
    """Error base de SealBox.

    Attributes:
        kind (str): Identificador estable del tipo de fallo.
        user_message (str): Texto que se muestra en la interfaz.

    """

    kind = "error"
    user_message = "Operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.user_message)


class FormatError(SealBoxError):
    """El contenedor es demasiado corto para alojar salt, nonce y tag."""

    kind = "format"
    user_message = "Not a recognized protected file"


class AuthenticationError(SealBoxError):
    """Falla la verificación del tag AES-GCM.

    No distingue entre passphrase incorrecta y contenedor manipulado.
    """

    kind = "authentication"
    user_message = "Wrong password or corrupted file"


class EmptyInputError(SealBoxError):
    """El archivo de entrada no contiene ningún byte."""

    kind = "empty"
    user_message = "File is empty"


class UnknownError(SealBoxError):
    """Cualquier otro fallo procedente de las primitivas criptográficas."""

    kind = "unknown"
    user_message = "Operation failed"
