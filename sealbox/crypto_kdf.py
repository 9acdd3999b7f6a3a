# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de claves simétricas mediante PBKDF2-HMAC-SHA-256.
# --------------------------------------------------------------
"""Funciones de derivación de claves a partir de la passphrase del usuario."""

from __future__ import annotations

from typing import Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

# Parámetros fijos de seguridad; no se leen de la configuración.
PBKDF2_ITERATIONS = 100_000
SALT_SIZE = 16
KEY_SIZE = 32


def derive_key(password: Union[str, bytes], salt: bytes) -> bytes:
    """Deriva una clave AES-256 a partir de una passphrase y una salt.

    Args:
        password (Union[str, bytes]): Passphrase del usuario; las cadenas se
            codifican en UTF-8. Se admite la passphrase vacía.
        salt (bytes): Salt aleatoria de 16 bytes asociada al contenedor.

    Returns:
        bytes: Clave simétrica de 256 bits.

    Raises:
        ValueError: Si la salt no tiene 16 bytes.

    """

    if len(salt) != SALT_SIZE:
        raise ValueError(f"La salt debe tener {SALT_SIZE} bytes.")
    if isinstance(password, str):
        password = password.encode("utf-8")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_SIZE,
        salt=salt,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(password)
