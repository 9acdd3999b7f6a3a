# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado sin datos asociados."""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sealbox.errors import AuthenticationError

NONCE_SIZE = 12
TAG_SIZE = 16


def _check_nonce(nonce: bytes) -> None:
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"El nonce debe tener {NONCE_SIZE} bytes.")


def aes_gcm_encrypt(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con AES-256-GCM.

    El llamador garantiza que el par (clave, nonce) no se reutiliza.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización de 96 bits.
        plaintext (bytes): Datos en claro.

    Returns:
        bytes: Ciphertext con la etiqueta de 128 bits concatenada al final.

    """

    _check_nonce(nonce)
    return AESGCM(key).encrypt(nonce, plaintext, None)


def aes_gcm_decrypt(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Descifra y verifica datos AES-256-GCM.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Ciphertext con la etiqueta concatenada.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        AuthenticationError: Si la etiqueta no verifica.

    """

    _check_nonce(nonce)
    try:
        return AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        raise AuthenticationError() from exc
