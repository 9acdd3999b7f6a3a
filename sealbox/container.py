# --------------------------------------------------------------
# File: container.py
# Description: Formato binario del contenedor salt | nonce | ciphertext+tag.
# --------------------------------------------------------------
"""Codificación y análisis del contenedor autocontenido de SealBox.

Disposición de bytes::

    offset 0   salt        (16 bytes)
    offset 16  nonce       (12 bytes)
    offset 28  ciphertext || tag (longitud del claro + 16 bytes)

No hay prefijos de longitud: salt y nonce tienen tamaño fijo y la etiqueta
va al final del ciphertext.
"""

from sealbox.crypto_kdf import SALT_SIZE
from sealbox.crypto_sym import NONCE_SIZE, TAG_SIZE
from sealbox.errors import FormatError
from sealbox.models import ContainerParts

HEADER_SIZE = SALT_SIZE + NONCE_SIZE
MIN_CONTAINER_SIZE = HEADER_SIZE + TAG_SIZE


def encode(salt: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Concatena salt, nonce y ciphertext en un único blob.

    Args:
        salt (bytes): Salt de 16 bytes.
        nonce (bytes): Nonce de 12 bytes.
        ciphertext (bytes): Ciphertext con la etiqueta concatenada.

    Returns:
        bytes: Contenedor listo para almacenar o descargar.

    """

    if len(salt) != SALT_SIZE or len(nonce) != NONCE_SIZE:
        raise ValueError("Salt o nonce con longitud inesperada.")
    return salt + nonce + ciphertext


def decode(blob: bytes) -> ContainerParts:
    """Separa un contenedor en sus componentes.

    Solo valida la longitud mínima; la autenticidad la comprueba AES-GCM.

    Args:
        blob (bytes): Bytes del contenedor.

    Returns:
        ContainerParts: Salt, nonce y ciphertext con etiqueta.

    Raises:
        FormatError: Si el blob es más corto que cabecera más etiqueta.

    """

    if len(blob) < MIN_CONTAINER_SIZE:
        raise FormatError()
    return ContainerParts(
        salt=blob[:SALT_SIZE],
        nonce=blob[SALT_SIZE:HEADER_SIZE],
        ciphertext=blob[HEADER_SIZE:],
    )
