# --------------------------------------------------------------
# File: pipeline.py
# Description: Protección y revelado de un único archivo en memoria.
# --------------------------------------------------------------
"""Orquesta KDF, AES-GCM y contenedor para un archivo en ambos sentidos.

Las funciones `*_bytes` lanzan excepciones; `protect_file`, `reveal_file` y
`process_task` las convierten en un `TaskResult` y nunca las propagan.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from sealbox import container
from sealbox.crypto_kdf import SALT_SIZE, derive_key
from sealbox.crypto_sym import NONCE_SIZE, aes_gcm_decrypt, aes_gcm_encrypt
from sealbox.errors import SealBoxError, UnknownError
from sealbox.models import Direction, FileTask, OutputFile, TaskResult

logger = logging.getLogger(__name__)

PROTECTED_SUFFIX = ".encrypted"


def protected_name(name: str) -> str:
    """Devuelve el nombre del archivo protegido."""

    return name + PROTECTED_SUFFIX


def revealed_name(name: str) -> str:
    """Quita el sufijo de protección si está presente."""

    if name.endswith(PROTECTED_SUFFIX):
        return name[: -len(PROTECTED_SUFFIX)]
    return name


def protect_bytes(data: bytes, password: str) -> bytes:
    """Cifra un payload y lo empaqueta en un contenedor.

    Cada llamada genera salt y nonce nuevos, por lo que dos contenedores del
    mismo payload y passphrase nunca coinciden.

    Args:
        data (bytes): Payload en claro.
        password (str): Passphrase del usuario.

    Returns:
        bytes: Contenedor `salt | nonce | ciphertext+tag`.

    """

    salt = os.urandom(SALT_SIZE)
    nonce = os.urandom(NONCE_SIZE)
    key = derive_key(password, salt)
    ciphertext = aes_gcm_encrypt(key, nonce, data)
    del key
    return container.encode(salt, nonce, ciphertext)


def reveal_bytes(blob: bytes, password: str) -> bytes:
    """Recupera el payload original de un contenedor.

    Args:
        blob (bytes): Contenedor completo.
        password (str): Passphrase usada al proteger.

    Returns:
        bytes: Payload en claro.

    Raises:
        FormatError: Si el contenedor es demasiado corto.
        AuthenticationError: Si la passphrase es incorrecta o los datos están
            alterados.

    """

    parts = container.decode(blob)
    key = derive_key(password, parts.salt)
    plaintext = aes_gcm_decrypt(key, parts.nonce, parts.ciphertext)
    del key
    return plaintext


def _as_failure(task: FileTask, exc: Exception) -> TaskResult:
    if isinstance(exc, SealBoxError):
        return TaskResult.failed(task.name, exc.user_message, exc.kind)
    return TaskResult.failed(
        task.name, str(exc) or UnknownError.user_message, UnknownError.kind
    )


def _run_guarded(
    task: FileTask,
    password: str,
    transform: Callable[[bytes, str], bytes],
    rename: Callable[[str], str],
) -> TaskResult:
    try:
        output = transform(task.data, password)
    except Exception as exc:
        result = _as_failure(task, exc)
        logger.warning(
            "Tarea %s (%s) fallida: %s", task.name, task.direction.value, result.error_kind
        )
        return result

    out_name = rename(task.name)
    logger.info(
        "Tarea %s (%s) completada: %d -> %d bytes",
        task.name,
        task.direction.value,
        len(task.data),
        len(output),
    )
    return TaskResult.ok(
        task.name,
        OutputFile(name=out_name, size=len(output), data=output, original_name=task.name),
    )


def protect_file(task: FileTask, password: str) -> TaskResult:
    """Protege un archivo y devuelve su resultado sin lanzar excepciones.

    Args:
        task (FileTask): Archivo a proteger.
        password (str): Passphrase del usuario.

    Returns:
        TaskResult: Archivo `<nombre>.encrypted` o motivo del fallo.

    """

    return _run_guarded(task, password, protect_bytes, protected_name)


def reveal_file(task: FileTask, password: str) -> TaskResult:
    """Revela un archivo protegido y devuelve su resultado sin lanzar excepciones.

    El sufijo `.encrypted` no es obligatorio: solo importan los bytes.

    Args:
        task (FileTask): Contenedor a revelar.
        password (str): Passphrase usada al proteger.

    Returns:
        TaskResult: Archivo original o motivo del fallo.

    """

    return _run_guarded(task, password, reveal_bytes, revealed_name)


def process_task(task: FileTask, password: str) -> TaskResult:
    """Despacha la tarea según su dirección."""

    if task.direction is Direction.PROTECT:
        return protect_file(task, password)
    return reveal_file(task, password)
