# --------------------------------------------------------------
# File: file_utils.py
# Description: Validación previa y utilidades de presentación de archivos.
# --------------------------------------------------------------
"""Comprobaciones del lado del llamador antes de entrar en el pipeline."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sealbox.errors import EmptyInputError
from sealbox.models import Direction, FileTask, TaskResult
from sealbox.pipeline import PROTECTED_SUFFIX

NOT_ENCRYPTED_MESSAGE = "File does not appear to be encrypted"

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]

ICONS = {
    "file-text": {"pdf", "doc", "docx", "txt", "rtf"},
    "file-spreadsheet": {"xls", "xlsx", "csv"},
    "file-presentation": {"ppt", "pptx"},
    "file-image": {"jpg", "jpeg", "png", "gif", "bmp", "svg", "webp"},
    "file-video": {"mp4", "avi", "mkv", "mov", "wmv", "flv", "webm"},
    "file-audio": {"mp3", "wav", "ogg", "flac", "aac", "m4a"},
    "file-code": {
        "js", "ts", "jsx", "tsx", "html", "css", "json", "xml", "py", "java", "cpp", "c",
    },
    "file-archive": {"zip", "rar", "7z", "tar", "gz"},
    "shield": {PROTECTED_SUFFIX.lstrip(".")},
}


def format_file_size(size: int) -> str:
    """Formatea un tamaño en bytes con unidades binarias (1 KB = 1024 bytes)."""

    if size <= 0:
        return "0 Bytes"
    exp = 0
    value = float(size)
    while value >= 1024 and exp < len(SIZE_UNITS) - 1:
        value /= 1024
        exp += 1
    value = round(value, 2)
    return f"{value:g} {SIZE_UNITS[exp]}"


def file_icon(name: str) -> str:
    """Devuelve la categoría de icono según la extensión del archivo."""

    ext = name.lower().rsplit(".", 1)[-1] if "." in name else ""
    for icon, extensions in ICONS.items():
        if ext in extensions:
            return icon
    return "file"


def validate_file(name: str, data: bytes, direction: Direction) -> Tuple[bool, Optional[str]]:
    """Valida un archivo antes de crear su tarea.

    Args:
        name (str): Nombre visible del archivo.
        data (bytes): Contenido del archivo.
        direction (Direction): Operación solicitada.

    Returns:
        Tuple[bool, Optional[str]]: Validez y motivo del rechazo.

    """

    if not data:
        return False, EmptyInputError.user_message
    if direction is Direction.REVEAL and not name.endswith(PROTECTED_SUFFIX):
        return False, NOT_ENCRYPTED_MESSAGE
    return True, None


def build_tasks(
    files: Iterable[Tuple[str, bytes]], direction: Direction
) -> Tuple[List[FileTask], List[TaskResult]]:
    """Convierte pares (nombre, bytes) en tareas válidas y rechazos.

    Args:
        files (Iterable[Tuple[str, bytes]]): Archivos seleccionados.
        direction (Direction): Operación solicitada para todo el lote.

    Returns:
        Tuple[List[FileTask], List[TaskResult]]: Tareas aceptadas y resultados
        fallidos de los archivos rechazados.

    """

    tasks: List[FileTask] = []
    rejected: List[TaskResult] = []
    for name, data in files:
        ok, error = validate_file(name, data, direction)
        if ok:
            tasks.append(FileTask(name=name, data=data, direction=direction))
        else:
            kind = EmptyInputError.kind if not data else "validation"
            rejected.append(TaskResult.failed(name, error or "", kind))
    return tasks, rejected
