# --------------------------------------------------------------
# File: bundle.py
# Description: Empaquetado ZIP de varias salidas para una única descarga.
# --------------------------------------------------------------
"""Agrupa los archivos producidos por un lote en un ZIP en memoria."""

import io
import zipfile
from typing import Iterable, Set

from sealbox.models import OutputFile


def _numbered(name: str, counter: int) -> str:
    """Inserta ` (n)` antes de la última extensión; los dotfiles no tienen extensión."""

    stem, dot, ext = name.rpartition(".")
    if not stem:
        return f"{name} ({counter})"
    return f"{stem} ({counter}){dot}{ext}"


def zip_outputs(files: Iterable[OutputFile]) -> bytes:
    """Empaqueta las salidas en un ZIP, desambiguando nombres repetidos.

    Un nombre ya escrito recibe el primer sufijo ` (n)` libre, de modo que
    ninguna entrada del ZIP sobrescribe a otra al descomprimir.

    Args:
        files (Iterable[OutputFile]): Archivos producidos con éxito.

    Returns:
        bytes: Contenido del ZIP.

    """

    written: Set[str] = set()
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for out in files:
            name = out.name
            counter = 0
            while name in written:
                counter += 1
                name = _numbered(out.name, counter)
            written.add(name)
            archive.writestr(name, out.data)
    return buffer.getvalue()
