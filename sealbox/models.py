# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del pipeline de protección de archivos.
# --------------------------------------------------------------
"""Modelos Pydantic que describen tareas, resultados y contenedores."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class Direction(str, Enum):
    """Sentido de la operación sobre un archivo."""

    PROTECT = "protect"
    REVEAL = "reveal"


class ContainerParts(BaseModel):
    """Vista descompuesta de un contenedor protegido.

    Attributes:
        salt (bytes): Salt de 16 bytes usada en la derivación.
        nonce (bytes): Nonce de 12 bytes usado por AES-GCM.
        ciphertext (bytes): Ciphertext con la etiqueta concatenada.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    nonce: bytes
    ciphertext: bytes


class FileTask(BaseModel):
    """Archivo enviado al pipeline junto con el sentido de la operación.

    Attributes:
        name (str): Nombre visible del archivo.
        data (bytes): Contenido completo del archivo.
        direction (Direction): Proteger o revelar.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: bytes
    direction: Direction


class OutputFile(BaseModel):
    """Archivo producido por una tarea satisfactoria."""

    name: str
    size: int
    data: bytes
    original_name: str


class TaskResult(BaseModel):
    """Resultado etiquetado de una tarea: archivo producido o motivo de fallo.

    Attributes:
        name (str): Nombre de la tarea de origen.
        success (bool): Indica si se produjo un archivo.
        file (Optional[OutputFile]): Salida, solo presente si `success`.
        error (Optional[str]): Motivo legible del fallo.
        error_kind (Optional[str]): Tipo de fallo (`format`, `authentication`...).

    """

    model_config = ConfigDict(frozen=True)

    name: str
    success: bool
    file: Optional[OutputFile] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None

    @model_validator(mode="after")
    def _file_only_on_success(self) -> "TaskResult":
        # Un fallo nunca entrega bytes parciales.
        if self.success and self.file is None:
            raise ValueError("Un resultado satisfactorio requiere `file`.")
        if not self.success and self.file is not None:
            raise ValueError("Un resultado fallido no puede incluir `file`.")
        return self

    @classmethod
    def ok(cls, name: str, file: OutputFile) -> "TaskResult":
        return cls(name=name, success=True, file=file)

    @classmethod
    def failed(cls, name: str, error: str, kind: str) -> "TaskResult":
        return cls(name=name, success=False, error=error, error_kind=kind)


class BatchSummary(BaseModel):
    """Resumen agregado de un lote para la interfaz."""

    total: int
    succeeded: int
    failed: int
    failures: List[Tuple[str, str]] = []


class PasswordStrength(BaseModel):
    """Evaluación orientativa de una passphrase.

    Attributes:
        score (int): Puntuación entre 0 y 5.
        label (str): Etiqueta legible asociada a la puntuación.
        suggestions (List[str]): Recomendaciones para mejorarla.

    """

    score: int
    label: str
    suggestions: List[str] = []
