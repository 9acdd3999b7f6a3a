# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y generar tareas.
# --------------------------------------------------------------

from typing import Callable, Iterator

import pytest

from sealbox.models import Direction, FileTask


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina variables SEALBOX_* del entorno durante cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for var in ("SEALBOX_LOG_LEVEL", "SEALBOX_MAX_FILE_MB", "SEALBOX_MIN_PASSWORD_SCORE"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def password() -> str:
    """Passphrase de referencia usada en los escenarios de extremo a extremo."""
    return "Tr0ub4dor&3"


@pytest.fixture
def make_task() -> Callable[..., FileTask]:
    """Fábrica de tareas para simplificar la construcción de lotes.

    Returns:
        Callable[..., FileTask]: Función `(name, data, direction)` que crea la tarea.
    """

    def _make(name: str, data: bytes, direction: Direction = Direction.PROTECT) -> FileTask:
        return FileTask(name=name, data=data, direction=direction)

    return _make
