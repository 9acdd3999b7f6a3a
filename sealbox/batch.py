# --------------------------------------------------------------
# File: batch.py
# Description: Procesamiento secuencial de lotes con notificación de progreso.
# --------------------------------------------------------------
"""Ejecuta el pipeline sobre una lista de archivos sin abortar ante fallos."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from sealbox.models import BatchSummary, FileTask, TaskResult
from sealbox.pipeline import process_task

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def run(
    tasks: Sequence[FileTask],
    password: str,
    progress_callback: Optional[ProgressCallback] = None,
) -> List[TaskResult]:
    """Procesa las tareas una a una, en el orden recibido.

    Antes de la tarea *i* se notifica `(i, N, nombre)` y al terminarla
    `(i + 1, N, nombre)`, de modo que el progreso alcanza siempre `(N, N)`.
    Un fallo queda registrado como resultado y el lote continúa; no hay
    reintentos.

    Args:
        tasks (Sequence[FileTask]): Tareas en orden.
        password (str): Passphrase compartida por todo el lote.
        progress_callback (Optional[ProgressCallback]): Receptor del progreso.

    Returns:
        List[TaskResult]: Un resultado por tarea, en el mismo orden.

    """

    total = len(tasks)
    results: List[TaskResult] = []
    logger.info("Iniciando lote de %d archivo(s)", total)

    for index, task in enumerate(tasks):
        if progress_callback:
            progress_callback(index, total, task.name)

        results.append(process_task(task, password))

        if progress_callback:
            progress_callback(index + 1, total, task.name)

    summary = summarize(results)
    logger.info("Lote terminado: %d correctos, %d fallidos", summary.succeeded, summary.failed)
    return results


def summarize(results: Sequence[TaskResult]) -> BatchSummary:
    """Agrega los resultados de un lote para mostrarlos al usuario."""

    failures = [(r.name, r.error or "") for r in results if not r.success]
    return BatchSummary(
        total=len(results),
        succeeded=len(results) - len(failures),
        failed=len(failures),
        failures=failures,
    )
