# --------------------------------------------------------------
# File: ui.py
# Description: Componentes compartidos por las páginas de proteger y revelar.
# --------------------------------------------------------------
"""Ejecución de lotes con barra de progreso y presentación de resultados."""

from typing import List, Sequence

import streamlit as st

from sealbox.batch import run, summarize
from sealbox.bundle import zip_outputs
from sealbox.config import MAX_FILE_MB
from sealbox.file_utils import build_tasks, file_icon, format_file_size
from sealbox.models import Direction, TaskResult

ICON_EMOJI = {
    "shield": "🛡️",
    "file-text": "📄",
    "file-image": "🖼️",
    "file-archive": "🗜️",
    "file-video": "🎞️",
    "file-audio": "🎵",
    "file-code": "💻",
}


def read_uploads(uploads) -> List[tuple]:
    """Lee los archivos subidos descartando los que superan el límite configurado.

    Args:
        uploads (List[UploadedFile]): Archivos devueltos por `st.file_uploader`.

    Returns:
        List[tuple]: Pares (nombre, bytes) aceptados.
    """
    files = []
    for up in uploads or []:
        if up.size > MAX_FILE_MB * 1024 * 1024:
            st.warning(f"{up.name} supera el límite de {MAX_FILE_MB} MB y se omite.")
            continue
        files.append((up.name, up.getvalue()))
    return files


def process_batch(files: Sequence[tuple], password: str, direction: Direction) -> List[TaskResult]:
    """Valida y procesa el lote mostrando el progreso global.

    Args:
        files (Sequence[tuple]): Pares (nombre, bytes).
        password (str): Passphrase introducida por el usuario.
        direction (Direction): Proteger o revelar.

    Returns:
        List[TaskResult]: Rechazos de validación seguidos de los resultados del lote.
    """
    tasks, rejected = build_tasks(files, direction)
    bar = st.progress(0.0, text="Preparando…")

    def on_progress(done: int, total: int, name: str) -> None:
        bar.progress(done / total, text=f"{done}/{total} · {name}")

    results = run(tasks, password, on_progress)
    bar.empty()
    return rejected + results


def show_results(results: Sequence[TaskResult], zip_name: str) -> None:
    """Muestra el resumen del lote y ofrece las descargas disponibles."""
    summary = summarize(results)
    if summary.failed == 0:
        st.success(f"✅ {summary.succeeded} de {summary.total} archivo(s) procesados.")
    else:
        st.warning(f"{summary.succeeded} correctos · {summary.failed} fallidos.")

    outputs = [r.file for r in results if r.success and r.file]
    for idx, result in enumerate(results):
        if not result.success:
            st.error(f"❌ {result.name}: {result.error}")
            continue
        out = result.file
        emoji = ICON_EMOJI.get(file_icon(out.name), "📁")
        st.download_button(
            f"{emoji} {out.name} ({format_file_size(out.size)})",
            data=out.data,
            file_name=out.name,
            mime="application/octet-stream",
            key=f"dl-{idx}-{out.name}",
        )

    if len(outputs) > 1:
        st.download_button(
            "⬇️ Descargar todo (.zip)",
            data=zip_outputs(outputs),
            file_name=zip_name,
            mime="application/zip",
        )
