# --------------------------------------------------------------
# File: config.py
# Description: Configuración de la aplicación leída del entorno y de .env.
# --------------------------------------------------------------
"""Parámetros operativos de SealBox.

Los parámetros criptográficos (iteraciones, tamaños, sufijo) son constantes de
sus módulos y no se exponen aquí.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("SEALBOX_LOG_LEVEL", "INFO").upper()
MAX_FILE_MB = int(os.getenv("SEALBOX_MAX_FILE_MB", "100"))
MIN_PASSWORD_SCORE = int(os.getenv("SEALBOX_MIN_PASSWORD_SCORE", "3"))

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configura el logging raíz con el nivel indicado o el de `SEALBOX_LOG_LEVEL`."""

    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
