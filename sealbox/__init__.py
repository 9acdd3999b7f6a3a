# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del paquete sealbox.
# --------------------------------------------------------------
"""Protección de archivos con passphrase mediante PBKDF2 y AES-256-GCM."""

__all__ = [
    "batch",
    "bundle",
    "config",
    "container",
    "crypto_kdf",
    "crypto_sym",
    "errors",
    "file_utils",
    "models",
    "password_policy",
    "pipeline",
]

__version__ = "1.0.0"
