# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from sealbox.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="SealBox", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 SealBox")
st.write(
    "Protege archivos con una passphrase: PBKDF2-HMAC-SHA-256 (100.000 iteraciones) "
    "+ AES-256-GCM. Todo el proceso ocurre en memoria y nada se guarda en el servidor."
)
st.info(
    "Ve a **Proteger archivos** para cifrar o a **Revelar archivos** para recuperar "
    "archivos `.encrypted` con la misma passphrase."
)
