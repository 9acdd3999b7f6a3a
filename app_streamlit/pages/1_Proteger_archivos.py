# --------------------------------------------------------------
# File: 1_Proteger_archivos.py
# Description: Carga, protección con passphrase y descarga de archivos cifrados.
# --------------------------------------------------------------

import streamlit as st

from ui import process_batch, read_uploads, show_results
from sealbox.models import Direction
from sealbox.password_policy import check_password_strength, is_acceptable

st.title("🔒 Proteger archivos")

uploads = st.file_uploader("Selecciona uno o varios archivos", accept_multiple_files=True)
password = st.text_input("Passphrase", type="password")
confirm = st.text_input("Repite la passphrase", type="password")

# Muestra la evaluación orientativa de la passphrase.
if password:
    strength = check_password_strength(password)
    st.progress(min(strength.score, 4) / 4, text=f"Robustez: {strength.label}")
    for tip in strength.suggestions:
        st.caption(f"• {tip}")

ready = bool(uploads) and is_acceptable(password) and password == confirm
if password and confirm and password != confirm:
    st.warning("Las passphrases no coinciden.")

if st.button("Proteger", disabled=not ready):
    files = read_uploads(uploads)
    st.session_state["protect_results"] = process_batch(files, password, Direction.PROTECT)

if st.session_state.get("protect_results"):
    st.markdown("### Resultados")
    st.caption("Guarda la passphrase: sin ella no es posible recuperar los archivos.")
    show_results(st.session_state["protect_results"], "sealbox-protegidos.zip")
