# --------------------------------------------------------------
# File: 2_Revelar_archivos.py
# Description: Recupera el contenido original de archivos protegidos.
# --------------------------------------------------------------

import streamlit as st

from ui import process_batch, read_uploads, show_results
from sealbox.models import Direction

st.title("🔓 Revelar archivos")

uploads = st.file_uploader(
    "Selecciona archivos .encrypted", type=["encrypted"], accept_multiple_files=True
)
password = st.text_input("Passphrase", type="password")

if st.button("Revelar", disabled=not (uploads and password)):
    files = read_uploads(uploads)
    st.session_state["reveal_results"] = process_batch(files, password, Direction.REVEAL)

if st.session_state.get("reveal_results"):
    st.markdown("### Resultados")
    show_results(st.session_state["reveal_results"], "sealbox-revelados.zip")
