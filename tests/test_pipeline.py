# --------------------------------------------------------------
# File: test_pipeline.py
# Description: Pruebas del pipeline de protección y revelado por archivo.
# --------------------------------------------------------------

import os

import pytest

from sealbox import pipeline
from sealbox.errors import AuthenticationError, FormatError
from sealbox.models import Direction
from sealbox.pipeline import (
    PROTECTED_SUFFIX,
    process_task,
    protect_bytes,
    protect_file,
    protected_name,
    reveal_bytes,
    reveal_file,
    revealed_name,
)


def _flip(data: bytes, index: int) -> bytes:
    """Invierte un bit del byte indicado."""
    return data[:index] + bytes([data[index] ^ 0x80]) + data[index + 1 :]


@pytest.mark.parametrize("payload", [b"x", b"0123456789", os.urandom(4096)])
def test_roundtrip(payload, password):
    """Comprueba que revelar lo protegido devuelva el payload original.

    Args:
        payload (bytes): Datos de prueba.
        password (str): Passphrase del fixture.

    Returns:
        None: Las aserciones comparan ambos payloads.
    """
    assert reveal_bytes(protect_bytes(payload, password), password) == payload


def test_end_to_end_sizes_and_wrong_password(password):
    """Escenario completo: 10 bytes producen un contenedor de 54 bytes.

    Returns:
        None: Las aserciones revisan tamaño, recuperación y passphrase errónea.
    """
    blob = protect_bytes(b"0123456789", password)
    assert len(blob) == 16 + 12 + 10 + 16
    assert reveal_bytes(blob, password) == b"0123456789"
    with pytest.raises(AuthenticationError):
        reveal_bytes(blob, "wrong")


def test_protect_is_not_deterministic(password):
    """Verifica que dos protecciones del mismo payload difieran.

    Returns:
        None: Las aserciones comparan salts, nonces y contenedores.
    """
    first = protect_bytes(b"mismo contenido", password)
    second = protect_bytes(b"mismo contenido", password)
    assert first != second
    assert first[:16] != second[:16]
    assert first[16:28] != second[16:28]
    assert reveal_bytes(first, password) == reveal_bytes(second, password)


@pytest.mark.parametrize("index", [16, 20, 27, 28, 33, 37, 40, 53])
def test_tampering_nonce_or_ciphertext_is_detected(index, password):
    """Comprueba que alterar un bit del nonce, ciphertext o tag falle al revelar.

    Args:
        index (int): Offset del byte alterado dentro del contenedor de 54 bytes.

    Returns:
        None: Se espera AuthenticationError.
    """
    blob = protect_bytes(b"0123456789", password)
    with pytest.raises(AuthenticationError):
        reveal_bytes(_flip(blob, index), password)


def test_short_input_fails_without_invoking_cipher(monkeypatch, password):
    """Garantiza que un contenedor corto falle con FormatError antes del cifrado.

    Returns:
        None: Se espera FormatError y que AES-GCM no llegue a ejecutarse.
    """

    def _boom(*_args, **_kwargs):
        raise AssertionError("no debería descifrarse")

    monkeypatch.setattr(pipeline, "aes_gcm_decrypt", _boom)
    monkeypatch.setattr(pipeline, "derive_key", _boom)
    with pytest.raises(FormatError):
        reveal_bytes(b"\x00" * 43, password)


def test_names():
    """Verifica el sufijo de protección y su eliminación opcional.

    Returns:
        None: Las aserciones revisan los nombres generados.
    """
    assert PROTECTED_SUFFIX == ".encrypted"
    assert protected_name("informe.pdf") == "informe.pdf.encrypted"
    assert revealed_name("informe.pdf.encrypted") == "informe.pdf"
    assert revealed_name("informe.bin") == "informe.bin"


def test_protect_and_reveal_file_results(make_task, password):
    """Comprueba los resultados satisfactorios en ambos sentidos.

    Returns:
        None: Las aserciones revisan nombre, tamaño y contenido.
    """
    protected = protect_file(make_task("nota.txt", b"hola"), password)
    assert protected.success and protected.error is None
    assert protected.file.name == "nota.txt.encrypted"
    assert protected.file.size == len(protected.file.data) == 4 + 44
    assert protected.file.original_name == "nota.txt"

    revealed = reveal_file(
        make_task(protected.file.name, protected.file.data, Direction.REVEAL), password
    )
    assert revealed.success
    assert revealed.file.name == "nota.txt"
    assert revealed.file.data == b"hola"


def test_reveal_without_suffix_keeps_name(make_task, password):
    """El sufijo no es obligatorio para revelar; el nombre se conserva.

    Returns:
        None: Las aserciones revisan el nombre de salida.
    """
    blob = protect_bytes(b"datos", password)
    result = process_task(make_task("copia.bin", blob, Direction.REVEAL), password)
    assert result.success
    assert result.file.name == "copia.bin"


def test_wrong_password_becomes_failed_result(make_task, password):
    """Verifica que una passphrase errónea no lance y no entregue bytes.

    Returns:
        None: Las aserciones revisan el motivo y la ausencia de salida.
    """
    blob = protect_bytes(b"datos", password)
    result = reveal_file(make_task("a.encrypted", blob, Direction.REVEAL), "wrong")
    assert not result.success
    assert result.file is None
    assert result.error == "Wrong password or corrupted file"
    assert result.error_kind == "authentication"


def test_short_container_becomes_format_failure(make_task, password):
    """Comprueba la conversión de FormatError en resultado fallido.

    Returns:
        None: Las aserciones revisan el motivo devuelto.
    """
    result = reveal_file(make_task("x.encrypted", b"corto", Direction.REVEAL), password)
    assert not result.success
    assert result.error == "Not a recognized protected file"
    assert result.error_kind == "format"


def test_unexpected_error_is_captured(monkeypatch, make_task, password):
    """Garantiza que un fallo inesperado de la primitiva quede encapsulado.

    Returns:
        None: Las aserciones revisan el mensaje propagado.
    """

    def _broken(*_args, **_kwargs):
        raise RuntimeError("backend no disponible")

    monkeypatch.setattr(pipeline, "aes_gcm_encrypt", _broken)
    result = process_task(make_task("a.txt", b"datos"), password)
    assert not result.success
    assert result.error == "backend no disponible"
    assert result.error_kind == "unknown"


def test_unexpected_error_without_message_uses_generic_reason(monkeypatch, make_task, password):
    """Un fallo sin mensaje se presenta como "Operation failed".

    Returns:
        None: Las aserciones revisan el mensaje genérico.
    """

    def _broken(*_args, **_kwargs):
        raise RuntimeError()

    monkeypatch.setattr(pipeline, "aes_gcm_encrypt", _broken)
    result = process_task(make_task("a.txt", b"datos"), password)
    assert result.error == "Operation failed"
