"""Load a text file to use verbatim as the next topic."""

from __future__ import annotations

from pathlib import Path

from cardsmith.core.exceptions import FileImportError
from cardsmith.core.logging import get_logger

logger = get_logger(__name__)


def decode_text(data: bytes, filename: str | None = None) -> str:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FileImportError(str(e), filename=filename) from e
    logger.info("Loaded %s (%d chars)", filename or "<upload>", len(text))
    return text


def read_text_file(path: str | Path) -> str:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileImportError(e.strerror or str(e), filename=path.name) from e
    return decode_text(data, filename=path.name)


def loaded_message(filename: str) -> str:
    return f'File "{filename}" loaded.'
