"""CSV serialization of a flashcard set."""

from __future__ import annotations

import csv
import io
from typing import Iterable

from cardsmith.core.exceptions import ExportError
from cardsmith.modules.flashcards.models import Flashcard

CSV_HEADER = ("Term", "Definition")
CSV_FILENAME = "flashcards.csv"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def to_csv(flashcards: Iterable[Flashcard]) -> str:
    """Header plus one row per card, rows joined by ``\\n``, no trailing newline."""
    cards = list(flashcards)
    if not cards:
        raise ExportError()

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for card in cards:
        writer.writerow((card.term, card.definition))
    return buf.getvalue().removesuffix("\n")
