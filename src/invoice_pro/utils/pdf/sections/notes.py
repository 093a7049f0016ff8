from __future__ import annotations

from textwrap import wrap

from invoice_pro.utils.pdf.core.layout_common import (
    BODY_SIZE,
    CONTENT_W,
    MARGIN_X,
    NOTES_LEADING,
    NOTES_TEXT_OFFSET,
)
from invoice_pro.utils.pdf.core.ops import DrawOp, TextBlock, TextRun


def wrap_notes(text: str, width: float = CONTENT_W, size: int = BODY_SIZE) -> list[str]:
    """Wrap each paragraph to the number of characters that fit in `width`."""
    chars = max(10, int(width / (size * 0.52)))
    lines: list[str] = []
    for paragraph in text.splitlines():
        lines.extend(wrap(paragraph, chars) or [""])
    return lines


def render_notes(notes: str, start_y: float) -> list[DrawOp]:
    if not notes.strip():
        return []
    return [
        TextRun("Notes:", MARGIN_X, start_y, BODY_SIZE, bold=True),
        TextBlock(
            wrap_notes(notes),
            MARGIN_X,
            start_y + NOTES_TEXT_OFFSET,
            BODY_SIZE,
            NOTES_LEADING,
            CONTENT_W,
        ),
    ]
