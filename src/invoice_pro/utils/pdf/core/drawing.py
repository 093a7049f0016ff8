"""
Translate draw ops into PDF content-stream operators.

Ops use a top-left origin; PDF user space starts bottom-left, so every y is
flipped against the page height here.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

from invoice_pro.utils.logs import logger
from invoice_pro.utils.pdf.core.layout_common import PAGE_H
from invoice_pro.utils.pdf.core.ops import ALIGN_RIGHT, DrawOp, FilledRect, QrCode, TextBlock, TextRun

REGULAR_FONT = "/F1"
BOLD_FONT = "/F2"
# Byte encoding of the content stream; matches /WinAnsiEncoding of the fonts.
PDF_ENCODING = "cp1252"

log = logger(__file__)


def _fold_text(text: str) -> tuple[str, bool]:
    """
    Keep characters the built-in Type1 fonts can show; strip diacritics from
    the rest. Returns (text, whether anything was dropped).
    """
    out = []
    dropped = False
    for char in str(text):
        try:
            char.encode(PDF_ENCODING)
        except UnicodeEncodeError:
            folded = unicodedata.normalize("NFKD", char).encode("ascii", "ignore").decode("ascii")
            dropped = dropped or not folded
            out.append(folded)
        else:
            out.append(char)
    return "".join(out), dropped


def _escape_pdf_text(text: str) -> str:
    safe, dropped = _fold_text(text)
    if dropped:
        log.warning("Dropped characters the PDF fonts cannot show from %r", text)
    return safe.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def text_width(text: str, size: float, bold: bool = False) -> float:
    """Approximate Helvetica advance width."""
    return len(_fold_text(text)[0]) * size * (0.56 if bold else 0.52)


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _draw_text(text: str, x: float, y: float, font: str, size: int, color: str) -> str:
    safe = _escape_pdf_text(text)
    return f"{color} rg BT {font} {size} Tf {_fmt(x)} {_fmt(PAGE_H - y)} Td ({safe}) Tj ET\n"


def _draw_rect(x: float, y: float, w: float, h: float, color: str) -> str:
    return f"{color} rg {_fmt(x)} {_fmt(PAGE_H - y - h)} {_fmt(w)} {_fmt(h)} re f\n"


def _draw_run(op: TextRun) -> str:
    x = op.x - text_width(op.text, op.size, op.bold) if op.align == ALIGN_RIGHT else op.x
    return _draw_text(op.text, x, op.y, BOLD_FONT if op.bold else REGULAR_FONT, op.size, op.color)


def _draw_block(op: TextBlock) -> str:
    font = BOLD_FONT if op.bold else REGULAR_FONT
    return "".join(
        _draw_text(line, op.x, op.y + idx * op.leading, font, op.size, op.color) for idx, line in enumerate(op.lines)
    )


def _draw_qr(op: QrCode) -> str:
    out = []
    for r, row in enumerate(op.matrix):
        for c, dark in enumerate(row):
            if dark:
                out.append(_draw_rect(op.x + c * op.module, op.y + r * op.module, op.module, op.module, op.color))
    return "".join(out)


def draw_ops(ops: Iterable[DrawOp]) -> str:
    """Return one page content stream for the given ops, in order."""
    parts: list[str] = []
    for op in ops:
        if isinstance(op, TextRun):
            parts.append(_draw_run(op))
        elif isinstance(op, FilledRect):
            parts.append(_draw_rect(op.x, op.y, op.w, op.h, op.color))
        elif isinstance(op, TextBlock):
            parts.append(_draw_block(op))
        elif isinstance(op, QrCode):
            parts.append(_draw_qr(op))
        else:
            raise TypeError(f"Unsupported draw op: {type(op).__name__}")
    return "".join(parts)
