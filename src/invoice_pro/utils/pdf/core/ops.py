"""
Draw instructions produced by the document renderer.

Coordinates are PDF points on the page with the origin in the top-left
corner and y growing downward. Text `y` is the baseline; rectangle `y` is
the top edge. For right-aligned text `x` is the right edge.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union

ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"

BLACK = "0 0 0"


@dataclass(frozen=True)
class TextRun:
    text: str
    x: float
    y: float
    size: int
    bold: bool = False
    align: str = ALIGN_LEFT
    color: str = BLACK


@dataclass(frozen=True)
class FilledRect:
    x: float
    y: float
    w: float
    h: float
    color: str


@dataclass(frozen=True)
class TextBlock:
    """Pre-wrapped multi-line text; line i sits at ``y + i * leading``."""

    lines: List[str]
    x: float
    y: float
    size: int
    leading: int
    width: float
    bold: bool = False
    color: str = BLACK


@dataclass(frozen=True)
class QrCode:
    matrix: Sequence[Sequence[bool]] = field(repr=False)
    x: float = 0
    y: float = 0
    module: int = 2
    color: str = BLACK

    @property
    def side(self) -> int:
        return len(self.matrix) * self.module


DrawOp = Union[TextRun, FilledRect, TextBlock, QrCode]
