"""
Print preview: draws the renderer's ops on a Tk canvas at screen scale.
"""

from __future__ import annotations

import tkinter as tk
from typing import Callable, Iterable, Optional

import customtkinter as ctk

from invoice_pro.utils.pdf.core.layout_common import PAGE_H, PAGE_W
from invoice_pro.utils.pdf.core.ops import ALIGN_RIGHT, DrawOp, FilledRect, QrCode, TextBlock, TextRun

SCALE = 1.0


def _hex(color: str) -> str:
    parts = [float(p) for p in color.split()]
    return "#" + "".join(f"{int(round(p * 255)):02x}" for p in parts)


def _font(size: int, bold: bool) -> tuple:
    return ("Helvetica", -int(round(size * SCALE)), "bold" if bold else "normal")


def paint(canvas: tk.Canvas, ops: Iterable[DrawOp]) -> None:
    for op in ops:
        if isinstance(op, FilledRect):
            canvas.create_rectangle(
                op.x * SCALE,
                op.y * SCALE,
                (op.x + op.w) * SCALE,
                (op.y + op.h) * SCALE,
                fill=_hex(op.color),
                width=0,
            )
        elif isinstance(op, TextRun):
            canvas.create_text(
                op.x * SCALE,
                op.y * SCALE,
                text=op.text,
                anchor="se" if op.align == ALIGN_RIGHT else "sw",
                font=_font(op.size, op.bold),
                fill=_hex(op.color),
            )
        elif isinstance(op, TextBlock):
            for idx, line in enumerate(op.lines):
                canvas.create_text(
                    op.x * SCALE,
                    (op.y + idx * op.leading) * SCALE,
                    text=line,
                    anchor="sw",
                    font=_font(op.size, op.bold),
                    fill=_hex(op.color),
                )
        elif isinstance(op, QrCode):
            for r, row in enumerate(op.matrix):
                for c, dark in enumerate(row):
                    if dark:
                        x = (op.x + c * op.module) * SCALE
                        y = (op.y + r * op.module) * SCALE
                        canvas.create_rectangle(x, y, x + op.module * SCALE, y + op.module * SCALE, fill="#000000", width=0)


class PreviewDialog(ctk.CTkToplevel):
    def __init__(self, master: tk.Misc, title: str, ops: Iterable[DrawOp], on_export: Optional[Callable[[], None]] = None):
        super().__init__(master)
        self.title(f"Preview - {title}")
        self.transient(master)
        self.grab_set()
        self.geometry(f"{int(PAGE_W * SCALE) + 40}x760")
        self.resizable(True, True)

        frame = ctk.CTkFrame(self, fg_color="transparent")
        frame.pack(fill="both", expand=True, padx=12, pady=12)
        canvas = tk.Canvas(
            frame,
            width=PAGE_W * SCALE,
            height=PAGE_H * SCALE,
            background="#ffffff",
            scrollregion=(0, 0, PAGE_W * SCALE, PAGE_H * SCALE),
            highlightthickness=0,
        )
        scroll = ctk.CTkScrollbar(frame, command=canvas.yview)
        canvas.configure(yscrollcommand=scroll.set)
        canvas.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")
        paint(canvas, ops)

        btns = ctk.CTkFrame(self, fg_color="transparent")
        btns.pack(fill="x", padx=12, pady=(0, 12))
        ctk.CTkButton(btns, text="Close", command=self.destroy).pack(side="right", padx=(6, 0))
        if on_export is not None:
            ctk.CTkButton(btns, text="Export PDF", command=on_export).pack(side="right")
