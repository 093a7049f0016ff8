import tkinter as tk
from tkinter import ttk
from typing import Dict

import customtkinter as ctk

THEMES: Dict[str, dict] = {
    "light": {
        "bg": "#f8f9fc",
        "surface": "#ffffff",
        "panel": "#f2f5f9",
        "muted": "#475467",
        "text": "#0f172a",
        "accent": "#6464ff",
        "accent_dim": "#4f4fe0",
        "border": "#d7dde7",
        "highlight": "#e9eef6",
        "paid": "#16a34a",
        "unpaid": "#dc2626",
    },
    "dark": {
        "bg": "#0b111a",
        "surface": "#121a26",
        "panel": "#1b2433",
        "muted": "#9aa3b2",
        "text": "#f2f5f9",
        "accent": "#6464ff",
        "accent_dim": "#4f4fe0",
        "border": "#243040",
        "highlight": "#1a2230",
        "paid": "#4ade80",
        "unpaid": "#f87171",
    },
}

ACTIVE_THEME = "light"
PALETTE = THEMES[ACTIVE_THEME]


def apply_theme(root: tk.Misc, name: str = "light") -> dict:
    global ACTIVE_THEME, PALETTE
    if name not in THEMES:
        name = "light"
    ACTIVE_THEME = name
    PALETTE = THEMES[name]

    ctk.set_appearance_mode("Light" if name == "light" else "Dark")
    ctk.set_default_color_theme("blue")
    root.configure(fg_color=PALETTE["bg"])

    style = ttk.Style(root)
    style.theme_use("clam")

    base_font = ("Segoe UI", 10)
    style.configure(
        "Treeview",
        background=PALETTE["panel"],
        fieldbackground=PALETTE["panel"],
        foreground=PALETTE["text"],
        bordercolor=PALETTE["border"],
        rowheight=26,
        font=base_font,
    )
    selected_fg = "#ffffff" if name == "light" else PALETTE["text"]
    style.map(
        "Treeview",
        background=[("selected", PALETTE["accent_dim"])],
        foreground=[("selected", selected_fg)],
    )
    style.configure(
        "Treeview.Heading",
        background=PALETTE["surface"],
        foreground=PALETTE["text"],
        bordercolor=PALETTE["border"],
        relief="flat",
        font=("Segoe UI", 10, "bold"),
    )
    style.map("Treeview.Heading", background=[("active", PALETTE["highlight"])])
    return PALETTE


def accent_button_kwargs() -> dict:
    return {
        "fg_color": PALETTE["accent"],
        "hover_color": PALETTE["accent_dim"],
        "text_color": "#ffffff",
    }
