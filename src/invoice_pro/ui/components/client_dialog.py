import tkinter as tk
from typing import Callable, Optional

import customtkinter as ctk

from invoice_pro.core.models.client import Client
from invoice_pro.ui.styles import theme

FIELDS = (("name", "Name *"), ("email", "Email"), ("phone", "Phone"), ("address", "Address"))


class ClientDialog(ctk.CTkToplevel):
    def __init__(self, master: tk.Misc, client: Optional[Client], on_save: Callable[[Client], bool]):
        super().__init__(master)
        self.title("Edit Client" if client else "New Client")
        self.transient(master)
        self.grab_set()
        self.geometry("460x300")
        self.minsize(400, 280)
        self._on_save = on_save
        self._vars = {code: tk.StringVar(value=getattr(client, code, "") if client else "") for code, _ in FIELDS}

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.pack(fill="both", expand=True, padx=12, pady=12)
        body.columnconfigure(1, weight=1)
        for row, (code, label) in enumerate(FIELDS):
            ctk.CTkLabel(body, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8), pady=4)
            ctk.CTkEntry(body, textvariable=self._vars[code]).grid(row=row, column=1, sticky="ew", pady=4)

        btns = ctk.CTkFrame(self, fg_color="transparent")
        btns.pack(fill="x", padx=12, pady=(0, 12))
        ctk.CTkButton(btns, text="Cancel", command=self.destroy).pack(side="right", padx=(6, 0))
        ctk.CTkButton(btns, text="Save", command=self._handle_save, **theme.accent_button_kwargs()).pack(side="right")

    def data(self) -> Client:
        return Client(**{code: var.get().strip() for code, var in self._vars.items()})

    def _handle_save(self) -> None:
        if self._on_save(self.data()):
            self.destroy()
