import tkinter as tk
from typing import Callable

import customtkinter as ctk

from invoice_pro.core.models.company import CompanyProfile
from invoice_pro.ui.styles import theme

FIELDS = (("name", "Company name"), ("email", "Email"), ("phone", "Phone"), ("address", "Address"))


class CompanyForm(ctk.CTkFrame):
    """
    Company profile editor shown in the Settings tab.
    """

    def __init__(self, master: tk.Misc, profile: CompanyProfile, on_save: Callable[[CompanyProfile], None]):
        super().__init__(master, fg_color=theme.PALETTE["panel"], corner_radius=8)
        self.columnconfigure(1, weight=1)
        self._on_save = on_save
        self._logo = profile.logo
        self._vars = {code: tk.StringVar() for code, _ in FIELDS}

        ctk.CTkLabel(self, text="Company", font=("Segoe UI", 12, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=8, pady=(8, 4)
        )
        for row, (code, label) in enumerate(FIELDS, start=1):
            ctk.CTkLabel(self, text=label).grid(row=row, column=0, sticky="w", padx=8, pady=3)
            ctk.CTkEntry(self, textvariable=self._vars[code]).grid(row=row, column=1, sticky="ew", padx=(4, 8), pady=3)
        ctk.CTkButton(self, text="Save company", command=self._handle_save, **theme.accent_button_kwargs()).grid(
            row=len(FIELDS) + 1, column=1, sticky="e", padx=8, pady=8
        )
        self.set_data(profile)

    def set_data(self, profile: CompanyProfile) -> None:
        self._logo = profile.logo
        for code, var in self._vars.items():
            var.set(getattr(profile, code))

    def data(self) -> CompanyProfile:
        values = {code: var.get().strip() for code, var in self._vars.items()}
        return CompanyProfile(logo=self._logo, **values)

    def _handle_save(self) -> None:
        self._on_save(self.data())
