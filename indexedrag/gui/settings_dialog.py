"""
Settings Dialog

Window for editing the indexed root paths and the index interval.
"""

import customtkinter as ctk

from .constants import *


class SettingsDialog(ctk.CTkToplevel):
    """Settings window bound to a SettingsEditor working copy"""

    def __init__(self, parent, editor, on_save, on_cancel, on_close):
        super().__init__(parent)

        self.parent = parent
        self.editor = editor
        self.on_save = on_save
        self.on_cancel = on_cancel

        self.title(LABELS['settings_title'])
        self.resizable(False, False)
        self.transient(parent)
        self.protocol("WM_DELETE_WINDOW", on_close)

        self.path_rows = []

        self.create_widgets()

    def create_widgets(self):
        """Create settings UI"""
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self,
            text=LABELS['settings_heading'],
            font=ctk.CTkFont(size=FONT_SIZES['header'], weight="bold")
        ).grid(row=0, column=0, padx=SPACING['major'], pady=(SPACING['major'], SPACING['small']), sticky="w")

        self._separator(row=1)

        ctk.CTkLabel(
            self,
            text=LABELS['root_paths'],
            font=ctk.CTkFont(size=FONT_SIZES['normal'])
        ).grid(row=2, column=0, padx=SPACING['major'], pady=SPACING['tiny'], sticky="w")

        self.paths_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.paths_frame.grid(row=3, column=0, padx=SPACING['major'], sticky="ew")
        self.paths_frame.grid_columnconfigure(0, weight=1)
        self.refresh_path_list()

        ctk.CTkButton(
            self,
            text=LABELS['add_path'],
            command=self.add_path,
            font=ctk.CTkFont(size=FONT_SIZES['small'])
        ).grid(row=4, column=0, padx=SPACING['major'], pady=SPACING['minor'], sticky="w")

        self._separator(row=5)
        self._create_interval_row(row=6)
        self._separator(row=7)
        self._create_buttons(row=8)

    def _separator(self, row):
        ctk.CTkFrame(
            self,
            height=2,
            fg_color=COLORS['separator']
        ).grid(row=row, column=0, padx=SPACING['standard'], pady=SPACING['small'], sticky="ew")

    def _create_interval_row(self, row):
        interval_frame = ctk.CTkFrame(self, fg_color="transparent")
        interval_frame.grid(row=row, column=0, padx=SPACING['major'], sticky="ew")

        ctk.CTkLabel(
            interval_frame,
            text=LABELS['interval'],
            font=ctk.CTkFont(size=FONT_SIZES['normal'])
        ).pack(side="left", padx=(0, SPACING['minor']))

        self.interval_entry = ctk.CTkEntry(interval_frame, width=100)
        self.interval_entry.pack(side="left")
        self._show_interval()

        self.interval_entry.bind("<FocusOut>", lambda e: self.commit_interval())
        self.interval_entry.bind("<Return>", lambda e: self.commit_interval())

    def _create_buttons(self, row):
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=row, column=0, padx=SPACING['major'], pady=(SPACING['small'], SPACING['major']), sticky="w")

        ctk.CTkButton(
            btn_frame,
            text=LABELS['save_settings'],
            command=self.save,
            width=120,
            font=ctk.CTkFont(size=FONT_SIZES['normal'], weight="bold")
        ).pack(side="left", padx=(0, SPACING['minor']))

        ctk.CTkButton(
            btn_frame,
            text=LABELS['cancel'],
            command=self.on_cancel,
            width=100,
            fg_color="transparent",
            border_width=1,
            font=ctk.CTkFont(size=FONT_SIZES['normal'])
        ).pack(side="left")

    def refresh_path_list(self):
        """Rebuild one entry row per root path"""
        for row_frame in self.path_rows:
            row_frame.destroy()
        self.path_rows.clear()

        for idx, path in enumerate(self.editor.settings.root_paths):
            row_frame = ctk.CTkFrame(self.paths_frame, fg_color="transparent")
            row_frame.grid(row=idx, column=0, pady=2, sticky="ew")
            row_frame.grid_columnconfigure(0, weight=1)

            path_var = ctk.StringVar(value=path)
            path_var.trace_add("write", lambda *args, i=idx, v=path_var: self.editor.update_path(i, v.get()))

            ctk.CTkEntry(
                row_frame,
                textvariable=path_var,
                width=WINDOW_SIZES['settings_width'] - 160
            ).grid(row=0, column=0, padx=(0, SPACING['minor']), sticky="ew")

            ctk.CTkButton(
                row_frame,
                text=LABELS['remove'],
                command=lambda i=idx: self.remove_path(i),
                width=80,
                fg_color=COLORS['danger'],
                hover_color=COLORS['danger_hover'],
                font=ctk.CTkFont(size=FONT_SIZES['small'])
            ).grid(row=0, column=1)

            self.path_rows.append(row_frame)

    def add_path(self):
        self.editor.add_path()
        self.refresh_path_list()

    def remove_path(self, index):
        self.editor.remove_paths([index])
        self.refresh_path_list()

    def commit_interval(self):
        if not self.winfo_exists():
            return
        self.editor.commit_interval(self.interval_entry.get())
        self._show_interval()

    def _show_interval(self):
        self.interval_entry.delete(0, "end")
        self.interval_entry.insert(0, str(self.editor.settings.index_interval_minutes))

    def save(self):
        self.commit_interval()
        self.on_save()
