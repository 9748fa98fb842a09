"""
Sidebar Component for indexedRAG GUI

Conversation list area. Only a single conversation exists, so the list is a
placeholder.
"""

import customtkinter as ctk
from .constants import *


class Sidebar:
    """Left-hand conversations panel"""

    def __init__(self, parent):
        """
        Initialize sidebar

        Args:
            parent: Parent window (IndexedragApp instance)
        """
        self.parent = parent

        self.frame = ctk.CTkFrame(parent, width=SIDEBAR_WIDTH, corner_radius=0)
        self.frame.grid(row=1, column=0, sticky="nsew")
        self.frame.grid_columnconfigure(0, weight=1)
        self.frame.grid_propagate(False)

        self._create_header()
        self._create_placeholder()

    def _create_header(self):
        ctk.CTkLabel(
            self.frame,
            text=LABELS['sidebar_heading'],
            font=ctk.CTkFont(size=FONT_SIZES['header'], weight="bold")
        ).grid(row=0, column=0, padx=SPACING['major'], pady=(SPACING['major'], SPACING['small']), sticky="w")

        ctk.CTkFrame(
            self.frame,
            height=2,
            fg_color=COLORS['separator']
        ).grid(row=1, column=0, padx=SPACING['standard'], pady=SPACING['tiny'], sticky="ew")

    def _create_placeholder(self):
        ctk.CTkLabel(
            self.frame,
            text=LABELS['sidebar_placeholder'],
            font=ctk.CTkFont(size=FONT_SIZES['small']),
            text_color=COLORS['gray'],
            wraplength=SIDEBAR_WIDTH - 2 * SPACING['major'],
            justify="left"
        ).grid(row=2, column=0, padx=SPACING['major'], pady=SPACING['minor'], sticky="w")
