"""
Chat Component for indexedRAG GUI

Renders the conversation as a list of message cards with an input row below.
"""

import customtkinter as ctk
from .constants import *


class ChatArea:
    """Conversation display and message input"""

    def __init__(self, parent, session, send_callback):
        """
        Initialize chat area

        Args:
            parent: Parent window
            session: ChatSession providing the messages
            send_callback: Callback function for sending messages
        """
        self.parent = parent
        self.session = session
        self.send_callback = send_callback
        self.message_widgets = []

        self.main_frame = ctk.CTkFrame(parent, corner_radius=0)
        self.main_frame.grid(row=1, column=1, sticky="nsew")
        self.main_frame.grid_columnconfigure(0, weight=1)
        self.main_frame.grid_rowconfigure(2, weight=1)  # Message list expands

        self._create_header()
        self._create_message_list()
        self._create_input_area()
        self.render_messages()

    def _create_header(self):
        ctk.CTkLabel(
            self.main_frame,
            text=LABELS['chat_heading'],
            font=ctk.CTkFont(size=FONT_SIZES['title'], weight="bold")
        ).grid(row=0, column=0, padx=SPACING['major'], pady=(SPACING['major'], SPACING['small']), sticky="w")

        ctk.CTkFrame(
            self.main_frame,
            height=2,
            fg_color=COLORS['separator']
        ).grid(row=1, column=0, padx=SPACING['major'], pady=SPACING['tiny'], sticky="new")

    def _create_message_list(self):
        self.message_list = ctk.CTkScrollableFrame(self.main_frame)
        self.message_list.grid(row=2, column=0, sticky="nsew", padx=SPACING['major'], pady=SPACING['standard'])
        self.message_list.grid_columnconfigure(0, weight=1)

    def _create_input_area(self):
        input_frame = ctk.CTkFrame(self.main_frame, corner_radius=0)
        input_frame.grid(row=3, column=0, sticky="ew")
        input_frame.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(
            input_frame,
            text=LABELS['input_label'],
            font=ctk.CTkFont(size=FONT_SIZES['normal'])
        ).grid(row=0, column=0, padx=(SPACING['major'], SPACING['minor']), pady=SPACING['major'])

        self.input_var = ctk.StringVar(value=self.session.current_input)
        self.input_var.trace_add("write", self._on_input_change)

        self.input_entry = ctk.CTkEntry(
            input_frame,
            textvariable=self.input_var,
            height=40,
            font=ctk.CTkFont(size=FONT_SIZES['normal'])
        )
        self.input_entry.grid(row=0, column=1, padx=SPACING['minor'], pady=SPACING['major'], sticky="ew")
        self.input_entry.bind("<Return>", lambda e: self.send_callback())

        self.send_button = ctk.CTkButton(
            input_frame,
            text=LABELS['send'],
            command=self.send_callback,
            height=40,
            width=100,
            font=ctk.CTkFont(size=FONT_SIZES['normal'], weight="bold")
        )
        self.send_button.grid(row=0, column=2, padx=(SPACING['minor'], SPACING['major']), pady=SPACING['major'])

    def _on_input_change(self, *args):
        self.session.current_input = self.input_var.get()

    def render_messages(self):
        """Rebuild the message cards from the session"""
        for widget in self.message_widgets:
            widget.destroy()
        self.message_widgets.clear()

        row = 0
        for message in self.session.messages:
            card = ctk.CTkFrame(self.message_list, fg_color=COLORS['darker_bg'], corner_radius=6)
            card.grid(row=row, column=0, sticky="ew", padx=SPACING['tiny'], pady=(SPACING['tiny'], 0))
            card.grid_columnconfigure(0, weight=1)

            ctk.CTkLabel(
                card,
                text=f"{message.role}: {message.content}",
                font=ctk.CTkFont(size=FONT_SIZES['normal']),
                wraplength=MESSAGE_WRAP_LENGTH,
                justify="left",
                anchor="w"
            ).grid(row=0, column=0, padx=SPACING['standard'], pady=SPACING['minor'], sticky="w")

            separator = ctk.CTkFrame(self.message_list, height=2, fg_color=COLORS['separator'])
            separator.grid(row=row + 1, column=0, sticky="ew", padx=SPACING['tiny'], pady=SPACING['tiny'])

            self.message_widgets.extend([card, separator])
            row += 2

        self.message_list.after(10, self._scroll_to_end)

    def _scroll_to_end(self):
        self.message_list._parent_canvas.yview_moveto(1.0)

    def clear_input(self):
        self.input_var.set("")

    def focus_input(self):
        self.input_entry.focus_set()
