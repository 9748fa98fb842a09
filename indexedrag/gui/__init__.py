"""
indexedRAG GUI Module

customtkinter components for the indexedRAG desktop window.
"""

from .main_window import IndexedragApp, main
from .settings_dialog import SettingsDialog

__all__ = [
    'IndexedragApp',
    'main',
    'SettingsDialog',
]
