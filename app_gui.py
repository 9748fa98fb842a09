"""
indexedRAG - Desktop Application

Lightweight entry point for the GUI in indexedrag/gui/:
- indexedrag/gui/main_window.py     : Main application window
- indexedrag/gui/sidebar.py         : Conversations sidebar
- indexedrag/gui/chat.py            : Chat area component
- indexedrag/gui/settings_dialog.py : Settings window
- indexedrag/gui/constants.py       : Constants and labels
"""

import sys
from pathlib import Path

# Allow running from a source checkout
sys.path.append(str(Path(__file__).parent))

from indexedrag.gui import main

if __name__ == "__main__":
    main()
