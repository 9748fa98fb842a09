"""
GUI Constants and Configuration

Contains all constants, colors, sizes, and labels used across the GUI.
"""

# Window
WINDOW_TITLE = "indexedRAG"

# Theme Configuration
APPEARANCE_MODE = "dark"
COLOR_THEME = "blue"

# Colors
COLORS = {
    'primary': '#1f6aa5',
    'primary_hover': '#164e7e',
    'danger': '#e74c3c',
    'danger_hover': '#c0392b',
    'gray': '#cccccc',
    'dark_bg': '#2b2b2b',
    'darker_bg': '#333333',
    'separator': '#444444',
}

# Font Sizes
FONT_SIZES = {
    'title': 24,
    'header': 18,
    'normal': 13,
    'small': 12,
    'tiny': 11,
}

# Spacing
SPACING = {
    'major': 20,
    'standard': 12,
    'minor': 8,
    'small': 6,
    'tiny': 4,
}

# Window Sizes
WINDOW_SIZES = {
    'main_width': 1000,
    'main_height': 800,
    'main_min_width': 700,
    'main_min_height': 500,
    'settings_width': 520,
}

SIDEBAR_WIDTH = 220
MESSAGE_WRAP_LENGTH = 640

# Labels
LABELS = {
    'settings_button': 'Settings',
    'sidebar_heading': 'Conversations',
    'sidebar_placeholder': 'Placeholder for threads list, etc.',
    'chat_heading': 'Indexedrag',
    'input_label': 'Your message:',
    'send': 'Send',
    'settings_title': 'Settings',
    'settings_heading': 'Application Settings',
    'root_paths': 'Indexed Root Paths:',
    'remove': 'Remove',
    'add_path': 'Add Another Path',
    'interval': 'Index interval (minutes):',
    'save_settings': 'Save Settings',
    'cancel': 'Cancel',
}
