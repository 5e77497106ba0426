"""UI styling helpers used across the sign-up form.

Defines common colors, button styles, and helper functions to keep a
consistent look-and-feel across the app.
"""

from PyQt5.QtGui import QFont # type: ignore
from PyQt5.QtWidgets import QPushButton, QLabel, QLineEdit # type: ignore
from PyQt5.QtCore import Qt # type: ignore

# Primary color used across the UI
PRIMARY_COLOR = "#1f6feb"
ERROR_COLOR = "#d1242f"
MUTED_COLOR = "#6e7781"

# Button CSS: filled background, white text, rounded corners, greyed out when disabled
BUTTON_CSS = f"""
QPushButton {{
  background-color: {PRIMARY_COLOR};
  color: white;
  border-radius: 10px;
  padding: 8px 12px;
}}
QPushButton:hover {{
  background-color: #388bfd;
}}
QPushButton:disabled {{
  background-color: #afb8c1;
}}
"""


def style_button(btn: QPushButton, min_height: int = 60):
    """Apply a consistent style to buttons."""
    btn.setStyleSheet(BUTTON_CSS)
    btn.setMinimumHeight(min_height)
    btn.setCursor(Qt.PointingHandCursor)


def set_title_label(lbl: QLabel, size: int = 22):
    """Set font and color for title-like labels."""
    f = QFont("Verdana", size)
    f.setBold(True)
    lbl.setFont(f)


def style_section_header(lbl: QLabel):
    """Small upper-case caption above a group of inputs."""
    f = QFont("Verdana", 9)
    lbl.setFont(f)
    lbl.setStyleSheet(f"color: {MUTED_COLOR};")


def style_error_label(lbl: QLabel):
    lbl.setStyleSheet(f"color: {ERROR_COLOR};")
    lbl.setWordWrap(True)


def style_input(widget: QLineEdit, min_height: int = 32, font_size: int = 12):
    """Apply consistent styling to single-line inputs.

    - `min_height` controls the height so inputs line up visually.
    """
    css = f"""
    QLineEdit {{
      border: 1px solid #ccc;
      border-radius: 6px;
      padding: 6px 8px;
      font-size: {font_size}px;
    }}
    """
    widget.setStyleSheet(css)
    widget.setMinimumHeight(min_height)
