# signup_page.py
# Sign-up page.
# Contains username, password and password confirmation inputs, an inline
# password error and a Continue button that is only enabled for a valid form.

import logging

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit, QPushButton # type: ignore
from PyQt5.QtCore import pyqtSignal # type: ignore
from .form_model import FormViewModel
from .ui_styles import style_button, set_title_label, style_input, style_section_header, style_error_label

logger = logging.getLogger(__name__)


class SignUpPage(QWidget):
    submitted = pyqtSignal(str)

    def __init__(self, model=None, parent=None):
        """
        model: the FormViewModel this page is bound to; a new one is created if omitted
        """
        super().__init__(parent)
        self.setObjectName("SignUpPage")
        self.model = model if model is not None else FormViewModel(parent=self)
        self.init_ui()
        self.bind_model()

    def init_ui(self):
        layout = QVBoxLayout()
        layout.setSpacing(8)
        layout.setContentsMargins(20, 20, 20, 20)

        # Title
        title = QLabel("Sign up")
        set_title_label(title)
        layout.addWidget(title)
        layout.addSpacing(12)

        # Username
        username_header = QLabel("USERNAME")
        style_section_header(username_header)
        layout.addWidget(username_header)
        self.username_input = QLineEdit()
        self.username_input.setPlaceholderText("Username")
        style_input(self.username_input)
        layout.addWidget(self.username_input)
        layout.addSpacing(12)

        # Password + confirmation
        password_header = QLabel("PASSWORD")
        style_section_header(password_header)
        layout.addWidget(password_header)
        self.password_input = QLineEdit()
        self.password_input.setPlaceholderText("Password")
        self.password_input.setEchoMode(QLineEdit.Password)  # hides typed text
        style_input(self.password_input)
        layout.addWidget(self.password_input)
        self.password_again_input = QLineEdit()
        self.password_again_input.setPlaceholderText("Password again")
        self.password_again_input.setEchoMode(QLineEdit.Password)
        style_input(self.password_again_input)
        layout.addWidget(self.password_again_input)

        # Inline password error, footer of the password section
        self.error_label = QLabel("")
        style_error_label(self.error_label)
        layout.addWidget(self.error_label)

        layout.addStretch()

        # Continue button
        self.continue_btn = QPushButton("Continue")
        self.continue_btn.clicked.connect(self.on_continue_clicked)
        style_button(self.continue_btn)
        layout.addWidget(self.continue_btn)

        self.setLayout(layout)

    def bind_model(self):
        # raw text goes straight to the model on every keystroke
        self.username_input.textChanged.connect(self._on_username_changed)
        self.password_input.textChanged.connect(self._on_password_changed)
        self.password_again_input.textChanged.connect(self._on_password_again_changed)

        self.model.inline_error_changed.connect(self.error_label.setText)
        self.model.is_valid_changed.connect(self.continue_btn.setEnabled)
        self.error_label.setText(self.model.inline_error_for_password)
        self.continue_btn.setEnabled(self.model.is_valid)

    def _on_username_changed(self, text):
        self.model.username = text

    def _on_password_changed(self, text):
        self.model.password = text

    def _on_password_again_changed(self, text):
        self.model.password_again = text

    def on_continue_clicked(self):
        if not self.model.is_valid:
            return
        logger.info("sign-up submitted for %r", self.model.username)
        self.submitted.emit(self.model.username)

    def reset_form(self):
        """Clear all inputs and restart validation."""
        self.username_input.clear()
        self.password_input.clear()
        self.password_again_input.clear()
        self.model.reset()

    def closeEvent(self, event):
        self.model.close()
        super().closeEvent(event)
