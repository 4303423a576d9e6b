"""
Qt desktop front end for SecureHex.

One window, one generator panel:
- mode selector, length and character-class controls
- masked/unmasked secret display with strength meter
- copy to clipboard (auto-cleared) and download as text file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QComboBox,
    QFileDialog,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QSpinBox,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from .config import (
    DEFAULT_OPTIONS,
    MAX_LENGTH,
    MIN_LENGTH,
    GenerationOptions,
    Mode,
    SecureHexError,
)
from .export import ExportError, default_artifact_name, write_secret_file
from .generator import GeneratedResult, generate

logger = logging.getLogger(__name__)

MASK_CHAR = "•"
CLIPBOARD_CLEAR_MS = 15000


class GeneratorTab(QWidget):
    """
    Generator panel: controls + secret display + actions.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.result: GeneratedResult | None = None
        self.show_secret = True

        # Secure clipboard auto-clear
        self._clipboard_secret: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_secret_group())
        layout.addWidget(self._build_options_group())
        layout.addLayout(self._build_actions_row())
        layout.addWidget(self._build_status_label())
        layout.addStretch()

        self._sync_mode_controls()
        self.regenerate()

    # -- groups --

    def _build_secret_group(self) -> QGroupBox:
        group = QGroupBox("Generated secret")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        # QTextEdit so long secrets scroll instead of being cut off
        self.secret_field = QTextEdit()
        self.secret_field.setReadOnly(True)
        font = QFont("Consolas")
        font.setPointSize(14)
        self.secret_field.setFont(font)
        self.secret_field.setLineWrapMode(QTextEdit.NoWrap)
        self.secret_field.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.secret_field.setFixedHeight(48)

        secret_row = QHBoxLayout()
        secret_row.addWidget(self.secret_field, 1)

        self.visibility_button = QPushButton("Hide")
        self.visibility_button.clicked.connect(self.toggle_visibility)
        secret_row.addWidget(self.visibility_button)

        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, 5)
        self.strength_bar.setTextVisible(False)
        self.strength_bar.setFixedHeight(8)

        self.strength_label = QLabel("Strength: –")
        self.entropy_label = QLabel("")
        self.entropy_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        strength_row = QHBoxLayout()
        strength_row.addWidget(self.strength_label)
        strength_row.addStretch()
        strength_row.addWidget(self.entropy_label)

        layout.addLayout(secret_row)
        layout.addLayout(strength_row)
        layout.addWidget(self.strength_bar)

        group.setLayout(layout)
        return group

    def _build_options_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QGridLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setHorizontalSpacing(16)
        layout.setVerticalSpacing(10)

        self.mode_combo = QComboBox()
        self.mode_combo.addItem("Password", Mode.PASSWORD)
        self.mode_combo.addItem("Passphrase", Mode.PASSPHRASE)

        self.length_spin = QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_spin.setValue(DEFAULT_OPTIONS.length)

        self.lower_check = QCheckBox("Lowercase (a-z)")
        self.lower_check.setChecked(DEFAULT_OPTIONS.include_lowercase)
        self.upper_check = QCheckBox("Uppercase (A-Z)")
        self.upper_check.setChecked(DEFAULT_OPTIONS.include_uppercase)
        self.numbers_check = QCheckBox("Numbers (0-9)")
        self.numbers_check.setChecked(DEFAULT_OPTIONS.include_numbers)
        self.symbols_check = QCheckBox("Symbols (!@#)")
        self.symbols_check.setChecked(DEFAULT_OPTIONS.include_symbols)
        self.ambiguous_check = QCheckBox("Exclude ambiguous (0, O, I, l, 1)")
        self.ambiguous_check.setChecked(DEFAULT_OPTIONS.exclude_ambiguous)
        self.dashes_check = QCheckBox("Add dashes (xxxx-xxxx)")
        self.dashes_check.setChecked(DEFAULT_OPTIONS.include_dashes)

        layout.addWidget(QLabel("Mode"), 0, 0)
        layout.addWidget(self.mode_combo, 0, 1)
        layout.addWidget(QLabel("Length"), 1, 0)
        layout.addWidget(self.length_spin, 1, 1)
        layout.addWidget(self.lower_check, 2, 0)
        layout.addWidget(self.upper_check, 2, 1)
        layout.addWidget(self.numbers_check, 3, 0)
        layout.addWidget(self.symbols_check, 3, 1)
        layout.addWidget(self.ambiguous_check, 4, 0)
        layout.addWidget(self.dashes_check, 4, 1)

        self.mode_combo.currentIndexChanged.connect(self.on_mode_changed)
        self.length_spin.valueChanged.connect(self.on_options_changed)
        for check in self._password_only_checks():
            check.toggled.connect(self.on_options_changed)

        group.setLayout(layout)
        return group

    def _build_actions_row(self) -> QHBoxLayout:
        row = QHBoxLayout()

        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setPointSize(13)
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.regenerate)

        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        self.download_button = QPushButton("Download")
        self.download_button.clicked.connect(self.on_download_clicked)

        row.addWidget(self.generate_button, 1)
        row.addWidget(self.copy_button)
        row.addWidget(self.download_button)
        return row

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    def _password_only_checks(self) -> tuple[QCheckBox, ...]:
        return (
            self.lower_check,
            self.upper_check,
            self.numbers_check,
            self.symbols_check,
            self.ambiguous_check,
            self.dashes_check,
        )

    # -- state --

    def current_mode(self) -> Mode:
        return self.mode_combo.currentData()

    def current_options(self) -> GenerationOptions:
        return GenerationOptions(
            length=self.length_spin.value(),
            include_lowercase=self.lower_check.isChecked(),
            include_uppercase=self.upper_check.isChecked(),
            include_numbers=self.numbers_check.isChecked(),
            include_symbols=self.symbols_check.isChecked(),
            exclude_ambiguous=self.ambiguous_check.isChecked(),
            include_dashes=self.dashes_check.isChecked(),
        )

    def _sync_mode_controls(self) -> None:
        password_mode = self.current_mode() is Mode.PASSWORD
        for check in self._password_only_checks():
            check.setEnabled(password_mode)

    def _render(self) -> None:
        result = self.result
        secret = result.secret if result is not None else ""

        if self.show_secret:
            self.secret_field.setPlainText(secret)
        else:
            self.secret_field.setPlainText(MASK_CHAR * len(secret))

        if result is None or result.strength_tier == 0:
            self.strength_bar.setValue(0)
            self.strength_label.setText("Strength: –")
            self.entropy_label.setText("")
            return

        self.strength_bar.setValue(result.strength_tier)
        self.strength_label.setText(f"Strength: {result.strength_label}")
        self.entropy_label.setText(f"{result.entropy_bits:.0f} bits entropy")

    # -- actions --

    def on_mode_changed(self, _index: int) -> None:
        self._sync_mode_controls()
        self.regenerate()

    def on_options_changed(self, *_args) -> None:
        self.regenerate()

    def regenerate(self) -> None:
        try:
            self.result = generate(self.current_options(), self.current_mode())
        except SecureHexError as exc:
            self._show_error(f"Error while generating:\n{exc}")
            return

        self._render()
        if not self.result.secret:
            self.status_label.setText("Select at least one character type.")
        else:
            self.status_label.setText("")

    def toggle_visibility(self) -> None:
        self.show_secret = not self.show_secret
        self.visibility_button.setText("Hide" if self.show_secret else "Show")
        self._render()

    def _current_secret(self) -> str:
        return self.result.secret if self.result is not None else ""

    def copy_to_clipboard(self) -> bool:
        secret = self._current_secret()
        if not secret:
            self._show_error("Nothing to copy. Generate a secret first.")
            return False

        clipboard = QGuiApplication.clipboard()
        clipboard.setText(secret)
        # Another application may hold the clipboard; check it took the text.
        if clipboard.text() != secret:
            self._show_error(
                "Failed to copy to clipboard.\n"
                "Another application may be using it; please try again."
            )
            return False

        self._clipboard_secret = secret
        self._clipboard_timer.start(CLIPBOARD_CLEAR_MS)
        self.status_label.setText(
            "Copied to clipboard (auto-clear in a few seconds)."
        )
        return True

    def _on_clipboard_timeout(self) -> None:
        """
        Clear the clipboard if it still holds the secret we put there.
        """
        if not self._clipboard_secret:
            return

        clipboard = QGuiApplication.clipboard()
        if clipboard.text() == self._clipboard_secret:
            clipboard.clear()
            self.status_label.setText("Clipboard cleared for safety.")

        self._clipboard_secret = None

    def on_download_clicked(self) -> None:
        if not self._current_secret():
            self._show_error("Nothing to download. Generate a secret first.")
            return

        suggested = str(Path.cwd() / default_artifact_name())
        path, _filter = QFileDialog.getSaveFileName(
            self, "Save secret", suggested, "Text files (*.txt)"
        )
        if not path:
            return

        target = Path(path)
        # The save dialog already confirmed replacing an existing file.
        self.download(target.parent, target.name, overwrite=True)

    def download(
        self,
        directory: Path | str | None = None,
        filename: str | None = None,
        overwrite: bool = False,
    ) -> Path | None:
        try:
            path = write_secret_file(
                self._current_secret(), directory, filename, overwrite
            )
        except ExportError as exc:
            self._show_error(f"Failed to download:\n{exc}")
            return None

        self.status_label.setText(f"Saved to {path}")
        return path

    def _show_error(self, message: str) -> None:
        logger.warning("%s", message.replace("\n", " "))
        self.status_label.setText(message)
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.exec()


class GeneratorWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()

        self.setWindowTitle("SecureHex")
        self.setMinimumSize(560, 520)

        self._apply_base_style()

        self.generator_tab = GeneratorTab()
        self.setCentralWidget(self.generator_tab)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #0f172a;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #0f172a;
                font-size: 13px;
            }
            QGroupBox {
                border: 1px solid #334155;
                border-radius: 10px;
                margin-top: 12px;
                padding-top: 8px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                left: 12px;
                color: #34d399;
            }
            QPushButton {
                background-color: #1e293b;
                border: 1px solid #334155;
                border-radius: 8px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                border-color: #10b981;
            }
            QTextEdit, QSpinBox, QComboBox {
                background-color: #020617;
                border: 1px solid #334155;
                border-radius: 6px;
            }
            QProgressBar {
                background-color: #334155;
                border: none;
                border-radius: 4px;
            }
            QProgressBar::chunk {
                background-color: #10b981;
                border-radius: 4px;
            }
            """
        )


def main() -> None:
    app = QApplication(sys.argv)
    window = GeneratorWindow()
    window.show()
    sys.exit(app.exec())
