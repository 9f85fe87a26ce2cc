"""
Integer input built from QLineEdit + QPushButtons.

QSpinBox crashes under PyQt5 on macOS (wheel, button and key events all go
through the broken sipQSpinBox wrapper), so the panel uses this instead.
"""

from PyQt5.QtWidgets import QLineEdit, QWidget, QHBoxLayout, QPushButton
from PyQt5.QtGui import QIntValidator
from PyQt5.QtCore import Qt, pyqtSignal

from . import style_constants as sc


_STEP_BUTTON_STYLE = f"""
    QPushButton {{
        background: {sc.BG_LIGHT};
        border: 1px solid {sc.BORDER_MEDIUM};
        border-radius: 0;
        font-weight: bold;
        font-size: {sc.FONT_SIZE_LG};
        color: {sc.TEXT_PRIMARY};
    }}
    QPushButton:hover {{ background: {sc.BG_HIGHLIGHT}; }}
    QPushButton:pressed {{ background: {sc.BG_PRESSED}; }}
"""


class SafeSpinBox(QWidget):
    """Integer spin box replacement with -/+ buttons and a validated text field."""

    valueChanged = pyqtSignal(int)

    def __init__(self, minimum: int = 0, maximum: int = 99, parent=None):
        super().__init__(parent)
        self._minimum = minimum
        self._maximum = maximum
        self._value = minimum

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._dec_btn = self._make_step_button("-", -1)
        layout.addWidget(self._dec_btn)

        self._line_edit = QLineEdit()
        self._line_edit.setAlignment(Qt.AlignCenter)
        self._validator = QIntValidator(self._minimum, self._maximum)
        self._line_edit.setValidator(self._validator)
        self._line_edit.setMinimumWidth(sc.INPUT_MIN_WIDTH_SM)
        self._line_edit.editingFinished.connect(self._on_editing_finished)
        self._line_edit.setStyleSheet(f"""
            QLineEdit {{
                border: 1px solid {sc.BORDER_MEDIUM};
                border-radius: 0;
                background: {sc.BG_LIGHT};
                color: {sc.TEXT_PRIMARY};
                padding: 2px 4px;
            }}
            QLineEdit:focus {{ border-color: {sc.FOCUS_COLOR}; }}
        """)
        layout.addWidget(self._line_edit)

        self._inc_btn = self._make_step_button("+", 1)
        layout.addWidget(self._inc_btn)

        self._update_display()

    def _make_step_button(self, label: str, step: int) -> QPushButton:
        btn = QPushButton(label)
        btn.setFixedWidth(sc.BUTTON_MIN_WIDTH)
        btn.setMinimumHeight(sc.HIT_TARGET_MIN)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.setStyleSheet(_STEP_BUTTON_STYLE)
        btn.clicked.connect(lambda: self.setValue(self._value + step))
        return btn

    def _on_editing_finished(self):
        try:
            text = self._line_edit.text()
            try:
                self.setValue(int(text))
            except ValueError:
                pass
            self._update_display()
        except RuntimeError:
            # Widget was deleted
            pass

    def _update_display(self):
        try:
            self._line_edit.setText(str(self._value))
        except RuntimeError:
            pass

    def value(self) -> int:
        return self._value

    def setValue(self, value: int):
        value = max(self._minimum, min(self._maximum, int(value)))
        if value != self._value:
            self._value = value
            self._update_display()
            self.valueChanged.emit(self._value)

    def setToolTip(self, tip: str):
        self._line_edit.setToolTip(tip)

    def wheelEvent(self, event):
        event.ignore()
