from PyQt6.QtWidgets import QHBoxLayout, QPushButton
from PyQt6.QtCore import pyqtSignal

from field_factory import FIELD_TYPE_MAP


class AddFieldButtonLayout(QHBoxLayout):
    """Palette of "Add ..." buttons, one per field type.

    The buttons are exposed as ``buttons[field_type]``; a click emits
    ``add_requested`` with the FieldType to create.
    """

    add_requested = pyqtSignal(object)

    def __init__(self):
        super().__init__()
        self.buttons = {}

        for field_type, (_, caption) in FIELD_TYPE_MAP.items():
            button = QPushButton(caption)
            button.setObjectName("adder")
            button.clicked.connect(
                lambda _checked=False, ft=field_type: self.add_requested.emit(ft)
            )
            self.buttons[field_type] = button
            self.addWidget(button)

        self.addStretch()
