from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QToolButton,
    QFrame,
)
from PyQt6.QtCore import Qt
import logging

from field_store import EditField, RemoveField
from fields import Field, FieldType, field_summary
from util.option_edits import replace_option, delete_option, append_option

logger = logging.getLogger(__name__)


class FieldEditor(QFrame):
    """
    Editor for a single field: a collapsible header showing "[type] label"
    with a Delete button, and a body with the label input and, for select
    and radio fields, one row per option.

    The editor never changes the field itself. Every user change is turned
    into an operation and handed to ``dispatch``; the editor is then updated
    from the store's next snapshot through ``set_field``.
    """

    def __init__(self, field_obj: Field, dispatch, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._field = field_obj
        self._dispatch = dispatch

        # One (row widget, line edit, delete button) per option, in display order
        self._option_rows = []

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(4, 4, 4, 4)
        self.setLayout(main_layout)

        # ---- Header ----
        header_layout = QHBoxLayout()
        self.expand_button = QToolButton()
        self.expand_button.setCheckable(True)
        self.expand_button.setArrowType(Qt.ArrowType.RightArrow)
        self.expand_button.toggled.connect(self._on_expand_toggled)
        header_layout.addWidget(self.expand_button)

        self.summary_label = QLabel(field_summary(field_obj))
        header_layout.addWidget(self.summary_label, stretch=1)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("delete")
        self.delete_button.clicked.connect(self._on_delete_clicked)
        header_layout.addWidget(self.delete_button)
        main_layout.addLayout(header_layout)

        # ---- Body (hidden until expanded) ----
        self.body = QWidget()
        body_layout = QVBoxLayout()
        body_layout.setContentsMargins(16, 0, 0, 0)
        self.body.setLayout(body_layout)

        self.label_input = QLineEdit(field_obj.label)
        self.label_input.setObjectName(field_obj.id + "editor")
        self.label_input.textEdited.connect(self._on_label_edited)
        body_layout.addWidget(self.label_input)

        self.options_section = None
        self.options_layout = None
        self.add_option_button = None
        if field_obj.field_type in (FieldType.SELECT, FieldType.RADIO):
            self.options_section = QWidget()
            self.options_layout = QVBoxLayout()
            self.options_layout.setContentsMargins(0, 0, 0, 0)
            self.options_section.setLayout(self.options_layout)
            body_layout.addWidget(self.options_section)

            self.add_option_button = QPushButton("Add option")
            self.add_option_button.setObjectName("option")
            self.add_option_button.clicked.connect(self._on_add_option_clicked)
            body_layout.addWidget(self.add_option_button)

            self._rebuild_option_rows(field_obj.options)

        self.body.setVisible(False)
        main_layout.addWidget(self.body)

    # ------------------------------------------------------------------
    # Public API used by the editor panel
    # ------------------------------------------------------------------

    @property
    def field(self) -> Field:
        return self._field

    def set_field(self, field_obj: Field):
        """Sync the controls with a newer snapshot of the same field."""
        self._field = field_obj
        self.summary_label.setText(field_summary(field_obj))

        # Only touch texts that differ, so the cursor of the input being typed in stays put
        if self.label_input.text() != field_obj.label:
            old_block = self.label_input.blockSignals(True)
            self.label_input.setText(field_obj.label)
            self.label_input.blockSignals(old_block)

        if self.options_layout is None:
            return
        options = field_obj.options
        if len(options) != len(self._option_rows):
            self._rebuild_option_rows(options)
            return
        for (_, option_input, _), option in zip(self._option_rows, options):
            if option_input.text() != option:
                old_block = option_input.blockSignals(True)
                option_input.setText(option)
                option_input.blockSignals(old_block)

    def set_expanded(self, expanded: bool):
        self.expand_button.setChecked(expanded)

    def option_inputs(self) -> list[QLineEdit]:
        return [option_input for _, option_input, _ in self._option_rows]

    def option_delete_buttons(self) -> list[QPushButton]:
        return [button for _, _, button in self._option_rows]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _rebuild_option_rows(self, options):
        for row_widget, _, _ in self._option_rows:
            self.options_layout.removeWidget(row_widget)
            row_widget.deleteLater()
        self._option_rows = []

        for index, option in enumerate(options):
            row_widget = QWidget()
            row_layout = QHBoxLayout()
            row_layout.setContentsMargins(0, 0, 0, 0)
            row_widget.setLayout(row_layout)

            option_input = QLineEdit(option)
            option_input.setObjectName("option")
            option_input.textEdited.connect(
                lambda text, i=index: self._on_option_edited(i, text)
            )
            row_layout.addWidget(option_input, stretch=1)

            delete_option_button = QPushButton("Delete option")
            delete_option_button.clicked.connect(
                lambda _checked=False, i=index: self._on_delete_option_clicked(i)
            )
            row_layout.addWidget(delete_option_button)

            self.options_layout.addWidget(row_widget)
            self._option_rows.append((row_widget, option_input, delete_option_button))

    def _on_expand_toggled(self, checked: bool):
        self.expand_button.setArrowType(
            Qt.ArrowType.DownArrow if checked else Qt.ArrowType.RightArrow
        )
        self.body.setVisible(checked)

    def _on_delete_clicked(self, *args):
        self._dispatch(RemoveField(self._field.id))

    def _on_label_edited(self, text: str):
        self._dispatch(EditField(self._field.id, {"label": text}))

    def _on_option_edited(self, index: int, text: str):
        options = replace_option(self._field.options, index, text)
        self._dispatch(EditField(self._field.id, {"options": options}))

    def _on_delete_option_clicked(self, index: int):
        logger.debug(f"Deleting option {index} of field {self._field.id}")
        options = delete_option(self._field.options, index)
        self._dispatch(EditField(self._field.id, {"options": options}))

    def _on_add_option_clicked(self, *args):
        options = append_option(self._field.options)
        self._dispatch(EditField(self._field.id, {"options": options}))
