from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QLabel,
    QScrollArea,
    QPlainTextEdit,
    QGroupBox,
)
from PyQt6.QtGui import QFont
import json
import logging

from field_factory import new_field
from field_store import AddField
from fields import Field
from .add_field_button_layout import AddFieldButtonLayout
from .field_editor import FieldEditor

logger = logging.getLogger(__name__)


class FieldEditorPanel(QWidget):
    """
    Left-side panel for building the form.

    Layout (top to bottom):
      1. "Add Text / Add Select / Add Radio" palette.
      2. Scrollable list with one FieldEditor per field, in form order.
      3. Read-only JSON view of the current schema.

    ``dispatch`` receives the operations produced here; ``set_fields`` is
    called with every new snapshot of the collection.
    """

    def __init__(self, dispatch, id_source=None, parent=None):
        super().__init__(parent)
        self._dispatch = dispatch
        self._id_source = id_source

        # Editors keyed by field id, reused across snapshots
        self._editors: dict[str, FieldEditor] = {}

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(8)
        self.setLayout(main_layout)

        heading = QLabel("Editor")
        heading.setObjectName("heading")
        main_layout.addWidget(heading)

        # ---- 1. Add field palette ----
        self.button_layout = AddFieldButtonLayout()
        self.button_layout.add_requested.connect(self.add_field_of_type)
        main_layout.addLayout(self.button_layout)

        # ---- 2. Field editors ----
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        editors_widget = QWidget()
        self.editors_layout = QVBoxLayout()
        self.editors_layout.addStretch()
        editors_widget.setLayout(self.editors_layout)
        self.scroll_area.setWidget(editors_widget)
        main_layout.addWidget(self.scroll_area, stretch=2)

        # ---- 3. Schema JSON ----
        json_group = QGroupBox("Schema JSON")
        json_layout = QVBoxLayout()
        json_group.setLayout(json_layout)

        self.json_view = QPlainTextEdit()
        self.json_view.setReadOnly(True)
        self.json_view.setPlaceholderText("Add a field to see its schema here...")
        font = QFont("Courier New")
        font.setStyleHint(QFont.StyleHint.Monospace)
        self.json_view.setFont(font)
        self.json_view.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        json_layout.addWidget(self.json_view)

        main_layout.addWidget(json_group, stretch=1)

    # ------------------------------------------------------------------
    # Public API used by the main window
    # ------------------------------------------------------------------

    def add_field_of_type(self, field_type):
        field_obj = new_field(field_type, self._id_source)
        logger.debug(f"Palette requested new {field_obj.field_type.value} field {field_obj.id}")
        self._dispatch(AddField(field_obj))

    def editor_for(self, field_id: str) -> FieldEditor | None:
        return self._editors.get(field_id)

    def set_fields(self, fields: tuple[Field, ...]):
        """Bring the editors in line with a new snapshot of the collection."""
        current_ids = {f.id for f in fields}

        for field_id in list(self._editors):
            if field_id not in current_ids:
                editor = self._editors.pop(field_id)
                self.editors_layout.removeWidget(editor)
                editor.deleteLater()

        for position, field_obj in enumerate(fields):
            editor = self._editors.get(field_obj.id)
            if editor is None:
                editor = FieldEditor(field_obj, self._dispatch)
                self._editors[field_obj.id] = editor
                self.editors_layout.insertWidget(position, editor)
                continue
            if editor.field != field_obj:
                editor.set_field(field_obj)
            if self.editors_layout.indexOf(editor) != position:
                self.editors_layout.removeWidget(editor)
                self.editors_layout.insertWidget(position, editor)

        self.json_view.setPlainText(schema_json(fields))


def schema_json(fields) -> str:
    if not fields:
        return ""
    return json.dumps([f.to_dict() for f in fields], indent=2)
