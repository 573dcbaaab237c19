from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QLabel,
    QLineEdit,
    QComboBox,
    QRadioButton,
    QButtonGroup,
    QScrollArea,
)

import logging

from fields import Field, FieldType

logger = logging.getLogger(__name__)


class FormPreview(QWidget):
    """Right-side panel rendering the form as the end user would see it.

    The controls accept input but nothing typed here reaches the store. Each
    field gets its own container keyed by id; a container is rebuilt only
    when its field changes, so input in the other fields is kept.
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(4, 4, 4, 4)
        self.setLayout(main_layout)

        heading = QLabel("Form preview")
        heading.setObjectName("heading")
        main_layout.addWidget(heading)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        main_layout.addWidget(self.scroll_area, stretch=1)

        self.form_widget = QWidget()
        self.form_layout = QVBoxLayout()
        self.form_layout.addStretch()
        self.form_widget.setLayout(self.form_layout)
        self.scroll_area.setWidget(self.form_widget)

        # field id -> (field rendered, container widget)
        self._containers: dict[str, tuple[Field, QWidget]] = {}

    def container_for(self, field_id: str) -> QWidget | None:
        entry = self._containers.get(field_id)
        return entry[1] if entry else None

    def set_fields(self, fields: tuple[Field, ...]):
        current_ids = {f.id for f in fields}

        for field_id in list(self._containers):
            if field_id not in current_ids:
                _, container = self._containers.pop(field_id)
                self._discard(container)

        for position, field_obj in enumerate(fields):
            entry = self._containers.get(field_obj.id)
            if entry is not None and entry[0] == field_obj:
                container = entry[1]
                if self.form_layout.indexOf(container) != position:
                    self.form_layout.removeWidget(container)
                    self.form_layout.insertWidget(position, container)
                continue

            if entry is not None:
                logger.debug(f"Re-rendering preview of field {field_obj.id}")
                self._discard(entry[1])
            container = self._build_container(field_obj)
            self._containers[field_obj.id] = (field_obj, container)
            self.form_layout.insertWidget(position, container)

    def _discard(self, container: QWidget):
        self.form_layout.removeWidget(container)
        container.setParent(None)
        container.deleteLater()

    def _build_container(self, field_obj: Field) -> QWidget:
        container = QWidget()
        container.setObjectName("field")
        field_layout = QVBoxLayout()
        field_layout.setContentsMargins(0, 0, 0, 8)
        container.setLayout(field_layout)
        self._render_field(field_obj, container, field_layout)
        return container

    def _render_field(self, field_obj: Field, container: QWidget, layout: QVBoxLayout):
        if field_obj.field_type == FieldType.TEXT:
            label = QLabel(field_obj.label)
            line_edit = QLineEdit()
            line_edit.setObjectName(field_obj.id)
            label.setBuddy(line_edit)
            layout.addWidget(label)
            layout.addWidget(line_edit)
        elif field_obj.field_type == FieldType.SELECT:
            label = QLabel(field_obj.label)
            combo = QComboBox()
            combo.setObjectName(field_obj.id)
            combo.addItems(list(field_obj.options))
            label.setBuddy(combo)
            layout.addWidget(label)
            layout.addWidget(combo)
        elif field_obj.field_type == FieldType.RADIO:
            layout.addWidget(QLabel(field_obj.label))
            # Owned by the container
            group = QButtonGroup(container)
            group.setExclusive(True)
            for option in field_obj.options:
                radio = QRadioButton(option)
                radio.setObjectName(field_obj.id + option)
                group.addButton(radio)
                layout.addWidget(radio)
        else:
            raise ValueError(f"Unhandled field type: {field_obj.field_type}")
