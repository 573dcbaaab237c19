from .add_field_button_layout import AddFieldButtonLayout
from .field_editor import FieldEditor
from .field_editor_panel import FieldEditorPanel, schema_json
from .form_preview import FormPreview

__all__ = [
    "AddFieldButtonLayout",
    "FieldEditor",
    "FieldEditorPanel",
    "FormPreview",
    "schema_json",
]
