from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import ClassVar


class FieldType(str, Enum):
    TEXT = "text"
    SELECT = "select"
    RADIO = "radio"


@dataclass(frozen=True)
class Field:
    id: str
    label: str

    field_type: ClassVar[FieldType]
    # Attributes an edit is allowed to overwrite
    editable: ClassVar[tuple[str, ...]] = ("label",)

    def __str__(self):
        return field_summary(self)

    def to_dict(self):
        """Convert field to a plain dict for the schema view."""
        data = asdict(self)
        data['type'] = self.field_type.value
        if 'options' in data:
            data['options'] = list(data['options'])
        return data


@dataclass(frozen=True)
class TextField(Field):
    field_type: ClassVar[FieldType] = FieldType.TEXT


@dataclass(frozen=True)
class ChoiceField(Field):
    """Common base for fields offering a list of options."""
    options: tuple[str, ...] = field(default_factory=tuple)

    editable: ClassVar[tuple[str, ...]] = ("label", "options")

    def __post_init__(self):
        # Accept any sequence but always hold a tuple
        object.__setattr__(self, 'options', tuple(self.options))


@dataclass(frozen=True)
class SelectField(ChoiceField):
    field_type: ClassVar[FieldType] = FieldType.SELECT


@dataclass(frozen=True)
class RadioField(ChoiceField):
    field_type: ClassVar[FieldType] = FieldType.RADIO


def field_summary(field_obj: Field) -> str:
    """Header text used by the editor, e.g. "[select] Country"."""
    return f"[{field_obj.field_type.value}] {field_obj.label}"
