from collections.abc import Callable
import itertools
import uuid

from fields import Field, FieldType, TextField, SelectField, RadioField

IdSource = Callable[[], str]

# Field type -> (class, palette caption)
FIELD_TYPE_MAP = {
    FieldType.TEXT: (TextField, "Add Text"),
    FieldType.SELECT: (SelectField, "Add Select"),
    FieldType.RADIO: (RadioField, "Add Radio"),
}
FIRST_OPTION = "option 1"


def uuid_id_source() -> str:
    return str(uuid.uuid4())


def sequential_id_source(prefix: str = "field-") -> IdSource:
    """Return an id source yielding prefix1, prefix2, ... (deterministic, for tests)."""
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


def default_label(field_type: FieldType) -> str:
    return f"New {field_type.value} field title"


def new_field(field_type: FieldType | str, id_source: IdSource | None = None) -> Field:
    """Build a new field of the given type with a fresh id and default contents.

    Select and radio fields start with a single option.
    """
    try:
        field_type = FieldType(field_type)
    except ValueError:
        raise ValueError(f"Invalid field type: {field_type}") from None
    field_class, _ = FIELD_TYPE_MAP[field_type]
    id_source = id_source or uuid_id_source
    if field_type == FieldType.TEXT:
        return field_class(id=id_source(), label=default_label(field_type))
    return field_class(id=id_source(), label=default_label(field_type), options=(FIRST_OPTION,))


def new_text_field(id_source: IdSource | None = None) -> TextField:
    return new_field(FieldType.TEXT, id_source)


def new_select_field(id_source: IdSource | None = None) -> SelectField:
    return new_field(FieldType.SELECT, id_source)


def new_radio_field(id_source: IdSource | None = None) -> RadioField:
    return new_field(FieldType.RADIO, id_source)
