"""Field schema store: operations on the ordered field collection."""
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
import logging
from types import MappingProxyType
from typing import Any, Union

from PyQt6.QtCore import QObject, pyqtSignal

from fields import Field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddField:
    field: Field


@dataclass(frozen=True)
class RemoveField:
    field_id: str


@dataclass(frozen=True)
class EditField:
    field_id: str
    # Subset of the target's editable attributes, e.g. {"label": "Name"}
    changes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Frozen copy, so the caller's dict can't change the operation afterwards
        changes = dict(self.changes)
        if 'options' in changes:
            changes['options'] = tuple(changes['options'])
        object.__setattr__(self, 'changes', MappingProxyType(changes))

    def __hash__(self):
        return hash((self.field_id, tuple(sorted(self.changes.items()))))


Operation = Union[AddField, RemoveField, EditField]


def _merge(field_obj: Field, changes: Mapping[str, Any]) -> Field:
    """Overwrite the editable attributes present in changes; ignore the rest."""
    updates = {key: value for key, value in changes.items() if key in field_obj.editable}
    if not updates:
        return field_obj
    return replace(field_obj, **updates)


def apply(fields: tuple[Field, ...], operation: Operation) -> tuple[Field, ...]:
    """Return the collection that results from applying operation to fields.

    Never raises. Remove and edit on an unknown id return fields itself.
    """
    if isinstance(operation, AddField):
        return (*fields, operation.field)

    if isinstance(operation, RemoveField):
        remaining = tuple(f for f in fields if f.id != operation.field_id)
        if len(remaining) == len(fields):
            return fields
        return remaining

    if isinstance(operation, EditField):
        for idx, field_obj in enumerate(fields):
            if field_obj.id == operation.field_id:
                edited = _merge(field_obj, operation.changes)
                return (*fields[:idx], edited, *fields[idx + 1:])
        return fields

    return fields


class FieldStore(QObject):
    """Owns the current field collection and applies dispatched operations in order."""

    # Emitted with the new tuple of fields after every effective operation
    fields_changed = pyqtSignal(tuple)

    def __init__(self, fields=(), parent=None):
        super().__init__(parent)
        self._fields: tuple[Field, ...] = tuple(fields)

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def find_field(self, field_id: str) -> Field | None:
        for field_obj in self._fields:
            if field_obj.id == field_id:
                return field_obj
        return None

    def dispatch(self, operation: Operation) -> None:
        new_fields = apply(self._fields, operation)
        if new_fields is self._fields:
            logger.debug(f"Operation had no effect: {operation}")
            return

        self._fields = new_fields
        if isinstance(operation, AddField):
            logger.info(f"Added {operation.field.field_type.value} field {operation.field.id}")
        elif isinstance(operation, RemoveField):
            logger.info(f"Removed field {operation.field_id}")
        else:
            logger.debug(f"Applied {operation}")
        self.fields_changed.emit(self._fields)

    def add_field(self, field_obj: Field) -> None:
        self.dispatch(AddField(field_obj))

    def remove_field(self, field_id: str) -> None:
        self.dispatch(RemoveField(field_id))

    def edit_field(self, field_id: str, **changes) -> None:
        self.dispatch(EditField(field_id, changes))
