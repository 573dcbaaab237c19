"""Options-list editing for select and radio fields.

Each helper returns a new tuple and leaves the given sequence untouched; the
result is submitted to the store as the field's new ``options``. Indexes are
display positions, so only 0 <= index < len(options) is accepted.
"""
from collections.abc import Sequence


def _check_index(options: Sequence[str], index: int) -> None:
    if not 0 <= index < len(options):
        raise IndexError(f"Option index out of range: {index}")


def replace_option(options: Sequence[str], index: int, value: str) -> tuple[str, ...]:
    """Return options with the entry at index replaced by value."""
    _check_index(options, index)
    new_options = list(options)
    new_options[index] = value
    return tuple(new_options)


def delete_option(options: Sequence[str], index: int) -> tuple[str, ...]:
    """Return options without the entry at index; later entries move up one place."""
    _check_index(options, index)
    new_options = list(options)
    del new_options[index]
    return tuple(new_options)


def next_option_label(options: Sequence[str]) -> str:
    # Numbered from the current length, so labels can repeat after deletions
    return f"option {len(options) + 1}"


def append_option(options: Sequence[str]) -> tuple[str, ...]:
    return (*options, next_option_label(options))
