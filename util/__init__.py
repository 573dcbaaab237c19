from .builder_config import BuilderConfig
from .option_edits import replace_option, delete_option, append_option, next_option_label

__all__ = [
    "BuilderConfig",
    "replace_option",
    "delete_option",
    "append_option",
    "next_option_label",
]
