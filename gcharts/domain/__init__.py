"""领域层（Domain）。"""

from .option_store import OptionStore

__all__ = [
    "OptionStore",
]
