"""ドキュメント読み込みモジュール"""

from .loaders import (
    DocumentLoader,
    DatedNoteLoader,
    parse_filename_date,
)
from .selectors import DatedFileSelector, DEFAULT_FILE_PATTERN

__all__ = [
    'DocumentLoader',
    'DatedNoteLoader',
    'parse_filename_date',
    'DatedFileSelector',
    'DEFAULT_FILE_PATTERN',
]
