"""ハッシュタグブロック抽出モジュール"""

from .extractors import (
    Extractor,
    HashtagBlockExtractor,
    extract_blocks,
    find_hashtags,
    HASHTAG_PATTERN,
    HEADING_PATTERN,
)

__all__ = [
    'Extractor',
    'HashtagBlockExtractor',
    'extract_blocks',
    'find_hashtags',
    'HASHTAG_PATTERN',
    'HEADING_PATTERN',
]
