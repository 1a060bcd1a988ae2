"""タグフィルタモジュール"""

from .tag_filter import filter_by_tags, normalize_tags

__all__ = ['filter_by_tags', 'normalize_tags']
