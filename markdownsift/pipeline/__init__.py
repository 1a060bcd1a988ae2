"""抽出パイプラインモジュール"""

from .pipeline import SiftPipeline, aggregate, merge_into

__all__ = ['SiftPipeline', 'aggregate', 'merge_into']
