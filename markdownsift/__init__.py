"""
markdownsift - 日付名ノートからのハッシュタグブロック抽出

このパッケージは、以下のコンポーネントで構成されています：
- DatedFileSelector: YYYY-MM-DD.md 形式のファイル選択
- DocumentLoader: ノートの読み込みとファイル名からの日付解釈
- Extractor: ハッシュタグ行を起点としたブロック抽出
- aggregate / filter_by_tags: ファイル横断の集約とタグによる絞り込み
- Writer: 標準出力・タグごとのファイルへの書き出し
- SiftPipeline: 全体統合

見出し行（"# " ～ "#### "）に付いたハッシュタグは次の見出しブロックまで、
それ以外の行に付いたハッシュタグは次の空行までを1つのブロックとして扱います。
"""

# データモデル
from .models import Fragment, Document, FragmentMapping

# 例外
from .exceptions import (
    MarkdownSiftError,
    ConfigError,
    DirectoryAccessError,
    OutputError,
)

# ローダー
from .loading import (
    DocumentLoader,
    DatedNoteLoader,
    DatedFileSelector,
    parse_filename_date,
)

# 抽出
from .extract import (
    Extractor,
    HashtagBlockExtractor,
    extract_blocks,
)

# フィルタ
from .filters import filter_by_tags, normalize_tags

# 出力
from .writers import (
    Writer,
    ConsoleWriter,
    FileWriter,
    write_snippets,
)

# パイプライン
from .pipeline import SiftPipeline, aggregate, merge_into

__all__ = [
    # データモデル
    'Fragment',
    'Document',
    'FragmentMapping',
    # 例外
    'MarkdownSiftError',
    'ConfigError',
    'DirectoryAccessError',
    'OutputError',
    # ローダー
    'DocumentLoader',
    'DatedNoteLoader',
    'DatedFileSelector',
    'parse_filename_date',
    # 抽出
    'Extractor',
    'HashtagBlockExtractor',
    'extract_blocks',
    # フィルタ
    'filter_by_tags',
    'normalize_tags',
    # 出力
    'Writer',
    'ConsoleWriter',
    'FileWriter',
    'write_snippets',
    # パイプライン
    'SiftPipeline',
    'aggregate',
    'merge_into',
]
