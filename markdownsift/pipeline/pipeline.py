"""
抽出パイプラインモジュール

SiftPipelineと集約関数を定義
"""

import logging
import os
from typing import Any, Dict, Iterable, Iterator, Optional

from ..models import Document, FragmentMapping
from ..loading import DocumentLoader, DatedNoteLoader, DatedFileSelector
from ..extract import Extractor, HashtagBlockExtractor
from ..filters import filter_by_tags, normalize_tags
from ..writers import Writer, write_snippets

logger = logging.getLogger(__name__)


def merge_into(target: FragmentMapping, source: FragmentMapping) -> FragmentMapping:
    """
    sourceの各タグのFragmentをtargetの末尾に追加する（in-place、重複除去なし）

    Returns:
        target（同じインスタンス）
    """
    for tag, fragments in source.items():
        target.setdefault(tag, []).extend(fragments)
    return target


def aggregate(documents: Iterable[Document], extractor: Optional[Extractor] = None) -> FragmentMapping:
    """
    ドキュメントを順に抽出し、1つの辞書に集約する

    Args:
        documents: ドキュメント（この順序でFragmentが並ぶ）
        extractor: 抽出器（Noneの場合はHashtagBlockExtractor）

    Returns:
        ハッシュタグ -> Fragmentのリスト
    """
    extractor = extractor or HashtagBlockExtractor()
    snippets: FragmentMapping = {}
    for doc in documents:
        merge_into(snippets, extractor.extract(doc))
    return snippets


class SiftPipeline:
    """ファイル選択 → 読み込み → 抽出 → 集約 → フィルタ → 出力 をまとめるクラス"""

    def __init__(
        self,
        selector: Optional[DatedFileSelector] = None,
        document_loader: Optional[DocumentLoader] = None,
        extractor: Optional[Extractor] = None,
        sort_files: bool = False,
    ):
        """
        Args:
            selector: ファイル選択器（Noneの場合はYYYY-MM-DD.md）
            document_loader: ドキュメント読み込み器
            extractor: 抽出器
            sort_files: ファイル名順に処理するか（Falseの場合はディレクトリの列挙順）
        """
        self.selector = selector or DatedFileSelector()
        self.document_loader = document_loader or DatedNoteLoader()
        self.extractor = extractor or HashtagBlockExtractor()
        self.sort_files = sort_files
        self._stats: Dict[str, int] = {}
        self._reset_stats()

    def _reset_stats(self) -> None:
        self._stats = {
            'files_matched': 0,
            'documents_processed': 0,
            'documents_skipped': 0,
            'undated_documents': 0,
            'tags': 0,
            'fragments': 0,
        }

    def load_documents(self, path: str) -> Iterator[Document]:
        """
        対象ファイルを読み込んで順に返す

        ディレクトリを読めない場合はDirectoryAccessErrorを送出する。
        個々のファイルが読めない場合は警告を出してスキップする。
        """
        file_names = self.selector.select(path)
        if self.sort_files:
            file_names = sorted(file_names)
        self._stats['files_matched'] = len(file_names)

        for file_name in file_names:
            source = os.path.join(path, file_name)
            try:
                doc = self.document_loader.load(source)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("ファイルを読み込めないためスキップします: %s (%s)", source, e)
                self._stats['documents_skipped'] += 1
                continue

            self._stats['documents_processed'] += 1
            if not doc.dated:
                self._stats['undated_documents'] += 1
            yield doc

    def collect(self, path: str) -> FragmentMapping:
        """
        ディレクトリ内のノートからハッシュタグごとのブロックを集める

        Args:
            path: ソースディレクトリ

        Returns:
            ハッシュタグ -> Fragmentのリスト
        """
        self._reset_stats()
        # 選択エラーは最初のnext()で送出される
        snippets = aggregate(self.load_documents(path), self.extractor)

        self._stats['tags'] = len(snippets)
        self._stats['fragments'] = sum(len(fragments) for fragments in snippets.values())
        logger.info(
            "%d件のファイルから%d個のタグ、%d個のブロックを抽出しました",
            self._stats['documents_processed'],
            self._stats['tags'],
            self._stats['fragments'],
        )
        return snippets

    def run(
        self,
        path: str,
        writer: Writer,
        tags: Optional[Iterable[str]] = None,
        sort_keys: bool = True,
    ) -> FragmentMapping:
        """
        収集・フィルタ・書き出しを一括で実行

        Args:
            path: ソースディレクトリ
            writer: 出力先
            tags: 出力するタグ（"#"は省略可、Noneの場合はすべて）
            sort_keys: タグを名前順に出力するか

        Returns:
            書き出したハッシュタグ -> Fragmentのリスト
        """
        snippets = filter_by_tags(self.collect(path), normalize_tags(tags))
        write_snippets(snippets, writer, sort_keys=sort_keys)
        return snippets

    def get_stats(self) -> Dict[str, Any]:
        """直近のcollect()の統計情報を取得"""
        stats: Dict[str, Any] = dict(self._stats)
        stats.update({
            'selector_type': type(self.selector).__name__,
            'loader_type': type(self.document_loader).__name__,
            'extractor_type': type(self.extractor).__name__,
        })
        return stats
