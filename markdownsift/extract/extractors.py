"""
ハッシュタグブロック抽出モジュール

Extractorとその実装クラスを定義
"""

import logging
from typing import IO, Iterable, List, Optional, Set
from datetime import date
from abc import ABC, abstractmethod
import re

from ..models import Document, Fragment, FragmentMapping

logger = logging.getLogger(__name__)

# ハッシュタグ: "#" + 1文字以上の単語構成文字
HASHTAG_PATTERN = re.compile(r"#\w+")
# Markdown見出し: "#" ～ "####" + 半角スペース（前後の空白を除いた行に適用）
HEADING_PATTERN = re.compile(r"^#{1,4} ")


def find_hashtags(line: str, pattern: re.Pattern = HASHTAG_PATTERN, dedupe: bool = False) -> List[str]:
    """
    行に含まれるハッシュタグを出現順に返す

    Args:
        line: 対象の行
        pattern: ハッシュタグの正規表現
        dedupe: 同じタグが複数回出現した場合に1つにまとめるか

    Returns:
        ハッシュタグのリスト
    """
    tags = pattern.findall(line)
    if not dedupe:
        return tags
    seen: Set[str] = set()
    unique = []
    for tag in tags:
        if tag not in seen:
            seen.add(tag)
            unique.append(tag)
    return unique


def split_lines(text: str) -> List[str]:
    """LFだけで分割する（str.splitlinesと違い末尾の空行も残す）"""
    return text.split("\n")


class Extractor(ABC):
    """抽出のベースクラス"""

    @abstractmethod
    def extract(self, document: Document) -> FragmentMapping:
        """
        ドキュメントからハッシュタグごとの断片を取り出す

        Args:
            document: 抽出対象のDocument

        Returns:
            ハッシュタグ -> Fragmentのリスト
        """
        raise NotImplementedError("サブクラスで実装してください")


class HashtagBlockExtractor(Extractor):
    """
    ハッシュタグを含む行を起点にブロックを切り出す。

    - 見出しブロック: ハッシュタグを含むMarkdown見出し行から、次の見出しブロック開始行
      （または文書末尾）の直前まで。途中の空行もそのまま含む。
    - 通常ブロック: ハッシュタグを含む行から、最初の空行の直前まで。

    ブロックに取り込まれた行は、ハッシュタグを含んでいても独立した起点にはならない。
    """

    def __init__(
        self,
        hashtag_pattern: Optional[re.Pattern] = None,
        heading_pattern: Optional[re.Pattern] = None,
        dedupe_line_tags: bool = False,
    ):
        """
        Args:
            hashtag_pattern: ハッシュタグの正規表現（Noneの場合は #\\w+）
            heading_pattern: 見出し判定の正規表現（Noneの場合は "#"～"####" + 空白）
            dedupe_line_tags: 1行に同じタグが複数あるとき1回だけ追加するか（既定では出現回数分追加）
        """
        self.hashtag_pattern = hashtag_pattern or HASHTAG_PATTERN
        self.heading_pattern = heading_pattern or HEADING_PATTERN
        self.dedupe_line_tags = dedupe_line_tags

    def extract(self, document: Document) -> FragmentMapping:
        return self.extract_text(document.content, document.date, source=document.name)

    def extract_stream(self, reader: IO[str], doc_date: date, source: Optional[str] = None) -> FragmentMapping:
        """
        ストリームを読み込んで抽出する

        読み込みに失敗した場合は例外を送出せず空の結果を返す
        """
        try:
            text = reader.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("読み込みに失敗したため抽出をスキップします: %s (%s)", source or reader, e)
            return {}
        return self.extract_text(text, doc_date, source=source)

    def is_heading_start(self, line: str) -> bool:
        """ハッシュタグを含むMarkdown見出し行か"""
        stripped = line.strip()
        if not stripped or not self.hashtag_pattern.search(stripped):
            return False
        return self.heading_pattern.match(stripped) is not None

    def find_heading_starts(self, lines: Iterable[str]) -> Set[int]:
        """1パス目: 見出しブロック開始行の行番号を集める"""
        return {i for i, line in enumerate(lines) if self.is_heading_start(line)}

    def extract_text(self, text: str, doc_date: date, source: Optional[str] = None) -> FragmentMapping:
        """
        テキストからハッシュタグごとのブロックを取り出す

        Args:
            text: 対象テキスト
            doc_date: ブロックに付与する日付
            source: 元ファイル名（任意）

        Returns:
            ハッシュタグ -> Fragmentのリスト（ファイル内の出現順）
        """
        result: FragmentMapping = {}
        lines = split_lines(text)
        heading_starts = self.find_heading_starts(lines)

        # 2パス目: ブロックの収集
        i = 0
        while i < len(lines):
            hashtags = find_hashtags(lines[i], self.hashtag_pattern, dedupe=self.dedupe_line_tags)
            if not hashtags:
                i += 1
                continue

            j = i + 1
            if i in heading_starts:
                # 次の見出しブロックまで（空行も含む）
                while j < len(lines) and j not in heading_starts:
                    j += 1
            else:
                # 空行まで
                while j < len(lines) and lines[j].strip() != "":
                    j += 1

            fragment = Fragment(content="\n".join(lines[i:j]), date=doc_date, source=source)
            for tag in hashtags:
                result.setdefault(tag, []).append(fragment)

            # 取り込んだ行は再走査しない
            i = j

        return result


_default_extractor = HashtagBlockExtractor()


def extract_blocks(text: str, doc_date: date) -> FragmentMapping:
    """既定の設定でテキストからブロックを抽出する"""
    return _default_extractor.extract_text(text, doc_date)
