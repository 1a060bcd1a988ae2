"""
ドキュメント読み込みモジュール

DocumentLoaderとその実装クラスを定義
"""

import logging
import os
from typing import Optional, Tuple
from datetime import date, datetime

from ..models import Document
from .selectors import DEFAULT_FILE_PATTERN

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def parse_filename_date(file_name: str, today: Optional[date] = None) -> Tuple[date, bool]:
    """
    ファイル名（YYYY-MM-DD.md）から日付を取り出す

    Args:
        file_name: ファイル名（パスでも可）
        today: 解釈に失敗した場合に使う日付（Noneの場合は実行日）

    Returns:
        (日付, 解釈に成功したか) のタプル
    """
    base_name = os.path.basename(file_name)
    # ゼロ埋めされていない名前（2024-1-5.md など）は選択時と同じく対象外
    if DEFAULT_FILE_PATTERN.fullmatch(base_name):
        try:
            return datetime.strptime(base_name[:-len(".md")], DATE_FORMAT).date(), True
        except ValueError:
            pass
    # 解釈できない場合は処理日で代用する
    return (today or date.today()), False


class DocumentLoader:
    """ドキュメント読み込みのベースクラス（拡張可能）"""

    def load(self, source: str) -> Document:
        """
        ドキュメントを読み込む

        Args:
            source: ドキュメントのファイルパス

        Returns:
            Documentオブジェクト
        """
        raise NotImplementedError("サブクラスで実装してください")

    def load_from_text(self, name: str, text: str) -> Document:
        """
        テキストから直接Documentを作成

        Args:
            name: ファイル名（日付の解釈に使う）
            text: テキスト内容

        Returns:
            Documentオブジェクト
        """
        doc_date, dated = parse_filename_date(name)
        if not dated:
            logger.debug("ファイル名から日付を解釈できないため実行日を使用します: %s", name)
        return Document(name=os.path.basename(name), content=text, date=doc_date, dated=dated)


class DatedNoteLoader(DocumentLoader):
    """日付名のMarkdownノート（YYYY-MM-DD.md）読み込み"""

    def __init__(self, encoding: str = "utf-8"):
        """
        Args:
            encoding: ファイルの文字コード
        """
        self.encoding = encoding

    def load(self, source: str) -> Document:
        """テキストファイルを読み込む（OSError/UnicodeDecodeErrorはそのまま送出）"""
        # 改行コードは変換せず、"\n" での分割は抽出側で行う
        with open(source, 'r', encoding=self.encoding, newline='') as f:
            content = f.read()

        return self.load_from_text(source, content)
