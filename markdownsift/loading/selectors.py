"""
ファイル選択モジュール

ディレクトリ直下から日付名のMarkdownファイルを選び出す
"""

import os
import re
from typing import List, Optional

from ..exceptions import DirectoryAccessError

# YYYY-MM-DD.md
DEFAULT_FILE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}\.md$")


class DatedFileSelector:
    """ファイル名のパターンで対象ファイルを選択する（サブディレクトリは対象外）"""

    def __init__(self, pattern: Optional[re.Pattern] = None):
        """
        Args:
            pattern: ファイル名に対する正規表現（Noneの場合はYYYY-MM-DD.md）
        """
        self.pattern = pattern or DEFAULT_FILE_PATTERN

    def matches(self, file_name: str) -> bool:
        """ファイル名全体がパターンに一致するか"""
        return self.pattern.fullmatch(file_name) is not None

    def select(self, directory: str) -> List[str]:
        """
        パターンに一致するファイル名を返す

        Args:
            directory: 検索対象ディレクトリ

        Returns:
            ファイル名のリスト（順序はディレクトリの列挙順、ソートはしない）

        Raises:
            DirectoryAccessError: ディレクトリが存在しない、または読み込めない場合
        """
        try:
            with os.scandir(directory) as entries:
                return [
                    entry.name
                    for entry in entries
                    if entry.is_file() and self.matches(entry.name)
                ]
        except OSError as e:
            raise DirectoryAccessError(directory, e.strerror or str(e)) from e
