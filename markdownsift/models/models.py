"""
データモデル定義

Fragment と Document を定義するモジュール
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Fragment:
    """ハッシュタグ行から切り出されたテキスト断片（不変）"""
    content: str
    date: date
    source: Optional[str] = None


@dataclass
class Document:
    """日付付きノートファイルを表現するクラス"""
    name: str
    content: str
    date: date
    # ファイル名から日付を解釈できなかった場合は False（dateは処理日）
    dated: bool = True


# ハッシュタグ -> Fragmentのリスト（リスト内の順序は意味を持つ）
FragmentMapping = Dict[str, List[Fragment]]
