"""
タグフィルタモジュール

集約結果を指定されたハッシュタグに絞り込む
"""

from typing import Iterable, List, Optional, Union

from ..models import FragmentMapping


def normalize_tags(tags: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """
    タグ指定を "#付き" のリストに正規化する

    Args:
        tags: カンマ区切りの文字列、またはタグのリスト（"#"は省略可）

    Returns:
        "#"で始まるタグのリスト（空要素は除外、重複は除外）
    """
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = tags.split(",")

    normalized = []
    for tag in tags:
        tag = tag.strip()
        if not tag:
            continue
        if not tag.startswith("#"):
            tag = "#" + tag
        if tag not in normalized:
            normalized.append(tag)
    return normalized


def filter_by_tags(mapping: FragmentMapping, tags: Optional[Iterable[str]] = None) -> FragmentMapping:
    """
    指定されたタグのエントリだけを残す

    Args:
        mapping: ハッシュタグ -> Fragmentのリスト
        tags: 残すタグ（"#"付き）。None/空の場合は何もしない

    Returns:
        tagsが空ならmappingそのもの、それ以外は新しい辞書
    """
    wanted = set(tags or ())
    if not wanted:
        return mapping

    # 存在しないタグは単に含まれない
    return {tag: fragments for tag, fragments in mapping.items() if tag in wanted}
