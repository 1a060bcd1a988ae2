"""
出力モジュール

Writerとその実装クラス、および共通の書き出し処理を定義
"""

import os
import sys
from abc import ABC, abstractmethod
from typing import IO, Optional, Union

from ..exceptions import OutputError
from ..models import FragmentMapping

DATE_FORMAT = "%Y-%m-%d"


class Writer(ABC):
    """出力先のベースクラス（create → write → close の順で使う）"""

    @abstractmethod
    def create(self, name: str) -> None:
        """名前付きの出力を開始する"""
        raise NotImplementedError("サブクラスで実装してください")

    @abstractmethod
    def write(self, data: Union[str, bytes]) -> int:
        """
        現在の出力に書き込む

        Args:
            data: 書き込む内容（bytesの場合はUTF-8としてデコード）

        Returns:
            書き込んだ文字数
        """
        raise NotImplementedError("サブクラスで実装してください")

    @abstractmethod
    def close(self) -> None:
        """現在の出力を閉じる"""
        raise NotImplementedError("サブクラスで実装してください")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _as_text(data: Union[str, bytes]) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8")
    return data


class ConsoleWriter(Writer):
    """標準出力（または注入されたストリーム）へ書き出す"""

    def __init__(self, stream: Optional[IO[str]] = None):
        """
        Args:
            stream: 出力先ストリーム（Noneの場合は書き込み時点のsys.stdout）
        """
        self.stream = stream

    def create(self, name: str) -> None:
        # 何もしない
        pass

    def write(self, data: Union[str, bytes]) -> int:
        stream = self.stream or sys.stdout
        return stream.write(_as_text(data))

    def close(self) -> None:
        # 何もしない
        pass


class FileWriter(Writer):
    """タグごとに <output_dir>/<タグ名>.md へ書き出す"""

    def __init__(self, output_dir: str, encoding: str = "utf-8"):
        """
        Args:
            output_dir: 出力先ディレクトリ（存在しなければ作成）
            encoding: 出力ファイルの文字コード

        Raises:
            OutputError: ディレクトリを作成できない場合
        """
        self.output_dir = output_dir
        self.encoding = encoding
        self._file: Optional[IO[str]] = None
        try:
            os.makedirs(output_dir, mode=0o755, exist_ok=True)
        except OSError as e:
            raise OutputError(f"出力ディレクトリを作成できません: {output_dir} ({e})") from e

    def path_for(self, name: str) -> str:
        """タグ名から出力ファイルのパスを返す（先頭の"#"は除く）"""
        return os.path.join(self.output_dir, name.lstrip("#") + ".md")

    def create(self, name: str) -> None:
        # 同時に開くファイルは1つだけ
        self.close()
        path = self.path_for(name)
        try:
            self._file = open(path, "w", encoding=self.encoding, newline="")
        except OSError as e:
            raise OutputError(f"出力ファイルを作成できません: {path} ({e})") from e

    def write(self, data: Union[str, bytes]) -> int:
        if self._file is None:
            raise OutputError("create() を呼ぶ前に write() が呼ばれました")
        try:
            return self._file.write(_as_text(data))
        except OSError as e:
            raise OutputError(f"出力ファイルに書き込めません: {self._file.name} ({e})") from e

    def close(self) -> None:
        if self._file is None:
            return
        f, self._file = self._file, None
        try:
            f.close()
        except OSError as e:
            raise OutputError(f"出力ファイルを閉じられません: {f.name} ({e})") from e


def write_snippets(mapping: FragmentMapping, writer: Writer, sort_keys: bool = True) -> None:
    """
    タグごとに見出しとブロックを書き出す

    出力形式:
        # Content tagged by <タグ>
        <YYYY-MM-DD>:
        <ブロック本文>
        (空行)

    Args:
        mapping: ハッシュタグ -> Fragmentのリスト
        writer: 出力先
        sort_keys: タグを名前順に並べるか（Falseの場合は辞書の順序）
    """
    tags = sorted(mapping) if sort_keys else list(mapping)
    for tag in tags:
        writer.create(tag)
        try:
            writer.write(f"# Content tagged by {tag}\n")
            for fragment in mapping[tag]:
                writer.write(f"{fragment.date.strftime(DATE_FORMAT)}:\n{fragment.content}\n\n")
        finally:
            writer.close()
