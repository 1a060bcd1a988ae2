"""
設定モジュール

コマンドライン引数と環境変数（.env）から実行設定を組み立てる
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .filters import normalize_tags

# .envファイルの読み込み（存在しなくてもよい）
load_dotenv()

OUTPUT_STDOUT = "stdout"
OUTPUT_FILE = "file"
OUTPUT_CHOICES = (OUTPUT_STDOUT, OUTPUT_FILE)

ENV_PATH = "MARKDOWNSIFT_PATH"
ENV_TAGS = "MARKDOWNSIFT_TAGS"
ENV_OUTPUT = "MARKDOWNSIFT_OUTPUT"
ENV_OUTPUT_DIR = "MARKDOWNSIFT_OUTPUT_DIR"
ENV_LOG_LEVEL = "MARKDOWNSIFT_LOG_LEVEL"


def env_default(name: str, default: str = "") -> str:
    """環境変数の値（未設定の場合はdefault）"""
    return os.getenv(name, default)


@dataclass
class SiftConfig:
    """実行設定"""
    path: str = ""
    tags: List[str] = field(default_factory=list)
    output: str = OUTPUT_STDOUT
    output_dir: str = ""
    log_level: str = "WARNING"

    @classmethod
    def from_values(
        cls,
        path: Optional[str],
        tags: Optional[str] = None,
        output: Optional[str] = None,
        output_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> "SiftConfig":
        """
        引数の値から設定を作成する（Noneの項目は既定値）

        Args:
            path: ソースディレクトリ
            tags: カンマ区切りのタグ（"#"は省略）
            output: "stdout" または "file"
            output_dir: ファイル出力先ディレクトリ
            log_level: ログレベル名

        Returns:
            SiftConfig（検証済み）
        """
        config = cls(
            path=(path or "").strip(),
            tags=normalize_tags(tags),
            output=(output or OUTPUT_STDOUT).strip().lower(),
            output_dir=(output_dir or "").strip(),
            log_level=(log_level or "WARNING").strip().upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        組み合わせを検証する

        Raises:
            ConfigError: 不正な組み合わせの場合
        """
        if not self.path:
            raise ConfigError("path cannot be empty")
        if self.output not in OUTPUT_CHOICES:
            raise ConfigError("output must be either 'stdout' or 'file'")
        if self.output == OUTPUT_FILE and not self.output_dir:
            raise ConfigError("output-dir is required when output is 'file'")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log level: {self.log_level}")

    @property
    def writes_files(self) -> bool:
        return self.output == OUTPUT_FILE
