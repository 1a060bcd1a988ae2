"""
コマンドラインの実行スクリプト

日付名のノートを読み込み、ハッシュタグごとのブロックを標準出力またはファイルに書き出します。
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import (
    SiftConfig,
    OUTPUT_CHOICES,
    OUTPUT_STDOUT,
    ENV_PATH,
    ENV_TAGS,
    ENV_OUTPUT,
    ENV_OUTPUT_DIR,
    ENV_LOG_LEVEL,
    env_default,
)
from .exceptions import ConfigError, DirectoryAccessError, OutputError
from .pipeline import SiftPipeline
from .filters import filter_by_tags
from .writers import ConsoleWriter, FileWriter, write_snippets

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成（既定値は環境変数から）"""
    parser = argparse.ArgumentParser(
        prog="markdownsift",
        description="日付名のMarkdownノートからハッシュタグ付きのブロックを集めてタグごとに出力します",
    )
    parser.add_argument(
        "--path",
        default=env_default(ENV_PATH),
        help=f"source directory to parse (env: {ENV_PATH})",
    )
    parser.add_argument(
        "--tags",
        default=env_default(ENV_TAGS),
        help="comma separated list of tags to be parsed (hash sign omitted, default = empty is all)",
    )
    parser.add_argument(
        "--output",
        default=env_default(ENV_OUTPUT, OUTPUT_STDOUT),
        help=f"output destination. values ({', '.join(OUTPUT_CHOICES)})",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=env_default(ENV_OUTPUT_DIR),
        help=f"output directory for file output (env: {ENV_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=env_default(ENV_LOG_LEVEL, "WARNING"),
        help="logging level for diagnostics written to stderr",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="print run statistics as JSON to stderr",
    )
    return parser


def configure_logging(level: str) -> None:
    """診断メッセージは標準エラー出力へ（標準出力は結果専用）"""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    メイン関数

    Args:
        argv: コマンドライン引数（Noneの場合はsys.argv）

    Returns:
        終了コード（0: 成功, 1: 実行時エラー, 2: 引数エラー）
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = SiftConfig.from_values(
            path=args.path,
            tags=args.tags,
            output=args.output,
            output_dir=args.output_dir,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    configure_logging(config.log_level)

    pipeline = SiftPipeline(sort_files=True)
    try:
        snippets = filter_by_tags(pipeline.collect(config.path), config.tags)
        # 出力先は収集が成功してから作成する
        writer = FileWriter(config.output_dir) if config.writes_files else ConsoleWriter()
        write_snippets(snippets, writer)
    except (DirectoryAccessError, OutputError) as e:
        logger.debug("実行を中断しました", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.stats:
        print(json.dumps(pipeline.get_stats(), indent=2, ensure_ascii=False), file=sys.stderr)
    return EXIT_OK
