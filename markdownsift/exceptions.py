"""
例外定義

設定エラー・ディレクトリアクセスエラー・出力エラーを区別する
"""


class MarkdownSiftError(Exception):
    """markdownsift の例外の基底クラス"""


class ConfigError(MarkdownSiftError):
    """コマンドライン引数や環境変数の組み合わせが不正"""


class DirectoryAccessError(MarkdownSiftError):
    """ソースディレクトリが存在しない、または読み込めない"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"ディレクトリを読み込めません: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class OutputError(MarkdownSiftError):
    """出力先ディレクトリ・ファイルを作成または書き込みできない"""
