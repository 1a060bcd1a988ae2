"""
パッケージを直接実行する場合のエントリーポイント

使用方法:
    python -m markdownsift --path ~/notes --tags work,ai
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
