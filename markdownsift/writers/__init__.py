"""出力モジュール"""

from .writers import Writer, ConsoleWriter, FileWriter, write_snippets

__all__ = ['Writer', 'ConsoleWriter', 'FileWriter', 'write_snippets']
