"""CLI — текстовый интерфейс: разбор аргументов и консольный вывод."""

from src.cli.main import build_parser, main

__all__ = ["build_parser", "main"]
