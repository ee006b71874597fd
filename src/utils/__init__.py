"""
Utilities — вспомогательные модули, не зависящие от арифметики.
"""

from src.utils.logging import get_logger

__all__ = ["get_logger"]
