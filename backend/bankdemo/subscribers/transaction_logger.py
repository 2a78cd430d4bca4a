from __future__ import annotations

from typing import Callable, Optional


class TransactionLogger:
    """Abonné console : écrit chaque notification telle quelle."""

    def __init__(self, *, write: Optional[Callable[[str], None]] = None) -> None:
        self._write = write

    def __call__(self, message: str) -> None:
        # print résolu à l'appel pour rester compatible avec capsys
        (self._write or print)(message)
