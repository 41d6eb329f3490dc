# ialmark/markdown/session.py
"""Per-document parsing state shared between the scanner and its host."""

from typing import Collection, Optional

from .ial import AttributeSet, merge
from .scanner import RESERVED_KEYWORDS, scan_ial


class ParseSession:
    """
    Owns the running attribute aggregate for the block being parsed.

    Every IAL scanned through ``scan`` is merged into ``ial``. The host calls
    ``take`` once the block is known, which hands the aggregate over and
    starts the next block from scratch. A session is not meant to be shared
    between threads; use one per document.
    """

    def __init__(self, reserved: Collection[str] = RESERVED_KEYWORDS):
        self.reserved = frozenset(reserved)
        self.ial: Optional[AttributeSet] = None

    def scan(self, data: str) -> int:
        return scan_ial(data, self, reserved=self.reserved)

    def fold(self, ial: AttributeSet) -> None:
        self.ial = merge(self.ial, ial)

    def take(self) -> Optional[AttributeSet]:
        ial, self.ial = self.ial, None
        return ial
