"""Cell identifier allocation."""
from __future__ import annotations


class CellIdAllocator:
    """Issue unique cell identifiers for one document build.

    ``"0"`` and ``"1"`` belong to the document's root cells, so numbering starts
    at 2.  Instances must not be shared between documents.
    """

    FIRST_ID = 2

    def __init__(self, prefix: str = "cell-") -> None:
        self._prefix = prefix
        self._next = self.FIRST_ID

    def next_id(self) -> str:
        cell_id = f"{self._prefix}{self._next}"
        self._next += 1
        return cell_id

    @property
    def issued(self) -> int:
        """Number of identifiers handed out so far."""

        return self._next - self.FIRST_ID


__all__ = ["CellIdAllocator"]
