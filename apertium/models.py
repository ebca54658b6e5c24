"""Value types shared across the client."""
from typing import NamedTuple


class LanguagePair(NamedTuple):
    """An ordered (source, target) translation direction."""

    source: str
    target: str

    def __str__(self):
        return f"{self.source}|{self.target}"
