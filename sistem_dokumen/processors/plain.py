from __future__ import annotations

from ..constants import PLAIN_TEXT_FORMAT_NAME

__all__ = ["PlainTextProcessor"]


class PlainTextProcessor:
    """Identity processor for plain-text documents."""

    __slots__ = ()

    @property
    def format_name(self) -> str:
        return PLAIN_TEXT_FORMAT_NAME

    def process(self, content: str) -> str:
        return content

    def get_format_name(self) -> str:
        return self.format_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
