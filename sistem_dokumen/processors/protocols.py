from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentProcessor(Protocol):
    """Transforms the content of one document format.

    Implementations are expected to be pure: the output depends only on
    ``content`` and a call has no observable side effects.
    """

    @property
    def format_name(self) -> str:
        """Human-readable label for the handled format."""
        ...

    def process(self, content: str) -> str: ...

    def get_format_name(self) -> str: ...
