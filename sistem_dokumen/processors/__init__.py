"""Processor registry: maps document format keys to processor factories."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .plain import PlainTextProcessor
from .protocols import DocumentProcessor

logger = logging.getLogger(__name__)

ProcessorFactory = Callable[[], DocumentProcessor]

PROCESSORS: dict[str, ProcessorFactory] = {
    "plain": PlainTextProcessor,
}

FORMAT_ALIASES: dict[str, str] = {
    "txt": "plain",
    "text": "plain",
}

__all__ = [
    "DocumentProcessor",
    "FORMAT_ALIASES",
    "PROCESSORS",
    "PlainTextProcessor",
    "ProcessorFactory",
    "get_processor",
    "normalize_format",
    "register_processor",
]


def normalize_format(fmt: str) -> str:
    key = fmt.strip().lower()
    return FORMAT_ALIASES.get(key, key)


def register_processor(fmt: str, factory: ProcessorFactory) -> None:
    """Add or replace the factory used for ``fmt``.

    Pipelines that already resolved ``fmt`` keep their cached processor
    until ``DocumentPipeline.close()`` is called.
    """
    key = normalize_format(fmt)
    if not key:
        raise ValueError("Processor format key must not be empty")
    if key in PROCESSORS:
        logger.debug("Replacing processor for format %r", key)
    PROCESSORS[key] = factory


def get_processor(fmt: str) -> DocumentProcessor:
    """Build the processor registered for ``fmt``.

    Lookup ignores case and surrounding whitespace; ``txt`` and ``text``
    are aliases of ``plain``.
    """
    key = normalize_format(fmt)
    factory = PROCESSORS.get(key)
    if factory is None:
        available = ", ".join(sorted(PROCESSORS))
        raise ValueError(f"Unknown document format {fmt!r}. Available: {available}")
    return factory()
