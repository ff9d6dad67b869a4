from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_FORMAT


@dataclass(frozen=True)
class PipelineConfig:
    """User-facing configuration for a document pipeline.

    Keep this frozen+hashable so per-run overrides go through ``replace``.
    """

    # Processor selection, resolved through the processor registry
    format: str = DEFAULT_FORMAT

    # Behavior toggles
    return_trace: bool = False
