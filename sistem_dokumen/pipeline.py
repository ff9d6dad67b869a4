from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .constants import DEFAULT_FORMAT
from .pipeline_config import PipelineConfig
from .processors import get_processor, normalize_format
from .processors.protocols import DocumentProcessor
from .runtime.tracing import trace_timing
from .types import ProcessingResult, Trace

logger = logging.getLogger(__name__)


class DocumentPipeline:
    def __init__(
        self,
        config: PipelineConfig | None = None,
        *,
        processor: DocumentProcessor | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.processor = processor
        self._resolved: dict[str, DocumentProcessor] = {}

    def __enter__(self) -> DocumentPipeline:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._resolved.clear()

    def _ensure_processor(self, cfg: PipelineConfig, trace: Trace) -> DocumentProcessor:
        key = normalize_format(cfg.format)
        if self.processor is not None:
            if key != DEFAULT_FORMAT:
                trace.warnings.append(
                    f"Injected processor {self.processor.get_format_name()!r} "
                    f"overrides configured format {cfg.format!r}"
                )
            return self.processor
        processor = self._resolved.get(key)
        if processor is not None:
            return processor
        with trace_timing(trace, "resolve", key):
            logger.debug("Resolving processor for format %r", key)
            processor = get_processor(key)
        self._resolved[key] = processor
        return processor

    def run(self, text: str, **overrides: Any) -> ProcessingResult:
        if not isinstance(text, str):
            raise TypeError(
                f"Document content must be str, got {type(text).__name__}"
            )
        cfg = replace(self.config, **overrides) if overrides else self.config
        trace = Trace()

        processor = self._ensure_processor(cfg, trace)
        format_name = processor.get_format_name()

        with trace_timing(trace, "process", format_name, chars=len(text)):
            logger.debug("Processing %d chars as %s", len(text), format_name)
            content = processor.process(text)

        return ProcessingResult(
            content=content,
            format_name=format_name,
            trace=trace if cfg.return_trace else None,
        )

    def __call__(self, text: str, **overrides: Any) -> ProcessingResult:
        return self.run(text, **overrides)
