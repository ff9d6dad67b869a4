"""sistem-dokumen - format-specific document processors."""

from .pipeline import DocumentPipeline
from .pipeline_config import PipelineConfig
from .processors import get_processor, register_processor
from .processors.plain import PlainTextProcessor
from .processors.protocols import DocumentProcessor

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.1.0"
    __version_tuple__ = (0, 1, 0)

__all__ = [
    "__version__",
    "DocumentPipeline",
    "DocumentProcessor",
    "PipelineConfig",
    "PlainTextProcessor",
    "get_processor",
    "register_processor",
]
