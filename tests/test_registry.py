import pytest

import sistem_dokumen.processors as processors
from sistem_dokumen.processors import get_processor, normalize_format, register_processor
from sistem_dokumen.processors.plain import PlainTextProcessor


class UpperProcessor:
    format_name = "Upper"

    def process(self, content: str) -> str:
        return content.upper()

    def get_format_name(self) -> str:
        return self.format_name


@pytest.fixture
def registry(monkeypatch):
    table = dict(processors.PROCESSORS)
    monkeypatch.setattr(processors, "PROCESSORS", table)
    return table


@pytest.mark.parametrize("key", ["plain", "PLAIN", " Plain ", "txt", "TEXT"])
def test_get_processor_plain_keys(key):
    processor = get_processor(key)
    assert isinstance(processor, PlainTextProcessor)
    assert processor.get_format_name() == "Plain Text"


def test_normalize_format_resolves_aliases():
    assert normalize_format(" Txt ") == "plain"
    assert normalize_format("pdf") == "pdf"


def test_unknown_format_lists_available():
    with pytest.raises(ValueError, match="Unknown document format 'pdf'") as excinfo:
        get_processor("pdf")
    assert "plain" in str(excinfo.value)


def test_register_custom_processor(registry):
    register_processor("Upper", UpperProcessor)

    assert "upper" in registry
    processor = get_processor("upper")
    assert processor.process("abc") == "ABC"
    assert processor.get_format_name() == "Upper"


def test_register_replaces_existing(registry):
    register_processor("plain", UpperProcessor)
    assert get_processor("txt").process("x") == "X"


def test_register_rejects_empty_key(registry):
    with pytest.raises(ValueError, match="must not be empty"):
        register_processor("  ", UpperProcessor)
