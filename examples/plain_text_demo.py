"""Plain-text processing through the document pipeline.

Usage:
    python examples/plain_text_demo.py
"""

from __future__ import annotations

from sistem_dokumen import DocumentPipeline, PipelineConfig, PlainTextProcessor

SAMPLE_TEXT = """
Laporan kegiatan mahasiswa.

Baris kedua tetap utuh, termasuk spasi   dan baris baru.
""".strip()


def main() -> None:
    with DocumentPipeline(PipelineConfig(format="txt", return_trace=True)) as pipe:
        res = pipe.run(SAMPLE_TEXT)
    print(f"Format: {res.format_name}")
    print(res.content)
    assert res.trace is not None
    for event in res.trace.events:
        print(f"  {event.stage}/{event.name}: {event.ms:.3f} ms")

    explicit = DocumentPipeline(processor=PlainTextProcessor())
    print(explicit("Hello, World!").content)


if __name__ == "__main__":
    main()
