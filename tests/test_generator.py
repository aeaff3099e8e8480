"""Tests for writing the generated document."""

import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from toolcatalog.docs.writer import write_document
from toolcatalog.errors import CatalogWriteError
from toolcatalog.generator import generate
from toolcatalog.tools.base import StaticParserDescriptor, StaticToolDescriptor


def _tools():
    return [
        StaticParserDescriptor("pmd", "PMD", pattern="**/pmd.xml", symbol_name="pmdParser"),
        StaticToolDescriptor("gcc", "GCC", symbol_name="gcc", help="Use <b>-Wall</b>"),
    ]


def test_write_document_truncates():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "out.md"
        path.write_text("old content that is much longer than the new one\n" * 10)

        written = write_document(path, "new\n")

        assert written == path
        assert path.read_text(encoding="utf-8") == "new\n"


def test_write_document_missing_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "missing" / "out.md"
        with pytest.raises(CatalogWriteError) as exc_info:
            write_document(path, "content")
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.__cause__, OSError)
        assert not path.parent.exists()


def test_generate_writes_document(tmp_path):
    path = tmp_path / "SUPPORTED-FORMATS.md"
    result = generate(_tools(), path, generated_at=datetime(2024, 1, 2, 3, 4, 5))

    assert result == path
    content = path.read_text(encoding="utf-8")
    assert content.startswith("<!--- DO NOT EDIT - Generated by ToolsLister at 2024-01-02T03:04:05-->\n")
    assert "# Supported Report Formats" in content
    assert "pmdParser()" in content
    assert ":bulb: Use <b>-Wall</b>" in content


def test_generate_defaults_timestamp_to_now(tmp_path):
    path = tmp_path / "out.md"
    generate(_tools(), path, generator="Catalog")
    banner = path.read_text(encoding="utf-8").splitlines()[0]
    assert banner.startswith("<!--- DO NOT EDIT - Generated by Catalog at ")
    assert banner.endswith("-->")


def test_generate_accepts_iterator(tmp_path):
    path = tmp_path / "out.md"
    generate(iter(_tools()), path, generated_at=datetime(2024, 1, 1))
    content = path.read_text(encoding="utf-8")
    assert content.index("gcc") < content.index("pmd")


def test_generate_twice_same_table(tmp_path):
    first = tmp_path / "first.md"
    second = tmp_path / "second.md"
    generate(_tools(), first, generated_at=datetime(2024, 1, 1))
    generate(_tools(), second, generated_at=datetime(2024, 6, 1))

    first_lines = first.read_text(encoding="utf-8").splitlines()
    second_lines = second.read_text(encoding="utf-8").splitlines()
    assert first_lines[0] != second_lines[0]
    assert first_lines[1:] == second_lines[1:]


def test_generate_failure_raises(tmp_path):
    with pytest.raises(CatalogWriteError):
        generate(_tools(), tmp_path / "nope" / "out.md")


def test_generate_ignores_timezone_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TOOLCATALOG_TZ", "Not/AZone")
    path = tmp_path / "out.md"

    assert generate([StaticToolDescriptor("x", "X")], path) == path
    assert path.read_text(encoding="utf-8").startswith("<!--- DO NOT EDIT - Generated by ToolsLister at ")
