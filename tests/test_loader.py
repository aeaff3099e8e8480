"""Tests for loading tool descriptors from a manifest."""

import pytest

from toolcatalog.errors import ManifestError
from toolcatalog.tools.base import ParserDescriptor, StaticParserDescriptor, StaticToolDescriptor
from toolcatalog.tools.loader import load_manifest_file, load_tools_from_manifest


class TestLoadToolsFromManifest:
    def test_full_entry(self):
        tools = load_tools_from_manifest([{
            "id": "checkstyle",
            "name": "CheckStyle",
            "symbol": "checkStyle",
            "url": "https://checkstyle.org",
            "help": "Use xml",
            "icon": "/plugin/warnings-ng/icons/checkstyle.svg",
            "label": "Checkstyle",
            "pattern": "**/checkstyle-result.xml",
        }])
        assert len(tools) == 1
        tool = tools[0]
        assert isinstance(tool, StaticParserDescriptor)
        assert isinstance(tool, ParserDescriptor)
        assert tool.id == "checkstyle"
        assert tool.symbol_name == "checkStyle"
        assert tool.url == "https://checkstyle.org"
        assert tool.help == "Use xml"
        assert tool.label_provider.name == "Checkstyle"
        assert tool.label_provider.large_icon_url == "/plugin/warnings-ng/icons/checkstyle.svg"
        assert tool.default_pattern() == "**/checkstyle-result.xml"

    def test_minimal_entry_defaults(self):
        (tool,) = load_tools_from_manifest([{"id": "gcc", "name": "GCC"}])
        assert type(tool) is StaticToolDescriptor
        assert tool.symbol_name == ""
        assert tool.url == ""
        assert tool.help == ""
        assert tool.label_provider.name == "GCC"
        assert tool.label_provider.large_icon_url == ""
        assert tool.default_pattern() is None

    def test_empty_pattern_key_still_parser(self):
        (tool,) = load_tools_from_manifest([{"id": "x", "name": "X", "pattern": None}])
        assert isinstance(tool, StaticParserDescriptor)
        assert tool.default_pattern() == ""

    def test_invalid_entries_skipped(self):
        tools = load_tools_from_manifest([
            "not a dict",
            {"name": "No id"},
            {"id": "no-name"},
            {"id": "ok", "name": "Ok"},
        ])
        assert [t.id for t in tools] == ["ok"]

    def test_empty(self):
        assert load_tools_from_manifest([]) == ()


class TestLoadManifestFile:
    def test_list_manifest(self, tmp_path):
        path = tmp_path / "tools.yaml"
        path.write_text("- id: gcc\n  name: GCC\n- id: pmd\n  name: PMD\n  pattern: '**/pmd.xml'\n")
        tools = load_manifest_file(path)
        assert [t.id for t in tools] == ["gcc", "pmd"]

    def test_mapping_manifest(self, tmp_path):
        path = tmp_path / "tools.yaml"
        path.write_text("tools:\n  - id: gcc\n    name: GCC\n")
        assert [t.id for t in load_manifest_file(str(path))] == ["gcc"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "tools.yaml"
        path.write_text("")
        assert load_manifest_file(path) == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError):
            load_manifest_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "tools.yaml"
        path.write_text("tools: [unclosed\n")
        with pytest.raises(ManifestError):
            load_manifest_file(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "tools.yaml"
        path.write_text("just a string\n")
        with pytest.raises(ManifestError):
            load_manifest_file(path)
