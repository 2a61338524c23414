"""Tests for config document loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from shapectl.infrastructure.documents import DocumentError, load_document


class TestLoadDocument:
    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "panel.json"
        path.write_text('{"clock": {"width": 80, "format": null}}')
        assert load_document(path) == {"clock": {"width": 80, "format": None}}

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "panel.toml"
        path.write_text('[clock]\nwidth = 80\nformat = "%H:%M"\n')
        assert load_document(path) == {"clock": {"width": 80, "format": "%H:%M"}}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"panel{suffix}"
        path.write_text("clock:\n  width: 80\n  apps:\n    - com.apple.Safari\n")
        assert load_document(path) == {"clock": {"width": 80, "apps": ["com.apple.Safari"]}}

    def test_yaml_returns_plain_types(self, tmp_path: Path) -> None:
        path = tmp_path / "panel.yaml"
        path.write_text("a: {b: [1, 2]}\n")
        data = load_document(path)
        assert type(data) is dict
        assert type(data["a"]["b"]) is list

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "panel.ini"
        path.write_text("[clock]\n")
        with pytest.raises(DocumentError, match="unsupported format"):
            load_document(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentError, match="file not found"):
            load_document(tmp_path / "missing.json")

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.json", "{not json"),
            ("bad.toml", "clock = [\n"),
            ("bad.yaml", "a: [1, 2\n"),
        ],
    )
    def test_syntax_error(self, tmp_path: Path, name: str, content: str) -> None:
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(DocumentError, match="invalid") as exc_info:
            load_document(path)
        assert exc_info.value.path == path
        assert exc_info.value.__cause__ is not None

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Undecodable bytes become a DocumentError, not a UnicodeDecodeError."""
        path = tmp_path / "panel.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        with pytest.raises(DocumentError, match="not valid UTF-8") as exc_info:
            load_document(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_directory_path(self, tmp_path: Path) -> None:
        """A directory named like a document is reported as not found."""
        (tmp_path / "panel.toml").mkdir()
        with pytest.raises(DocumentError, match="file not found"):
            load_document(tmp_path / "panel.toml")
