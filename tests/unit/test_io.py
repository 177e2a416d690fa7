"""Unit tests for the template I/O layer.

Tests for template sources and collection parsing.
"""

import json
import urllib.error
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from glyphpreview.config import SourceConfig
from glyphpreview.domain import Point, Template
from glyphpreview.exceptions import (
    TemplateFetchError,
    TemplateFormatError,
    TemplateNotFoundError,
)
from glyphpreview.io import (
    FileTemplateSource,
    MappingTemplateSource,
    RemoteTemplateSource,
    load_templates,
    parse_collection,
    parse_collection_text,
)

SAMPLE_DOCUMENT = {
    "dash": [[[0, 0], [10, 0]]],
    "plus": {"strokes": [[[5, 0], [5, 10]], [{"x": 0, "y": 5}, {"x": 10, "y": 5}]]},
}


def _mock_response(body: bytes, headers: dict[str, str] | None = None) -> MagicMock:
    """Build a context-manager response like urlopen returns."""
    response = MagicMock()
    response.read.side_effect = lambda size=-1: body if size < 0 else body[:size]
    header_map = MagicMock()
    header_map.get.side_effect = lambda key, default=None: (headers or {}).get(key, default)
    header_map.get_content_charset.return_value = "utf-8"
    response.headers = header_map
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


class TestParseCollection:
    """Tests for parse_collection."""

    def test_name_mapping(self) -> None:
        templates = parse_collection(SAMPLE_DOCUMENT)

        assert list(templates) == ["dash", "plus"]
        assert templates["dash"].name == "dash"
        assert len(templates["plus"]) == 2

    def test_chars_list(self) -> None:
        document = {"chars": [{"name": "a", "strokes": [[[0, 0], [1, 1]]]}, {"name": "b"}]}
        templates = parse_collection(document)

        assert templates["a"].strokes[0].last == Point(1, 1)
        assert templates["b"].is_empty()

    def test_chars_entry_without_name(self) -> None:
        with pytest.raises(TemplateFormatError):
            parse_collection({"chars": [{"strokes": []}]})

    def test_non_object_document(self) -> None:
        with pytest.raises(TemplateFormatError):
            parse_collection([[[0, 0]]])

    def test_invalid_json(self) -> None:
        with pytest.raises(TemplateFormatError, match="invalid JSON"):
            parse_collection_text("{not json")


class TestMappingTemplateSource:
    """Tests for MappingTemplateSource class."""

    def test_lookup(self) -> None:
        source = MappingTemplateSource(SAMPLE_DOCUMENT)

        assert "dash" in source
        assert len(source) == 2
        assert source.names() == ["dash", "plus"]
        assert source.get("dash").strokes[0].points == [Point(0, 0), Point(10, 0)]

    def test_unknown_name(self) -> None:
        source = MappingTemplateSource(SAMPLE_DOCUMENT)
        with pytest.raises(TemplateNotFoundError, match="missing"):
            source.get("missing")

    def test_get_returns_copy(self) -> None:
        source = MappingTemplateSource(SAMPLE_DOCUMENT)
        source.get("dash").strokes.clear()
        assert len(source.get("dash")) == 1

    def test_add_template_copies_and_names(self) -> None:
        original = Template.from_data([[[1, 1]]], name="old")
        source = MappingTemplateSource()
        source.add("dot", original)

        assert source.get("dot").name == "dot"
        assert original.name == "old"


class TestFileTemplateSource:
    """Tests for FileTemplateSource class."""

    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "chars.json"
        path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")

        source = FileTemplateSource(path)
        assert source.names() == ["dash", "plus"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileTemplateSource(tmp_path / "nope.json")

    def test_load_templates_with_path(self, tmp_path: Path) -> None:
        path = tmp_path / "chars.json"
        path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")

        assert isinstance(load_templates(str(path)), FileTemplateSource)


class TestRemoteTemplateSource:
    """Tests for RemoteTemplateSource class."""

    URL = "https://example.org/chars.json"

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_fetch(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.return_value = _mock_response(json.dumps(SAMPLE_DOCUMENT).encode())

        source = RemoteTemplateSource(self.URL)

        assert source.names() == ["dash", "plus"]
        request = mock_urlopen.call_args.args[0]
        assert request.full_url == self.URL
        assert mock_urlopen.call_args.kwargs["timeout"] == 10.0

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_load_templates_with_url(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.return_value = _mock_response(b"{}")
        assert isinstance(load_templates(self.URL), RemoteTemplateSource)

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_http_error(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.side_effect = urllib.error.HTTPError(
            self.URL, 404, "Not Found", None, None  # type: ignore[arg-type]
        )

        with pytest.raises(TemplateFetchError) as exc_info:
            RemoteTemplateSource(self.URL)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == self.URL

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_network_error(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.side_effect = urllib.error.URLError("connection refused")

        with pytest.raises(TemplateFetchError, match="connection refused"):
            RemoteTemplateSource(self.URL)
        assert mock_urlopen.call_count == 1

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_too_large(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.return_value = _mock_response(b"{}", headers={"Content-Length": "999999"})

        with pytest.raises(TemplateFetchError, match="too large"):
            RemoteTemplateSource(self.URL, SourceConfig(max_size=1024))

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_invalid_document(self, mock_urlopen: MagicMock) -> None:
        mock_urlopen.return_value = _mock_response(b"[1, 2]")

        with pytest.raises(TemplateFormatError):
            RemoteTemplateSource(self.URL)

    def test_unsupported_scheme(self) -> None:
        source = MagicMock(spec=RemoteTemplateSource)
        source.config = SourceConfig()
        with pytest.raises(TemplateFetchError, match="only http"):
            RemoteTemplateSource.fetch(source, "ftp://example.org/chars.json")

    @patch("glyphpreview.io.source.urllib.request.urlopen")
    def test_cache(self, mock_urlopen: MagicMock, tmp_path: Path) -> None:
        mock_urlopen.return_value = _mock_response(json.dumps(SAMPLE_DOCUMENT).encode())
        config = SourceConfig(cache_dir=tmp_path / "cache")

        RemoteTemplateSource(self.URL, config)
        second = RemoteTemplateSource(self.URL, config)

        assert mock_urlopen.call_count == 1
        assert second.names() == ["dash", "plus"]
