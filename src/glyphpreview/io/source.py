"""Template sources for looking up glyph templates by name.

A source is a name -> Template lookup. Templates come from an in-memory
mapping, a local JSON file or a JSON document served over HTTP. Sources
parse their documents but do not validate stroke contents beyond that.
"""

import hashlib
import json
import logging
import urllib.error
import urllib.request
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from glyphpreview.config import SourceConfig
from glyphpreview.domain import Template
from glyphpreview.exceptions import (
    TemplateFetchError,
    TemplateFormatError,
    TemplateNotFoundError,
)

logger = logging.getLogger(__name__)


def parse_collection(document: Any) -> dict[str, Template]:
    """Build named templates from a decoded JSON document.

    Accepts a mapping of name to template data, or the character
    database shape ``{"chars": [{"name": .., "strokes": ..}, ...]}``.

    Args:
        document: Decoded JSON document

    Returns:
        Dictionary of templates keyed by name, in document order

    Raises:
        TemplateFormatError: If the document has neither shape
    """
    if not isinstance(document, dict):
        raise TemplateFormatError(
            None, f"expected a JSON object, got {type(document).__name__}"
        )

    if isinstance(document.get("chars"), list):
        templates = {}
        for entry in document["chars"]:
            if not isinstance(entry, dict) or "name" not in entry:
                raise TemplateFormatError(None, "'chars' entry without a name")
            name = str(entry["name"])
            templates[name] = Template.from_data(entry.get("strokes", []), name=name)
        return templates

    return {
        str(name): Template.from_data(data, name=str(name))
        for name, data in document.items()
    }


def parse_collection_text(text: str) -> dict[str, Template]:
    """Decode a JSON document and build its templates.

    Raises:
        TemplateFormatError: If the text is not valid JSON or has the wrong shape
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise TemplateFormatError(None, f"invalid JSON: {e}") from e
    return parse_collection(document)


class MappingTemplateSource:
    """Templates held in memory.

    Example:
        source = MappingTemplateSource({"dash": [[[0, 0], [10, 0]]]})
        template = source.get("dash")
    """

    def __init__(self, templates: Mapping[str, Template | Any] | None = None) -> None:
        """Initialize the source.

        Args:
            templates: Mapping of name to Template or raw template data
        """
        self._templates: dict[str, Template] = {}
        for name, data in (templates or {}).items():
            self.add(name, data)

    def add(self, name: str, data: Template | Any) -> None:
        """Register a template under a name, replacing any previous one."""
        if isinstance(data, Template):
            template = data.copy()
            template.name = name
        else:
            template = Template.from_data(data, name=name)
        self._templates[name] = template

    def get(self, name: str) -> Template:
        """Look up a template by name.

        Returns a copy; changing it does not change the source.

        Raises:
            TemplateNotFoundError: If no template has this name
        """
        try:
            return self._templates[name].copy()
        except KeyError:
            raise TemplateNotFoundError(name) from None

    def names(self) -> list[str]:
        """Template names in insertion order."""
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


class FileTemplateSource(MappingTemplateSource):
    """Templates loaded from a local JSON file."""

    def __init__(self, path: Path) -> None:
        """Load and parse the file.

        Args:
            path: Path to the JSON template document

        Raises:
            FileNotFoundError: If the file does not exist
            TemplateFormatError: If the document cannot be parsed
        """
        if not path.exists():
            raise FileNotFoundError(f"Template file not found: {path}")

        self.path = path
        super().__init__(parse_collection_text(path.read_text(encoding="utf-8")))
        logger.debug("Loaded %d templates from %s", len(self), path)


class RemoteTemplateSource(MappingTemplateSource):
    """Templates fetched once from a JSON document over HTTP(S).

    Failures are raised as TemplateFetchError; nothing is retried.
    """

    def __init__(self, url: str, config: SourceConfig | None = None) -> None:
        """Fetch and parse the document.

        Args:
            url: http:// or https:// URL of the template document
            config: Source settings (timeout, size limit, cache)

        Raises:
            TemplateFetchError: If the document cannot be fetched
            TemplateFormatError: If the document cannot be parsed
        """
        self.url = url
        self.config = config or SourceConfig()
        super().__init__(parse_collection_text(self.fetch(url)))
        logger.debug("Loaded %d templates from %s", len(self), url)

    def fetch(self, url: str) -> str:
        """Fetch the document text, using the cache when configured.

        Raises:
            TemplateFetchError: If fetching fails
        """
        if self.config.cache_dir:
            cached = self._get_cached(url)
            if cached is not None:
                return cached

        if urlparse(url).scheme not in ("http", "https"):
            raise TemplateFetchError(url, reason="only http and https URLs are supported")

        max_size = self.config.max_size
        request = urllib.request.Request(
            url,
            headers={
                "User-Agent": self.config.user_agent,
                "Accept": "application/json, */*",
            },
        )

        try:
            with urllib.request.urlopen(request, timeout=self.config.timeout) as response:
                content_length = response.headers.get("Content-Length")
                if content_length and int(content_length) > max_size:
                    raise TemplateFetchError(
                        url, reason=f"document too large: {content_length} bytes"
                    )

                content = response.read(max_size + 1)
                if len(content) > max_size:
                    raise TemplateFetchError(url, reason=f"document too large: >{max_size} bytes")

                encoding = response.headers.get_content_charset() or "utf-8"
                text = content.decode(encoding)
        except TemplateFetchError:
            raise
        except urllib.error.HTTPError as e:
            raise TemplateFetchError(url, status_code=e.code, reason=str(e.reason)) from e
        except urllib.error.URLError as e:
            raise TemplateFetchError(url, reason=str(e.reason)) from e
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise TemplateFetchError(url, reason=str(e)) from e

        if self.config.cache_dir:
            self._cache_content(url, text)

        return text

    def _cache_path(self, url: str) -> Path:
        cache_dir = self.config.cache_dir or Path()
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
        return cache_dir / f"{digest}.json"

    def _get_cached(self, url: str) -> str | None:
        path = self._cache_path(url)
        if not path.exists():
            return None
        logger.debug("Using cached templates for %s", url)
        return path.read_text(encoding="utf-8")

    def _cache_content(self, url: str, text: str) -> None:
        path = self._cache_path(url)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.warning("Could not cache templates for %s: %s", url, e)


def load_templates(location: str | Path, config: SourceConfig | None = None) -> MappingTemplateSource:
    """Open a template source from a path or URL.

    Args:
        location: Local file path, or http(s) URL
        config: Source settings for remote documents

    Returns:
        Loaded template source

    Raises:
        FileNotFoundError: If a local file does not exist
        TemplateSourceError: If a remote document cannot be fetched
        TemplateFormatError: If the document cannot be parsed
    """
    text = str(location)
    if urlparse(text).scheme in ("http", "https"):
        return RemoteTemplateSource(text, config)
    return FileTemplateSource(Path(location))

