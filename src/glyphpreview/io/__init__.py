"""Template I/O layer for glyphpreview.

This module loads glyph template collections and exposes them as
name -> Template lookups. It is the only place that reads JSON
documents, local or remote.

Key responsibilities:
- Parse template collections (name mapping or "chars" list)
- Load collections from files and http(s) URLs
- Hand out independent copies of stored templates

Key classes:
- MappingTemplateSource: In-memory templates
- FileTemplateSource: Templates from a local JSON file
- RemoteTemplateSource: Templates from a JSON document over HTTP
"""

from glyphpreview.io.source import (
    FileTemplateSource,
    MappingTemplateSource,
    RemoteTemplateSource,
    load_templates,
    parse_collection,
    parse_collection_text,
)

__all__ = [
    "FileTemplateSource",
    "MappingTemplateSource",
    "RemoteTemplateSource",
    "load_templates",
    "parse_collection",
    "parse_collection_text",
]
