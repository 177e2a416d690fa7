"""Exception hierarchy for Glyphpreview."""


class GlyphPreviewError(Exception):
    """Base exception for all Glyphpreview errors."""

    pass


class RenderError(GlyphPreviewError):
    """Errors related to drawing a template onto a surface."""

    pass


class MissingSurfaceError(RenderError):
    """A direct render was requested without a drawing surface."""

    def __init__(self, template_name: str | None = None) -> None:
        self.template_name = template_name
        target = f" for '{template_name}'" if template_name else ""
        super().__init__(f"No drawing surface supplied{target}")


class SurfaceExportError(RenderError):
    """Error encoding a surface into an image."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Surface export failed: {reason}")


class ColorError(GlyphPreviewError):
    """Unparseable color descriptor."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid color '{value}': {reason}")


class TemplateError(GlyphPreviewError):
    """Errors related to glyph templates."""

    pass


class TemplateNotFoundError(TemplateError):
    """Requested template not found in a source."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template '{name}' not found")


class TemplateFormatError(TemplateError):
    """Template data does not have a recognizable shape."""

    def __init__(self, name: str | None, details: str) -> None:
        self.name = name
        self.details = details
        label = f"'{name}'" if name else "document"
        super().__init__(f"Invalid template {label}: {details}")


class TemplateSourceError(GlyphPreviewError):
    """Errors related to loading template collections."""

    pass


class TemplateFetchError(TemplateSourceError):
    """Error fetching a remote template collection."""

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        message = f"Failed to fetch templates from '{url}'"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
