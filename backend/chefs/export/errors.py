"""
Typed export failures.

Each error carries the HTTP status the API layer should answer with.
"""


class ExportError(Exception):
    """Base class for export failures."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ExportAuthorizationError(ExportError):
    """Principal lacks the capability required for the export."""

    status_code = 401


class FormNotFoundError(ExportError):
    """Referenced form does not exist."""

    status_code = 404


class ExportValidationError(ExportError):
    """Export options cannot be honoured (unsupported type/format, bad columns)."""

    status_code = 422


class ExportRenderError(ExportError):
    """Serializing the export failed. The original exception is chained as __cause__."""

    status_code = 500
