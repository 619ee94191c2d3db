"""
Exception types raised by the processing and Bunny.net layers.
Routers map these onto HTTP responses.
"""

from typing import Any, Optional


class ProcessorError(Exception):
    """Base exception carrying the HTTP status a router should answer with."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """JSON body in the proxy's {"error": ..., ...} shape."""
        return {"error": self.message, **self.details}


class InvalidTranscriptError(ProcessorError):
    """Uploaded transcript has a bad extension or cannot be decoded."""

    status_code = 400


class ChapterGenerationError(ProcessorError):
    """Gemini failed to produce chapters."""

    status_code = 502


class CaptionCleanupError(ProcessorError):
    """Gemini failed to produce a cleaned caption file."""

    status_code = 502


class ChapterValidationError(ProcessorError):
    """Chapter upload request is incomplete or has no usable chapters."""

    status_code = 400


class MissingCredentialError(ProcessorError):
    """No Bunny.net API key could be resolved for a library."""

    def __init__(self, library_id: str, available_env_vars: str):
        super().__init__(
            f"Server Error: No API Key found for Library ID {library_id}.",
            status_code=500,
            details={
                "details": (
                    f"Checked for BUNNY_KEY_{library_id} or variables containing "
                    f"'{library_id}' or BUNNY_API_KEY."
                ),
                "availableEnvVars": available_env_vars,
            },
        )
        self.library_id = library_id


class BunnyUpstreamError(ProcessorError):
    """Bunny.net answered with a non-2xx status."""

    def __init__(self, upstream_status: int, body: str):
        super().__init__(
            f"Bunny.net Refused (Status {upstream_status})",
            status_code=upstream_status,
            details={"details": body},
        )
        self.upstream_status = upstream_status
        self.body = body


class BunnyTimeoutError(ProcessorError):
    """Bunny.net did not answer within the configured timeout."""

    status_code = 504


class BunnyConnectionError(ProcessorError):
    """The request to Bunny.net failed before any response arrived."""

    def __init__(self, reason: str):
        super().__init__(f"Internal Server Error: {reason}", status_code=500)
        self.reason = reason
