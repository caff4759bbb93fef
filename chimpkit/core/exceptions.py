"""Custom exception hierarchy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .config import ERROR_GLOSSARY_URL


class ChimpkitError(Exception):
    """Base exception for all library errors."""

    pass


class ResourceIdentityError(ChimpkitError, ValueError):
    """A record has no identifier, so no endpoint can be built for it.

    Raised before any request is made. Listing with a ``fields`` selection
    that drops the identifier, or an API answer missing it, leads here.
    """

    def __init__(self, endpoint: str, id_field: str = "id") -> None:
        self.endpoint = endpoint
        self.id_field = id_field
        super().__init__(f"Record under {endpoint!r} has no {id_field!r} to address it by")


class ErrorEnvelope(BaseModel):
    """Problem-details body returned by the API for failed calls."""

    error_type: str = Field(ERROR_GLOSSARY_URL, alias="type")
    title: str = "Resource Not Found"
    status: int = 404
    detail: str = "could not find resource for requested class_path"
    instance: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MailchimpAPIError(ChimpkitError):
    """Error reported by (or on behalf of) the remote API.

    Remote refusals and local failures (network errors, undecodable bodies)
    share this single shape. The latter use :meth:`default`, so a caller
    cannot always tell "the server said no" from "the server was unreachable".
    """

    def __init__(
        self,
        title: str,
        status: int,
        detail: str = "",
        instance: str = "",
        error_type: str = ERROR_GLOSSARY_URL,
    ) -> None:
        self.title = title
        self.status = status
        self.detail = detail
        self.instance = instance
        self.error_type = error_type
        super().__init__(str(self))

    @classmethod
    def from_envelope(cls, envelope: ErrorEnvelope) -> MailchimpAPIError:
        return cls(
            title=envelope.title,
            status=envelope.status,
            detail=envelope.detail,
            instance=envelope.instance,
            error_type=envelope.error_type,
        )

    @classmethod
    def default(cls) -> MailchimpAPIError:
        """Fallback error used when no usable error body is available."""
        return cls.from_envelope(ErrorEnvelope())

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(
            type=self.error_type,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=self.instance,
        )

    def __str__(self) -> str:
        return (
            f'HTTP {self.status} {self.title}: "{self.detail}" '
            f"{self.instance} ({self.error_type})"
        )

    def __repr__(self) -> str:
        return f"MailchimpAPIError(status={self.status!r}, title={self.title!r})"
