import enum
from http import HTTPStatus
from typing import Any


class ErrorType(enum.Enum):
    DATA_SOURCE = "data_source"
    INTERNAL_ERROR = "internal_error"
    INVALID_DATA = "invalid_data"
    INVALID_PAGE_TOKEN = "invalid_page_token"
    UNSPECIFIED = "unspecified"


class InvalidPageTokenReason(enum.Enum):
    NEGATIVE = "must be non-negative"
    EXCEEDS_AVAILABLE_DATA = "exceeds available data"


class BaseError(Exception):
    extra: dict[str, Any]

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNSPECIFIED,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.extra = {}

        org_id = kwargs.get("org_id")
        if org_id:
            self.extra["org_id"] = str(org_id)
        source = kwargs.get("source")
        if source:
            self.extra["source"] = source

    def __str__(self) -> str:
        return f"error: {self.error_type.value}; description: {self.message}"


class InvalidDataError(BaseError):
    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INVALID_DATA,
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)


class InvalidPageTokenError(InvalidDataError):
    """Raised when a page token falls outside the filtered folder list."""

    def __init__(self, reason: InvalidPageTokenReason, page_token: int, **kwargs: Any) -> None:
        super().__init__(
            f"invalid PageToken: {reason.value}",
            ErrorType.INVALID_PAGE_TOKEN,
            HTTPStatus.BAD_REQUEST,
            **kwargs,
        )
        self.reason = reason
        self.page_token = page_token
        self.extra["page_token"] = page_token


class SourceError(BaseError):
    """Raised by a record source that cannot supply its folders."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.DATA_SOURCE,
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_type, status_code, **kwargs)
