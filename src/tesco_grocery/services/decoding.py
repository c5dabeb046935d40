"""Decoding of repaired payloads into typed records."""

from typing import TypeVar

from pydantic import ValidationError

from tesco_grocery.domain.errors import DecodeError, ServerError
from tesco_grocery.domain.models import ApiResponse

ResponseT = TypeVar("ResponseT", bound=ApiResponse)


def payload_text(raw: bytes) -> str:
    """Decode a response body as UTF-8, replacing undecodable bytes."""
    return raw.decode("utf-8", errors="replace")


def decode_response(model: type[ResponseT], text: str) -> ResponseT:
    """Validate a JSON payload against a response model.

    Raises DecodeError carrying both the parser complaint and the raw text.
    """
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(str(exc), text) from exc


def ensure_success(response: ResponseT) -> ResponseT:
    """Raise ServerError unless the response status code is zero."""
    if not response.ok:
        raise ServerError(response.status_code, response.status_info)
    return response
