"""Encode and decode binary payloads as base64 data URIs."""

import base64
import binascii

PNG_MEDIA_TYPE = "image/png"


def encode_data_uri(data: bytes, media_type: str = PNG_MEDIA_TYPE) -> str:
    """Encode bytes as ``data:<media_type>;base64,<payload>``."""
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{payload}"


def decode_data_uri(uri: str) -> tuple[str, bytes]:
    """
    Decode a base64 data URI.

    Args:
        uri: String of the form ``data:<media_type>;base64,<payload>``

    Returns:
        Tuple of (media type, decoded bytes)

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    if not uri.startswith("data:"):
        raise ValueError("Not a data URI")

    header, sep, payload = uri[len("data:"):].partition(",")
    if not sep:
        raise ValueError("Data URI has no payload separator")

    media_type, _, encoding = header.partition(";")
    if encoding != "base64":
        raise ValueError("Only base64 data URIs are supported")

    try:
        data = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e

    return media_type or "text/plain", data
