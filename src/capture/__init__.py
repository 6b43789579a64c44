"""
Capture Python SDK

Client for the Capture API (https://capture.page).
- Deterministic, signed request URLs for screenshots, PDFs, animations,
  content and metadata extraction
- Synchronous fetch helpers built on requests
- Type safety with TypedDict interfaces
"""

from .auth import generate_token
from .client import API_URL, EDGE_URL, Capture
from .errors import (
    CaptureError,
    DecodeError,
    HTTPStatusError,
    InvalidOptionFormat,
    MissingCredential,
    MissingTargetURL,
    TransportError,
    ValidationError,
)
from .types import (
    CaptureOptionsType as CaptureOptions,
    ContentResponseType as ContentResponse,
    MetadataResponseType as MetadataResponse,
    RequestOptions,
    RequestType,
)
from .utils.query import to_query_string

__version__ = "1.0.0"

__all__ = [
    # Main client
    "Capture",
    "API_URL",
    "EDGE_URL",

    # Signing
    "generate_token",
    "to_query_string",

    # Types
    "CaptureOptions",
    "ContentResponse",
    "MetadataResponse",
    "RequestOptions",
    "RequestType",

    # Errors
    "CaptureError",
    "DecodeError",
    "HTTPStatusError",
    "InvalidOptionFormat",
    "MissingCredential",
    "MissingTargetURL",
    "TransportError",
    "ValidationError",
]
