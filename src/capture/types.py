"""
Capture Python SDK Types

Request kinds, option mappings, client configuration and response shapes.
"""

from enum import Enum
from typing import Any, Dict, NotRequired, TypedDict

import requests


class RequestType(str, Enum):
    """Capture operation; the value is the URL path segment."""
    IMAGE = "image"
    PDF = "pdf"
    CONTENT = "content"
    METADATA = "metadata"
    ANIMATED = "animated"


# Option name -> str | int | float | bool | None. None and "" mean "not set".
RequestOptions = Dict[str, Any]


# Configuration Types
class CaptureOptionsType(TypedDict, total=False):
    """Options for Capture."""
    apiUrl: NotRequired[str]
    edgeUrl: NotRequired[str]
    useEdge: NotRequired[bool]
    timeout: NotRequired[float]
    session: NotRequired[requests.Session]  # Custom transport, one per fetching thread


# Response Types
class ContentResponseType(TypedDict):
    """Extracted page content."""
    success: bool
    html: str
    textContent: str
    markdown: str


class MetadataResponseType(TypedDict):
    """Extracted page metadata."""
    success: bool
    metadata: Dict[str, Any]  # Any JSON value
