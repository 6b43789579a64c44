"""
Capture Python SDK - Client

Builds signed request URLs for the Capture API and fetches the results.
"""

import logging
from typing import Optional

import requests

from .auth import generate_token
from .errors import MissingCredential, MissingTargetURL
from .http import HTTPClient
from .types import (
    CaptureOptionsType,
    ContentResponseType,
    MetadataResponseType,
    RequestOptions,
    RequestType,
)
from .utils.query import to_query_string

logger = logging.getLogger(__name__)

API_URL = "https://cdn.capture.page"
EDGE_URL = "https://edge.capture.page"


class Capture:
    """Capture API client.

    Configuration is fixed at construction time and the client keeps no
    per-request state, so the build_* methods are safe to call from any
    thread. The fetch_* methods share one requests.Session, which requests
    does not document as thread-safe; threads that fetch concurrently
    should each use their own Capture, or pass their own ``session``.
    All methods are synchronous.
    """

    def __init__(self, key: str, secret: str, opts: Optional[CaptureOptionsType] = None):
        """Initialize Capture client.

        Args:
            key: API key
            secret: API secret used to sign requests
            opts: Optional configuration (apiUrl, edgeUrl, useEdge, timeout, session)
        """
        if opts is None:
            opts = {}

        self._key = key
        self._secret = secret
        self._api_url = opts.get('apiUrl', API_URL).rstrip('/')
        self._edge_url = opts.get('edgeUrl', EDGE_URL).rstrip('/')
        self._use_edge = bool(opts.get('useEdge', False))
        self.http = HTTPClient(opts)

    @property
    def key(self) -> str:
        return self._key

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def use_edge(self) -> bool:
        return self._use_edge

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def edge_url(self) -> str:
        return self._edge_url

    @property
    def base_url(self) -> str:
        """Host requests are sent to: the edge host in edge mode."""
        return self._edge_url if self._use_edge else self._api_url

    @property
    def session(self) -> requests.Session:
        return self.http.session

    def build_url(self, request_type: RequestType, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build the signed URL for a capture request.

        Args:
            request_type: Kind of capture; becomes the last path segment
            url: Target page URL, sent as the ``url`` option
            options: Request options; not modified

        Returns:
            ``{host}/{key}/{token}/{kind}`` with ``?{query}`` when the query is non-empty

        Raises:
            MissingCredential: If key or secret is empty
            MissingTargetURL: If url is empty
        """
        if not self._key or not self._secret:
            raise MissingCredential("key and secret are required")
        if not url:
            raise MissingTargetURL("url is required")

        request_options: RequestOptions = dict(options) if options else {}
        request_options["url"] = url

        query = to_query_string(request_options)
        token = generate_token(self._secret, query)

        kind = RequestType(request_type).value
        logger.debug("Signed %s request for %s", kind, url)
        final_url = f"{self.base_url}/{self._key}/{token}/{kind}"
        if query:
            final_url += f"?{query}"
        return final_url

    def build_image_url(self, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build a signed screenshot URL."""
        return self.build_url(RequestType.IMAGE, url, options)

    def build_pdf_url(self, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build a signed PDF URL."""
        return self.build_url(RequestType.PDF, url, options)

    def build_content_url(self, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build a signed content extraction URL."""
        return self.build_url(RequestType.CONTENT, url, options)

    def build_metadata_url(self, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build a signed metadata extraction URL."""
        return self.build_url(RequestType.METADATA, url, options)

    def build_animated_url(self, url: str, options: Optional[RequestOptions] = None) -> str:
        """Build a signed animated capture URL."""
        return self.build_url(RequestType.ANIMATED, url, options)

    # Fetch operations
    def fetch_image(self, url: str, options: Optional[RequestOptions] = None) -> bytes:
        """Capture a screenshot and return the image bytes."""
        return self.http.get_bytes(self.build_image_url(url, options))

    def fetch_pdf(self, url: str, options: Optional[RequestOptions] = None) -> bytes:
        """Render a PDF and return the document bytes."""
        return self.http.get_bytes(self.build_pdf_url(url, options))

    def fetch_animated(self, url: str, options: Optional[RequestOptions] = None) -> bytes:
        """Record an animated capture (GIF or video) and return its bytes."""
        return self.http.get_bytes(self.build_animated_url(url, options))

    def fetch_content(self, url: str, options: Optional[RequestOptions] = None) -> ContentResponseType:
        """Extract page content.

        Returns:
            success flag plus the page as html, textContent and markdown
        """
        data = self.http.get_json(self.build_content_url(url, options))
        return {
            "success": bool(data.get("success", False)),
            "html": data.get("html") or "",
            "textContent": data.get("textContent") or "",
            "markdown": data.get("markdown") or "",
        }

    def fetch_metadata(self, url: str, options: Optional[RequestOptions] = None) -> MetadataResponseType:
        """Extract page metadata.

        Returns:
            success flag plus a mapping of metadata fields to JSON values
        """
        data = self.http.get_json(self.build_metadata_url(url, options))
        return {
            "success": bool(data.get("success", False)),
            "metadata": data.get("metadata") or {},
        }
