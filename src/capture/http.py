"""
Simple HTTP client for Capture Python SDK.

Issues a single blocking GET per signed URL and maps failures onto the
SDK error classes. No retries.
"""

import logging
from typing import Any, Dict
from urllib.parse import quote_plus, urlsplit

import requests

from .errors import DecodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class HTTPClient:
    """Blocking GET transport for signed capture URLs.

    ``timeout`` is handed to requests as is, so it bounds the connect and
    each socket read separately; it is not a total deadline for the body.
    A slow body that keeps trickling in can outlive it.
    """

    def __init__(self, opts: Dict[str, Any]):
        """Initialize HTTP client.

        Args:
            opts: Configuration options including timeout and session
        """
        self.timeout = opts.get('timeout', DEFAULT_TIMEOUT)
        self.session: requests.Session = opts.get('session') or requests.Session()

    def _get(self, url: str) -> requests.Response:
        """Send the GET and return the response if its status is 2xx.

        Raises:
            TransportError: On connection failure or timeout
            HTTPStatusError: On a status code outside 2xx
        """
        parts = urlsplit(url)
        # key and token stay out of the logs
        target = f"{parts.netloc}/.../{parts.path.rsplit('/', 1)[-1]}"
        logger.debug("GET %s", target)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f'Request failed: {str(e)}', e) from e

        logger.debug("GET %s -> %d (%d bytes)", target, response.status_code, len(response.content))

        if not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code, response.text)

        return response

    def get_bytes(self, url: str) -> bytes:
        """Fetch a binary capture (image, PDF, animation).

        Args:
            url: Signed request URL

        Returns:
            Raw response body
        """
        return self._get(url).content

    def get_json(self, url: str) -> Dict[str, Any]:
        """Fetch a JSON capture (content, metadata).

        Args:
            url: Signed request URL

        Returns:
            Decoded JSON object

        Raises:
            DecodeError: If the body is not a JSON object
        """
        response = self._get(url)
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f'failed to decode JSON response: {str(e)}', response.text) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f'failed to decode JSON response: expected object, got {type(data).__name__}',
                response.text,
            )
        return data

    @staticmethod
    def encode_query_component(component: str) -> str:
        """Encode a query component (space becomes '+').

        Args:
            component: String to encode

        Returns:
            URL-encoded string
        """
        return quote_plus(component, safe='')
