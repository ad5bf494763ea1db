"""
HTTP client utilities for circapi.

Provides the thin transport used by every resource module: four verbs that
send an optional JSON body and hand back the raw response bytes. Token
headers, SSL context handling and timeouts live here; retries, rate limiting
and pagination do not.
"""

import logging
import ssl
from typing import Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import APIConfig
from .errors import TransportError

logger = logging.getLogger(__name__)


class APIHttpClient:
    """HTTP client for communicating with the monitoring API."""

    def __init__(self, config: APIConfig):
        """
        Initialize HTTP client.

        Args:
            config: API configuration (token, app name, base URL, timeout)

        Raises:
            ConfigError: If the token is missing or the URL is invalid
        """
        config.check()
        self.config = config
        self.base_url = config.api_url()
        self.timeout = config.timeout
        self._ssl_context = self._create_ssl_context(config.insecure_tls)

    def _create_ssl_context(self, insecure: bool) -> ssl.SSLContext:
        """Create SSL context for HTTPS; certificate checks are off only when insecure."""
        ssl_context = ssl.create_default_context()
        if insecure:
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        return ssl_context

    def _headers(self, with_body: bool) -> Dict[str, str]:
        hdrs = {
            "Accept": "application/json",
            "X-Circonus-Auth-Token": self.config.token_key,
            "X-Circonus-App-Name": self.config.token_app,
        }
        if self.config.token_account_id:
            hdrs["X-Circonus-Account-ID"] = self.config.token_account_id
        if with_body:
            hdrs["Content-Type"] = "application/json"
        return hdrs

    def request(self, method: str, path: str, body: Optional[bytes] = None) -> bytes:
        """
        Perform a single HTTP request against the API.

        Args:
            method: HTTP verb (GET, PUT, POST, DELETE)
            path: Resource path including any query string (e.g. /dashboard/1234)
            body: Optional JSON-encoded request body

        Returns:
            Raw response body

        Raises:
            TransportError: On HTTP status errors and connection errors
        """
        url = f"{self.base_url}{path}"
        req = Request(url, data=body, headers=self._headers(body is not None), method=method)

        # Use SSL context for HTTPS URLs
        ssl_context = self._ssl_context if url.startswith("https://") else None

        logger.debug("%s %s", method, url)
        try:
            with urlopen(req, timeout=self.timeout, context=ssl_context) as resp:
                return resp.read()
        except HTTPError as e:
            try:
                error_body = e.read().decode("utf-8")
            except Exception:
                error_body = ""
            logger.warning("%s %s failed: HTTP %s", method, path, e.code)
            raise TransportError(
                f"API response code {e.code}: {error_body or e.reason}",
                status=e.code,
                body=error_body,
            ) from e
        except (URLError, OSError) as e:
            # socket timeouts surface as plain OSError
            reason = getattr(e, "reason", e)
            logger.warning("%s %s failed: %s", method, path, reason)
            raise TransportError(f"API request failed: {reason}") from e

    def get(self, path: str) -> bytes:
        """GET a resource path."""
        return self.request("GET", path)

    def put(self, path: str, body: bytes) -> bytes:
        """PUT a JSON body to a resource path."""
        return self.request("PUT", path, body)

    def post(self, path: str, body: bytes) -> bytes:
        """POST a JSON body to a collection path."""
        return self.request("POST", path, body)

    def delete(self, path: str) -> bytes:
        """DELETE a resource path."""
        return self.request("DELETE", path)
