from typing import Any, Dict, Optional
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel

from .errors import UpstreamError


class BaseHTTPClient:
    """JSON-over-HTTP client shared by the WhatsApp and GraphQL clients"""

    def __init__(
        self,
        base_url: str,
        service: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Base URL every request path is resolved against
            service: Name reported in UpstreamError when a request fails
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        parsed_url = urlparse(base_url)
        if not parsed_url.scheme or not parsed_url.netloc:
            raise ValueError("Invalid base URL provided")
        self.base_url = base_url.rstrip("/")
        self.service = service

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json", **(headers or {})},
            timeout=httpx.Timeout(timeout),
            transport=transport,
            follow_redirects=True,
        )

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def _post(
        self, path: str, json: Dict[str, Any] | BaseModel
    ) -> httpx.Response:
        """
        POST a JSON body

        Raises:
            UpstreamError: If the request fails or returns a non-2xx status
        """
        if isinstance(json, BaseModel):
            json = json.model_dump(mode="json", exclude_none=True)

        try:
            response = await self.client.post(path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = str(exc)
            if exc.response.content:
                message = f"{message}. Response content: {exc.response.text}"
            raise UpstreamError(self.service, message) from exc
        except httpx.HTTPError as exc:
            raise UpstreamError(self.service, f"{type(exc).__name__}: {exc}") from exc
        return response
