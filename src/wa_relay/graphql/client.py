import logging
from typing import Any, Dict, Optional

import httpx

from ..errors import UpstreamError
from ..http_client import BaseHTTPClient

logger = logging.getLogger(__name__)

RECEIVE_MESSAGE_MUTATION = """
mutation ReceiveMessage($sender: String!, $content: String!, $messageId: ID!) {
  receiveMessage(sender: $sender, content: $content, messageId: $messageId) {
    id sender recipient content timestamp
  }
}
"""


class GraphQLClient(BaseHTTPClient):
    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize a client for an API-key protected GraphQL endpoint

        Args:
            url: Full URL of the GraphQL endpoint
            api_key: Value sent in the x-api-key header
        """
        super().__init__(
            url,
            service="graphql",
            headers={"x-api-key": api_key},
            timeout=timeout,
            transport=transport,
        )

    async def execute(
        self, query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        response = await self._post(
            self.base_url, json={"query": query, "variables": variables or {}}
        )
        try:
            result = response.json()
        except ValueError:
            logger.warning(f"GraphQL response is not JSON: {response.text[:200]}")
            return {}
        if not isinstance(result, dict):
            raise UpstreamError(self.service, f"unexpected GraphQL response: {response.text[:200]}")

        # The endpoint accepted the request; field errors are reported, not raised
        if errors := result.get("errors"):
            logger.warning(f"GraphQL response carried {len(errors)} error(s): {errors}")
        return result

    async def receive_message(
        self, sender: str, content: str, message_id: str
    ) -> Dict[str, Any]:
        return await self.execute(
            RECEIVE_MESSAGE_MUTATION,
            {"sender": sender, "content": content, "messageId": message_id},
        )
