"""
AI gateway client - Sends chat-completion requests to the hosted model endpoint.
"""
from typing import Any, Dict, List, Optional
import logging
import httpx

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

class AIGatewayError(Exception):
    """Raised when the gateway is unconfigured, unreachable or returns an error."""


class AIGatewayClient:
    """
    Minimal chat-completion client.

    Request body: {"model": ..., "messages": [...]}
    Response body: {"choices": [{"message": {"content": ...}}]}
    """
    def __init__(
        self,
        api_key: Optional[str],
        url: str,
        model: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.transport = transport

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """
        Send one conversation and return the first choice's text unchanged.

        Args:
            messages: Conversation as role/content dicts

        Returns:
            str: choices[0].message.content

        Raises:
            AIGatewayError: If the key is missing, the call fails or the body is malformed
        """
        if not self.api_key:
            raise AIGatewayError("AI_GATEWAY_API_KEY is not configured")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                    json={"model": self.model, "messages": messages},
                )
            except httpx.HTTPError as e:
                logger.error(f"AI Gateway request failed: {str(e)}")
                raise AIGatewayError(f"AI Gateway request failed: {str(e)}") from e

        if response.is_error:
            logger.error(f"AI Gateway error: {response.status_code} {response.text}")
            raise AIGatewayError(f"AI Gateway error: {response.status_code}")

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response: httpx.Response) -> str:
        try:
            data: Any = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected AI Gateway response: {response.text}")
            raise AIGatewayError("AI Gateway returned an unexpected response") from e

        if not isinstance(content, str):
            raise AIGatewayError("AI Gateway returned an unexpected response")
        return content


def get_ai_gateway_client() -> AIGatewayClient:
    """Dependency - Builds a gateway client from application settings."""
    return AIGatewayClient(
        api_key=settings.ai_gateway_api_key,
        url=settings.ai_gateway_url,
        model=settings.ai_model,
        timeout=settings.ai_gateway_timeout,
    )
