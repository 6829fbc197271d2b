import logging
from typing import Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

EMPTY_REPLY = "I apologize, but I could not generate a response."


class AIChatError(RuntimeError):
    """The hosted AI chat service could not produce a reply."""


class AIChatClient:
    """
    Client for the hosted course chat endpoint.

    POST {base_url}/chat/course/{course_id} with {"message", "userId"};
    the backend answers with {"success", "message", "data": {"response", ...}}.
    """

    def __init__(
        self,
        base_url: str = None,
        timeout: float = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the AI chat client.

        Args:
            base_url: AI API base URL. Defaults to settings.ai_chat_base_url
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = (base_url or settings.ai_chat_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ai_chat_timeout_seconds
        self.transport = transport

        if not self.base_url.startswith(("http://", "https://")):
            self.base_url = f"http://{self.base_url}"

    async def chat(self, course_id: str, message: str, user_id: str) -> str:
        """
        Ask the AI service about a specific course.

        Returns:
            The reply text

        Raises:
            AIChatError: On transport failure, a non-2xx status or success=false
        """
        url = f"{self.base_url}/chat/course/{course_id}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(url, json={"message": message, "userId": user_id})
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPError as e:
                raise AIChatError(f"AI chat request failed: {e}") from e
            except ValueError as e:
                raise AIChatError(f"AI chat returned invalid JSON: {e}") from e

        if not isinstance(payload, dict) or not payload.get("success"):
            detail = payload.get("message") if isinstance(payload, dict) else None
            raise AIChatError(f"AI chat reported failure: {detail or 'unknown error'}")

        data = payload.get("data") or {}
        reply = data.get("response") if isinstance(data, dict) else None
        if not reply:
            logger.warning(f"AI chat returned an empty reply for course {course_id}")
            return EMPTY_REPLY
        return reply
