from __future__ import annotations

from typing import Any

import httpx
import structlog

from ..config import Settings
from ..exceptions import GenerationError
from ..http_client import ServiceClient
from ..metrics import GENERATION_REQUESTS_TOTAL

logger = structlog.get_logger(__name__)

SYSTEM_PROMPT = (
    "You are a certified personal trainer and fitness expert. "
    "Create detailed, safe, and effective workout plans."
)
MAX_OUTPUT_TOKENS = 1500
TEMPERATURE = 0.7

SUCCESS_STATUSES = tuple(range(200, 300))


class GenerationClient:
    """Sends one chat-completion request per call and returns the generated text.

    There is no retry; a failed call is reported once and the user decides
    whether to ask again.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        api_url: str,
        model: str,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> GenerationClient:
        return cls(
            api_key=settings.OPENAI_API_KEY,
            api_url=settings.GENERATION_API_URL,
            model=settings.GENERATION_MODEL,
            timeout=settings.GENERATION_TIMEOUT_SECONDS,
            **kwargs,
        )

    def build_payload(self, prompt_text: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt_text},
            ],
            "max_tokens": MAX_OUTPUT_TOKENS,
            "temperature": TEMPERATURE,
        }

    async def request_workout(self, prompt_text: str) -> str:
        try:
            return await self._request(prompt_text)
        except GenerationError as exc:
            GENERATION_REQUESTS_TOTAL.labels(outcome="error").inc()
            logger.error("generation_failed", reason=exc.reason, status_code=exc.status_code)
            raise

    async def _request(self, prompt_text: str) -> str:
        if not self.api_key:
            raise GenerationError("No API key configured for workout generation")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        async with ServiceClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.post(
                self.api_url,
                headers=headers,
                json=self.build_payload(prompt_text),
                expected_status=SUCCESS_STATUSES,
                model=self.model,
            )

        if not resp.success:
            raise GenerationError(resp.error or "Generation request failed", status_code=resp.status_code)

        try:
            content = resp.data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GenerationError(f"Unexpected response shape: {exc!r}", status_code=resp.status_code) from exc
        if not isinstance(content, str):
            raise GenerationError("Generated content is not text", status_code=resp.status_code)

        GENERATION_REQUESTS_TOTAL.labels(outcome="success").inc()
        logger.info("generation_succeeded", model=self.model, characters=len(content))
        return content
