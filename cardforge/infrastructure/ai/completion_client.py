"""Chat completion client for OpenAI-compatible endpoints (OpenRouter by default)."""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter

from cardforge.application.learning.protocols.completion_client import ChatMessage
from cardforge.exceptions import ConfigurationError
from cardforge.infrastructure.ai.exceptions import (
    MalformedResponseError,
    TransportError,
    UpstreamError,
)
from cardforge.infrastructure.ai.output_repair import repair_and_validate

logger = structlog.get_logger(__name__)

RAW_JSON_INSTRUCTION = (
    "Return only raw JSON that matches the requested schema. "
    "Do not wrap it in markdown code fences and do not add any other text."
)


class CompletionClient:
    """
    Sends chat completion requests and returns the model's message content.

    Holds no per-call state: every call opens and closes its own
    httpx.AsyncClient, so one instance can be shared across requests.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str,
        timeout_seconds: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("AI completion API key is not configured")
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    async def chat_completion(
        self,
        model: str,
        messages: list[ChatMessage],
        response_schema: TypeAdapter[Any] | None = None,
        schema_name: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> Any:
        """
        Run one chat completion.

        Args:
            model: Model identifier understood by the endpoint
            messages: Ordered role-tagged messages
            response_schema: Expected shape of the answer; enables JSON mode
            schema_name: Name sent with the JSON schema, required with response_schema
            temperature: Sampling temperature
            max_tokens: Output token limit

        Returns:
            Raw message content, or the validated value when response_schema is set

        Raises:
            ConfigurationError: If response_schema is given without schema_name
            TransportError: If the request could not complete
            UpstreamError: If the endpoint returned a non-success status
            MalformedResponseError: If the response has no message content
            ResponseParseError: If no JSON could be recovered from the content
            SchemaValidationError: If the JSON does not match response_schema
        """
        if response_schema is not None and not schema_name:
            raise ConfigurationError("schema_name is required when response_schema is given")

        payload = self._build_payload(
            model, messages, response_schema, schema_name, temperature, max_tokens
        )
        logger.info(
            "chat_completion_requested",
            model=model,
            message_count=len(payload["messages"]),
            structured=response_schema is not None,
        )

        content = await self._post(payload)
        logger.debug("chat_completion_content", model=model, content=content)

        if response_schema is None:
            return content

        result = repair_and_validate(content, response_schema)
        if result.is_failure:
            error = result.unwrap_error()
            logger.warning(
                "chat_completion_output_rejected",
                model=model,
                error_type=type(error).__name__,
            )
            raise error
        return result.unwrap()

    def _build_payload(
        self,
        model: str,
        messages: list[ChatMessage],
        response_schema: TypeAdapter[Any] | None,
        schema_name: str | None,
        temperature: float | None,
        max_tokens: int | None,
    ) -> dict[str, Any]:
        outgoing = list(messages)
        payload: dict[str, Any] = {"model": model}

        if response_schema is not None:
            instruction = ChatMessage(role="system", content=RAW_JSON_INSTRUCTION)
            if instruction not in outgoing:
                outgoing.append(instruction)
            payload["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": schema_name,
                    "strict": True,
                    "schema": response_schema.json_schema(),
                },
            }

        payload["messages"] = [message.to_dict() for message in outgoing]
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return payload

    async def _post(self, payload: dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post("/chat/completions", json=payload, headers=headers)
        except httpx.TransportError as e:
            logger.warning("chat_completion_transport_failed", error=str(e))
            raise TransportError(f"Could not reach the completion endpoint: {e}") from e

        if not response.is_success:
            body: Any
            try:
                body = response.json()
            except ValueError:
                body = response.text or None
            logger.warning(
                "chat_completion_upstream_failed", status_code=response.status_code, body=body
            )
            raise UpstreamError(response.status_code, body)

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError("Completion response is not JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError("Completion response has no message content") from e
        if not isinstance(content, str):
            raise MalformedResponseError("Completion message content is not a string")
        return content
