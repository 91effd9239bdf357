from dataclasses import dataclass
from typing import Any, Literal, Protocol, TypeVar, overload

from pydantic import TypeAdapter

T = TypeVar("T")

ChatRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content}


class CompletionClientProtocol(Protocol):
    @overload
    async def chat_completion(
        self,
        model: str,
        messages: list[ChatMessage],
        response_schema: None = None,
        schema_name: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str: ...

    @overload
    async def chat_completion(
        self,
        model: str,
        messages: list[ChatMessage],
        response_schema: TypeAdapter[T],
        schema_name: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> T: ...

    async def chat_completion(
        self,
        model: str,
        messages: list[ChatMessage],
        response_schema: TypeAdapter[Any] | None = None,
        schema_name: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> Any: ...
