"""
Chat domain models.

Messages, explicit conversation values, and the tagged union of chat reply
variants returned by the inference service.

Dependencies: pydantic, troubleshoot_assist.core.exceptions
System role: Chat data contracts
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from troubleshoot_assist.core.exceptions import UnexpectedResponseError

TEXT_CONTENT_TYPE = "TEXT"


class MessageRole(str, Enum):
    """Author of a chat message."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"
    SYSTEM = "SYSTEM"


class ChatMessage(BaseModel):
    """Single message exchanged with the chat model."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(description="Message role")
    content: str = Field(description="Message text")


class Conversation(BaseModel):
    """
    Ordered, immutable sequence of chat messages.

    A conversation is owned by the caller and passed into each chat call; the
    call returns the next conversation instead of mutating hidden state.
    """

    model_config = ConfigDict(frozen=True)

    messages: tuple[ChatMessage, ...] = Field(default=(), description="Messages in order")

    @classmethod
    def empty(cls) -> "Conversation":
        return cls()

    @classmethod
    def from_reply(cls, reply: "GenericChatReply | CohereChatReply") -> "Conversation":
        """
        Build the memory carried forward from a reply.

        Args:
            reply: Parsed chat reply

        Returns:
            Conversation: The reply's candidate messages, in order
        """
        if isinstance(reply, GenericChatReply):
            return cls(messages=tuple(candidate.message for candidate in reply.candidates))
        return cls(messages=(ChatMessage(role=MessageRole.ASSISTANT, content=reply.text),))

    def append(self, message: ChatMessage) -> "Conversation":
        return Conversation(messages=(*self.messages, message))


class ChatCandidate(BaseModel):
    """One candidate completion of a generic chat reply."""

    model_config = ConfigDict(frozen=True)

    index: int | None = Field(default=None, description="Position among generated candidates")
    finish_reason: str | None = Field(default=None, description="Why generation stopped")
    message: ChatMessage = Field(description="Generated message")
    text: str | None = Field(default=None, description="Text of the last content item")


class GenericChatReply(BaseModel):
    """Reply in the generic (Llama-style) encoding."""

    model_config = ConfigDict(frozen=True)

    api_format: Literal["GENERIC"] = "GENERIC"
    candidates: tuple[ChatCandidate, ...] = Field(min_length=1, description="Candidate completions")

    @property
    def text(self) -> str:
        """Last content item of the last candidate."""
        candidate = self.candidates[-1]
        return candidate.text if candidate.text is not None else candidate.message.content


class CohereChatReply(BaseModel):
    """Reply in the Cohere encoding."""

    model_config = ConfigDict(frozen=True)

    api_format: Literal["COHERE"] = "COHERE"
    text: str = Field(description="Generated text")


ChatReply = Annotated[
    GenericChatReply | CohereChatReply,
    Field(discriminator="api_format"),
]

_chat_reply_adapter = TypeAdapter(ChatReply)


class ChatExchange(BaseModel):
    """Result of one chat call: the reply and the conversation to continue with."""

    model_config = ConfigDict(frozen=True)

    reply: ChatReply
    conversation: Conversation

    @property
    def text(self) -> str:
        return self.reply.text


def _text_contents(message: Any) -> list[Any]:
    contents = list(getattr(message, "content", None) or [])
    if not contents or getattr(contents[-1], "type", None) != TEXT_CONTENT_TYPE:
        raise UnexpectedResponseError(details={"reason": "reply has no trailing text content"})
    return contents


def _message_text(message: Any) -> str:
    """Concatenate text content of an SDK message for the replayed memory."""
    contents = _text_contents(message)
    return "".join(
        content.text or ""
        for content in contents
        if getattr(content, "type", None) == TEXT_CONTENT_TYPE
    )


def _message_role(message: Any) -> MessageRole:
    try:
        return MessageRole(getattr(message, "role", None))
    except ValueError as e:
        raise UnexpectedResponseError(
            details={"reason": f"unknown message role {getattr(message, 'role', None)!r}"}
        ) from e


def parse_chat_response(chat_response: Any) -> GenericChatReply | CohereChatReply:
    """
    Convert an SDK BaseChatResponse into a ChatReply variant.

    Args:
        chat_response: ``ChatResult.chat_response`` from the inference client

    Returns:
        GenericChatReply | CohereChatReply: Parsed reply

    Raises:
        UnexpectedResponseError: Unknown api_format, no choices, or a reply
            whose last content item is not text
    """
    api_format = getattr(chat_response, "api_format", None)

    if api_format == "GENERIC":
        choices = getattr(chat_response, "choices", None) or []
        if not choices:
            raise UnexpectedResponseError(api_format=api_format, details={"reason": "no choices"})
        payload: dict[str, Any] = {
            "api_format": api_format,
            "candidates": [
                {
                    "index": choice.index,
                    "finish_reason": choice.finish_reason,
                    "message": {
                        "role": _message_role(choice.message),
                        "content": _message_text(choice.message),
                    },
                    "text": _text_contents(choice.message)[-1].text or "",
                }
                for choice in choices
            ],
        }
    elif api_format == "COHERE":
        text = getattr(chat_response, "text", None)
        if text is None:
            raise UnexpectedResponseError(api_format=api_format, details={"reason": "no text"})
        payload = {"api_format": api_format, "text": text}
    else:
        raise UnexpectedResponseError(api_format=api_format)

    return _chat_reply_adapter.validate_python(payload)
