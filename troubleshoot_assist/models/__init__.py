"""
Domain models.

Exports: ChatMessage, Conversation, ChatCandidate, GenericChatReply,
CohereChatReply, ChatReply, ChatExchange, MessageRole, parse_chat_response
"""

from troubleshoot_assist.models.chat import (
    ChatCandidate,
    ChatExchange,
    ChatMessage,
    ChatReply,
    CohereChatReply,
    Conversation,
    GenericChatReply,
    MessageRole,
    parse_chat_response,
)

__all__ = [
    "ChatCandidate",
    "ChatExchange",
    "ChatMessage",
    "ChatReply",
    "CohereChatReply",
    "Conversation",
    "GenericChatReply",
    "MessageRole",
    "parse_chat_response",
]
