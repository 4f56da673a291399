"""
OCI Generative AI chat model.

Sends a prompt together with the previous reply's messages to an on-demand
chat model and returns the parsed reply plus the conversation to continue
with.

Dependencies: oci, troubleshoot_assist.models, troubleshoot_assist.configs
System role: Chat completion adapter
"""

import logging

from oci.generative_ai_inference import GenerativeAiInferenceClient
from oci.generative_ai_inference.models import (
    AssistantMessage,
    ChatDetails,
    GenericChatRequest,
    OnDemandServingMode,
    SystemMessage,
    TextContent,
    UserMessage,
)

from troubleshoot_assist.configs import GenerationParameters
from troubleshoot_assist.models.chat import (
    ChatExchange,
    ChatMessage,
    Conversation,
    MessageRole,
    parse_chat_response,
)

logger = logging.getLogger(__name__)

_SDK_MESSAGE_TYPES = {
    MessageRole.USER: UserMessage,
    MessageRole.ASSISTANT: AssistantMessage,
    MessageRole.SYSTEM: SystemMessage,
}


def to_sdk_message(message: ChatMessage):
    """Convert a ChatMessage into the matching SDK message type."""
    message_type = _SDK_MESSAGE_TYPES[message.role]
    return message_type(content=[TextContent(text=message.content)])


class OCIChatModel:
    """Chat client for an on-demand OCI chat model."""

    def __init__(
        self,
        client: GenerativeAiInferenceClient,
        model_id: str = "meta.llama-3.1-405b-instruct",
        compartment_id: str = "",
        parameters: GenerationParameters | None = None,
    ) -> None:
        """
        Initialize chat model.

        Args:
            client: Authenticated inference client
            model_id: Chat model served on demand
            compartment_id: Compartment authorizing the request (passed through)
            parameters: Generation parameters (defaults if None)
        """
        self._client = client
        self._compartment_id = compartment_id
        self._serving_mode = OnDemandServingMode(model_id=model_id)
        self._parameters = parameters or GenerationParameters()

    @property
    def parameters(self) -> GenerationParameters:
        return self._parameters

    def build_request(self, messages: list[ChatMessage]) -> ChatDetails:
        """
        Build chat details for the given message list.

        Args:
            messages: Full message list, oldest first

        Returns:
            ChatDetails: Request body for the chat operation
        """
        params = self._parameters
        chat_request = GenericChatRequest(
            messages=[to_sdk_message(message) for message in messages],
            max_tokens=params.max_tokens,
            num_generations=params.num_generations,
            frequency_penalty=params.frequency_penalty,
            top_p=params.top_p,
            top_k=params.top_k,
            temperature=params.temperature,
            is_stream=params.is_stream,
        )
        return ChatDetails(
            compartment_id=self._compartment_id,
            serving_mode=self._serving_mode,
            chat_request=chat_request,
        )

    def generate_response(
        self,
        prompt: str,
        conversation: Conversation | None = None,
    ) -> ChatExchange:
        """
        Generate a reply to a prompt.

        The prompt is appended to ``conversation`` (the previous reply's
        messages). The returned conversation is the new reply's candidate
        list; it replaces the old one rather than extending it.

        Args:
            prompt: User prompt
            conversation: Memory returned by the previous call, if any

        Returns:
            ChatExchange: Parsed reply and the next conversation

        Raises:
            UnexpectedResponseError: When the reply shape is not recognized
        """
        history = conversation if conversation is not None else Conversation.empty()
        request_conversation = history.append(ChatMessage(role=MessageRole.USER, content=prompt))

        response = self._client.chat(self.build_request(list(request_conversation.messages)))
        reply = parse_chat_response(response.data.chat_response)

        logger.info(
            f"{__name__}:generate_response - Sent {len(request_conversation.messages)} messages, "
            f"reply format={reply.api_format}"
        )
        return ChatExchange(reply=reply, conversation=Conversation.from_reply(reply))
