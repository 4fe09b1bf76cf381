from abc import ABC, abstractmethod


class BaseLlmClient(ABC):
    """Contract for provider-specific chat-completion clients."""

    @abstractmethod
    def create_message(
        self,
        *,
        model: str,
        prompt: str,
        max_tokens: int,
        temperature: float | None = None,
        top_p: float | None = None,
    ) -> str:
        """Send ``prompt`` as a single user message and return the reply text.

        Raises:
            LlmConfigurationError: credential missing; no request is sent.
            LlmTransportError: network failure or non-2xx status.
            LlmResponseError: the provider answered without a text reply.
        """

    def close(self) -> None:
        """Release network resources held by the client."""
