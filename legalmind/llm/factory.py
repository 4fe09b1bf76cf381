from legalmind.config.settings import Settings
from legalmind.llm.anthropic_client_adapter import AnthropicClientAdapter
from legalmind.llm.client_base import BaseLlmClient
from legalmind.llm.example_client_adapter import ExampleClientAdapter
from legalmind.llm.exceptions import LlmConfigurationError
from legalmind.llm.openai_client_adapter import OpenAIClientAdapter


class LlmClientFactory:
    """Creates the configured LLM client adapter."""

    PROVIDERS: tuple[str, ...] = ("anthropic", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseLlmClient:
        provider = settings.llm_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "anthropic":
            return AnthropicClientAdapter(
                api_key=settings.llm_api_key,
                api_url=settings.llm_api_url,
                api_version=settings.llm_api_version,
                timeout_seconds=settings.llm_timeout_seconds,
            )
        if provider == "openai":
            return OpenAIClientAdapter(
                api_key=settings.llm_api_key,
                timeout_seconds=settings.llm_timeout_seconds,
                base_url=settings.openai_base_url,
            )
        raise LlmConfigurationError(
            f"Unknown LLM provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
