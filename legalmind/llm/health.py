from legalmind.llm.client_base import BaseLlmClient
from legalmind.llm.exceptions import LlmError
from legalmind.logging.logger import Log

PING_PROMPT = "請回應「連接成功」"


def check_connection(client: BaseLlmClient, model: str) -> bool:
    """Send a tiny prompt; True if the provider answered."""
    try:
        client.create_message(model=model, prompt=PING_PROMPT, max_tokens=100)
    except LlmError as exc:
        Log.error(f"LLM connection check failed: {exc}")
        return False
    return True
