from pathlib import Path

TEMPLATES_DIR = Path(__file__).parent / "templates"

ANALYSIS_PROMPT = "analysis_prompt.txt"
ANALYSIS_SCHEMA = "analysis_schema.json"
DRAFTING_PROMPT = "drafting_prompt.txt"


class PromptLoadError(Exception):
    """Raised when a prompt template or schema file cannot be read."""


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Load a prompt template.

    Args:
        name: File name of a bundled template, used when ``path`` is None.
        path: Explicit template file overriding the bundled one.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = TEMPLATES_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the analysis reply JSON schema (bundled one by default).

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    if path is None:
        path = TEMPLATES_DIR / ANALYSIS_SCHEMA
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load JSON schema: {exc}") from exc
