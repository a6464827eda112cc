from pathlib import Path

from repostwatch.judgment.exceptions import JudgmentError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

WEB_JUDGMENT_PROMPT = "web_judgment_prompt.txt"
SOCIAL_JUDGMENT_PROMPT = "social_judgment_prompt.txt"
IMAGE_COMPARISON_PROMPT = "image_comparison_prompt.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a judgment prompt template by file name.

    Args:
        name: Template file name, e.g. ``web_judgment_prompt.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        JudgmentError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise JudgmentError(f"Failed to load prompt template: {exc}") from exc
