from pathlib import Path

import pytest

from repostwatch.judgment.exceptions import JudgmentError
from repostwatch.judgment.prompt_loader import (
    IMAGE_COMPARISON_PROMPT,
    SOCIAL_JUDGMENT_PROMPT,
    WEB_JUDGMENT_PROMPT,
    load_prompt_template,
)


class TestLoadPromptTemplate:
    @pytest.mark.parametrize(
        "name", [WEB_JUDGMENT_PROMPT, SOCIAL_JUDGMENT_PROMPT, IMAGE_COMPARISON_PROMPT]
    )
    def test_bundled_templates_have_url_placeholder(self, name: str) -> None:
        assert "{url}" in load_prompt_template(name)

    def test_bundled_templates_ask_for_labels(self) -> None:
        assert "Verdict:" in load_prompt_template(WEB_JUDGMENT_PROMPT)
        assert "Similarity:" in load_prompt_template(IMAGE_COMPARISON_PROMPT)

    def test_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "custom.txt").write_text("hello {url}", encoding="utf-8")
        assert load_prompt_template("custom.txt", tmp_path) == "hello {url}"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(JudgmentError, match="Failed to load prompt template"):
            load_prompt_template("absent.txt", tmp_path)
