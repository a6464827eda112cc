import json
from pathlib import Path

import pytest

from repostwatch.classification.exceptions import DomainListsError
from repostwatch.classification.lists import DomainLists
from repostwatch.config.settings import DEFAULT_DOMAIN_LISTS_PATH


class TestDomainListsFromFile:
    def test_loads_bundled_lists(self) -> None:
        lists = DomainLists.from_file(DEFAULT_DOMAIN_LISTS_PATH)
        assert "shueisha.co.jp" in lists.publishers
        assert "x.com" in lists.social_media

    def test_official_combines_publishers_and_sellers(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.json"
        path.write_text(json.dumps({"publishers": ["a.jp"], "legitimate_sellers": ["b.com"]}))
        lists = DomainLists.from_file(path)
        assert lists.official == ["a.jp", "b.com"]

    def test_entries_are_lowercased_and_trimmed(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.json"
        path.write_text(json.dumps({"suspicious": ["  Manga-RAW ", ""]}))
        lists = DomainLists.from_file(path)
        assert lists.suspicious == ["manga-raw"]

    def test_missing_file_raises(self) -> None:
        with pytest.raises(DomainListsError, match="Failed to load"):
            DomainLists.from_file(Path("/nonexistent/domains.json"))

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.json"
        path.write_text("{not json")
        with pytest.raises(DomainListsError, match="Invalid JSON"):
            DomainLists.from_file(path)

    def test_wrong_shape_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.json"
        path.write_text(json.dumps({"publishers": "shueisha.co.jp"}))
        with pytest.raises(DomainListsError, match="invalid"):
            DomainLists.from_file(path)
