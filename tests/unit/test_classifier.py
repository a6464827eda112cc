import pytest

from repostwatch.classification.classifier import DomainClassifier, extract_domain
from repostwatch.classification.lists import DomainLists
from repostwatch.classification.models import DomainClassification, Judgment


class TestExtractDomain:
    def test_strips_www_and_lowercases(self) -> None:
        assert extract_domain("https://WWW.Shueisha.co.jp/xyz") == "shueisha.co.jp"

    def test_keeps_other_subdomains(self) -> None:
        assert extract_domain("https://books.rakuten.co.jp/a") == "books.rakuten.co.jp"

    def test_unparseable_url_yields_empty(self) -> None:
        assert extract_domain("not a url") == ""
        assert extract_domain("http://[::1") == ""


class TestClassify:
    def test_official_domain(self, classifier: DomainClassifier) -> None:
        assert classifier.classify("https://www.shueisha.co.jp/xyz") is DomainClassification.OFFICIAL

    def test_legitimate_seller_is_official(self, classifier: DomainClassifier) -> None:
        assert classifier.classify("https://www.amazon.co.jp/dp/1") is DomainClassification.OFFICIAL

    def test_premium_official_domain(self, classifier: DomainClassifier) -> None:
        result = classifier.classify("https://jumpplus.shueisha.co.jp/episode/1")
        assert result is DomainClassification.PREMIUM_OFFICIAL

    def test_sns_domain(self, classifier: DomainClassifier) -> None:
        assert classifier.classify("https://x.com/user/status/1") is DomainClassification.SNS

    def test_suspicious_domain(self, classifier: DomainClassifier) -> None:
        result = classifier.classify("https://egg.5ch.net/test/read.cgi/1")
        assert result is DomainClassification.SUSPICIOUS

    def test_unknown_domain_defaults_to_unofficial(self, classifier: DomainClassifier) -> None:
        assert classifier.classify("https://blog.example.org/post") is DomainClassification.UNOFFICIAL

    def test_unparseable_url_is_unofficial(self, classifier: DomainClassifier) -> None:
        assert classifier.classify("::::") is DomainClassification.UNOFFICIAL

    def test_matching_is_case_insensitive(self, classifier: DomainClassifier) -> None:
        assert classifier.classify_domain("WWW.KODANSHA.CO.JP") is DomainClassification.OFFICIAL

    def test_premium_wins_over_suspicious(self) -> None:
        lists = DomainLists(premium_official=["shueisha"], suspicious=["shueisha"])
        classifier = DomainClassifier(lists)
        result = classifier.classify("https://shueisha-raw.example/x")
        assert result is DomainClassification.PREMIUM_OFFICIAL

    def test_official_wins_over_sns(self) -> None:
        lists = DomainLists(publishers=["x.com"], social_media=["x.com"])
        assert DomainClassifier(lists).classify("https://x.com/a") is DomainClassification.OFFICIAL

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.shueisha.co.jp/xyz",
            "https://x.com/user",
            "https://egg.5ch.net/a",
            "https://unknown.example/",
            "",
        ],
    )
    def test_is_deterministic(self, classifier: DomainClassifier, url: str) -> None:
        assert classifier.classify(url) is classifier.classify(url)


class TestInitialJudgment:
    @pytest.mark.parametrize(
        ("classification", "expected"),
        [
            (DomainClassification.PREMIUM_OFFICIAL, Judgment.CLEAR),
            (DomainClassification.OFFICIAL, Judgment.CLEAR),
            (DomainClassification.SNS, Judgment.SUSPICIOUS),
            (DomainClassification.SUSPICIOUS, Judgment.SUSPICIOUS),
            (DomainClassification.UNOFFICIAL, Judgment.SUSPICIOUS),
        ],
    )
    def test_mapping(
        self,
        classifier: DomainClassifier,
        classification: DomainClassification,
        expected: Judgment,
    ) -> None:
        assert classifier.initial_judgment(classification) is expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://i.imgur.com/abc.jpg",
            "https://egg.5ch.net/img/scan.PNG",
            "https://www.shueisha.co.jp/covers/vol1.webp",
        ],
    )
    def test_image_file_urls_are_indeterminate(self, classifier: DomainClassifier, url: str) -> None:
        assert classifier.initial_judgment_for(url) is Judgment.INDETERMINATE

    def test_page_urls_follow_classification(self, classifier: DomainClassifier) -> None:
        assert classifier.initial_judgment_for("https://www.shueisha.co.jp/xyz") is Judgment.CLEAR
        assert classifier.initial_judgment_for("https://egg.5ch.net/test/1") is Judgment.SUSPICIOUS


class TestDomainType:
    def test_sns(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("x.com") == "SNS"

    def test_image_share(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("i.imgur.com") == "image sharing"

    def test_unofficial_viewer(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("manga-raw.club") == "unofficial viewer"

    def test_art_site(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("www.pixiv.net") == "illustration site"

    def test_forum(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("egg.5ch.net") == "forum"

    def test_other(self, classifier: DomainClassifier) -> None:
        assert classifier.domain_type("example.org") == "other"


class TestIsImageFile:
    @pytest.mark.parametrize(
        "url",
        [
            "https://cdn.example.com/a/cover.JPG",
            "https://pbs.twimg.com/media/abc.png",
            "https://example.com/x.webp",
            "https://example.com/scan.tiff",
        ],
    )
    def test_image_paths(self, classifier: DomainClassifier, url: str) -> None:
        assert classifier.is_image_file(url)

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/page.html",
            "https://example.com/image.png/view",
            "https://example.com/?file=cover.png",
        ],
    )
    def test_non_image_paths(self, classifier: DomainClassifier, url: str) -> None:
        assert not classifier.is_image_file(url)
