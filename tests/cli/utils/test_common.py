import pytest

from minihttpie._cli._utils._common import UsageError, split_positionals, validate_url
from minihttpie._cli._utils._error_handling import extract_clean_error_message
from minihttpie._utils._request_spec import HttpMethod
from minihttpie.models.errors import (
    BuildError,
    ClassificationError,
    ClassificationErrorKind,
    TransportError,
    TransportErrorKind,
)


class TestSplitPositionals:
    def test_method_url_and_items(self):
        assert split_positionals(["post", "http://x", "a=1"]) == (
            HttpMethod.POST,
            "http://x",
            ["a=1"],
        )

    def test_url_only(self):
        assert split_positionals(["http://x"]) == (None, "http://x", [])

    def test_url_and_items_without_method(self):
        assert split_positionals(["http://x", "a=1", "b=2"]) == (
            None,
            "http://x",
            ["a=1", "b=2"],
        )

    def test_lone_method_name_is_a_url(self):
        assert split_positionals(["get"]) == (None, "get", [])

    def test_unknown_first_word_is_the_url(self):
        method, url, items = split_positionals(["localhost", "a=1"])

        assert method is None
        assert url == "localhost"
        assert items == ["a=1"]

    def test_missing_url(self):
        with pytest.raises(UsageError) as exc_info:
            split_positionals([])

        assert exc_info.value.exit_code == 3


class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        ["http://abc.xyz", "https://goog.job", "http://localhost:8080/a?b=c", "HTTP://X"],
    )
    def test_valid(self, url: str):
        assert validate_url(url) == url

    @pytest.mark.parametrize(
        "url", ["abc", "ftp://example.com", "http://", "/just/a/path", "http://[::1"]
    )
    def test_invalid(self, url: str):
        with pytest.raises(UsageError):
            validate_url(url)


class TestExtractCleanErrorMessage:
    def test_known_error_gets_a_hint(self):
        error = TransportError(
            TransportErrorKind.TIMEOUT, "Timeout: timed out", "http://x"
        )

        message = extract_clean_error_message(error)

        assert message.startswith("Timeout: timed out\n")
        assert "--timeout" in message

    def test_classification_error_hint(self):
        error = ClassificationError(ClassificationErrorKind.MISSING_SEPARATOR, "a")

        assert "backslash" in extract_clean_error_message(error)

    def test_conflicting_mode_has_no_extra_hint(self):
        error = BuildError.conflicting_body_mode("a:=1")

        assert extract_clean_error_message(error) == error.message

    def test_other_errors_use_first_line(self):
        assert extract_clean_error_message(ValueError("first\nsecond")) == "first"

    def test_empty_message_uses_default(self):
        assert extract_clean_error_message(ValueError(""), "fallback") == "fallback"
