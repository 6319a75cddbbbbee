import pytest

from minihttpie._utils._tokens import RequestToken, TokenKind, classify, classify_all
from minihttpie.models.errors import (
    ClassificationError,
    ClassificationErrorKind,
    ExitCode,
)


class TestClassify:
    @pytest.mark.parametrize(
        "raw, key, value",
        [
            ("name=bob", "name", "bob"),
            ("age=", "age", ""),
            ("a=b=c", "a", "b=c"),
            ("x=hello world", "x", "hello world"),
            ("a=b==c", "a", "b==c"),
            ("a=b:c", "a", "b:c"),
        ],
    )
    def test_data_field(self, raw: str, key: str, value: str):
        token = classify(raw)

        assert token.kind is TokenKind.DATA_FIELD
        assert token.key == key
        assert token.raw_value == value
        assert token.sep == "="
        assert token.orig == raw

    @pytest.mark.parametrize(
        "raw, key, value",
        [
            ("Accept:application/json", "Accept", "application/json"),
            ("X-Token: abc ", "X-Token", "abc"),
            (" X-Padded :value", "X-Padded", "value"),
            ("X-Query:a=b", "X-Query", "a=b"),
            ("X-Eq:a==b", "X-Eq", "a==b"),
            ("Referer:http://example.com/a?b=c", "Referer", "http://example.com/a?b=c"),
            ("X-Empty:", "X-Empty", ""),
        ],
    )
    def test_header(self, raw: str, key: str, value: str):
        token = classify(raw)

        assert token.kind is TokenKind.HEADER
        assert token.key == key
        assert token.raw_value == value

    @pytest.mark.parametrize(
        "raw, key, value",
        [
            ("a==2", "a", "2"),
            ("search==foo bar", "search", "foo bar"),
            ("q==a:b", "q", "a:b"),
            ("q===x", "q", "=x"),
        ],
    )
    def test_query(self, raw: str, key: str, value: str):
        token = classify(raw)

        assert token.kind is TokenKind.QUERY
        assert token.key == key
        assert token.raw_value == value

    @pytest.mark.parametrize(
        "raw, key, value",
        [
            ("age:=18", "age", "18"),
            ("ok:=true", "ok", "true"),
            ("tags:=[1, 2]", "tags", "[1, 2]"),
            ('obj:={"a": "b=c"}', "obj", '{"a": "b=c"}'),
            ("nothing:=null", "nothing", "null"),
        ],
    )
    def test_raw_json_field_wins_over_header(self, raw: str, key: str, value: str):
        token = classify(raw)

        assert token.kind is TokenKind.JSON_FIELD
        assert token.key == key
        assert token.raw_value == value

    def test_header_value_keeps_later_separators(self):
        token = classify("X-Data:a:=1")

        assert token.kind is TokenKind.HEADER
        assert token.raw_value == "a:=1"

    def test_body_field_kinds(self):
        assert TokenKind.JSON_FIELD.is_body_field
        assert TokenKind.DATA_FIELD.is_body_field
        assert not TokenKind.HEADER.is_body_field
        assert not TokenKind.QUERY.is_body_field

    def test_token_is_immutable(self):
        token = classify("a=b")

        with pytest.raises(AttributeError):
            token.key = "c"  # type: ignore[misc]

    def test_equal_tokens_compare_equal(self):
        assert classify("a=b") == RequestToken(
            key="a", raw_value="b", kind=TokenKind.DATA_FIELD, sep="=", orig="a=b"
        )


class TestEscaping:
    @pytest.mark.parametrize(
        "raw, kind, key, value",
        [
            (r"a\=b=c", TokenKind.DATA_FIELD, "a=b", "c"),
            (r"a\:b=c", TokenKind.DATA_FIELD, "a:b", "c"),
            (r"time\:stamp:12", TokenKind.HEADER, "time:stamp", "12"),
            (r"key=a\=b", TokenKind.DATA_FIELD, "key", "a=b"),
            (r"a\==b", TokenKind.DATA_FIELD, "a=", "b"),
            (r"a:\=1", TokenKind.HEADER, "a", "=1"),
            (r"a\:=1", TokenKind.DATA_FIELD, "a:", "1"),
            (r"a\\=b", TokenKind.DATA_FIELD, "a\\", "b"),
            (r"q\=\=x==y", TokenKind.QUERY, "q==x", "y"),
        ],
    )
    def test_escaped_separators_are_literal(self, raw, kind, key, value):
        token = classify(raw)

        assert token.kind is kind
        assert token.key == key
        assert token.raw_value == value

    def test_backslash_before_other_characters_is_kept(self):
        token = classify(r"path=C\temp\new")

        assert token.raw_value == r"C\temp\new"

    def test_trailing_backslash_is_kept(self):
        token = classify("path=dir\\")

        assert token.raw_value == "dir\\"

    def test_only_escaped_separators_is_an_error(self):
        with pytest.raises(ClassificationError):
            classify(r"a\=b\:c")


class TestClassificationErrors:
    @pytest.mark.parametrize("raw", ["a", "", "just-text", "a@b", "http"])
    def test_missing_separator(self, raw: str):
        with pytest.raises(ClassificationError) as exc_info:
            classify(raw)

        assert exc_info.value.kind is ClassificationErrorKind.MISSING_SEPARATOR
        assert exc_info.value.exit_code == ExitCode.USAGE_ERROR

    def test_error_names_the_token(self):
        with pytest.raises(ClassificationError) as exc_info:
            classify("oops")

        assert exc_info.value.token == "oops"
        assert "oops" in str(exc_info.value)


class TestClassifyAll:
    def test_keeps_order(self):
        tokens = classify_all(["a=1", "X:y", "q==z"])

        assert [t.kind for t in tokens] == [
            TokenKind.DATA_FIELD,
            TokenKind.HEADER,
            TokenKind.QUERY,
        ]

    def test_stops_at_first_invalid_item(self):
        with pytest.raises(ClassificationError) as exc_info:
            classify_all(["a=1", "bad", "worse"])

        assert exc_info.value.token == "bad"
