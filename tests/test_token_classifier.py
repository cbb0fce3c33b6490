"""Tests for the token classifier in cgetopt."""

import pytest

from cgetopt.exceptions import (
    DuplicateOptionError,
    InvalidOptionError,
    UnrecognizedOptionError,
)
from cgetopt.option_criterion import OptionCriterion
from cgetopt.token_classifier import OptionMatch, TokenClassifier


@pytest.fixture
def classifier():
    return TokenClassifier(
        [
            OptionCriterion("h", False),
            OptionCriterion("r", False),
            OptionCriterion("f", False),
            OptionCriterion("i", True),
        ],
        [
            OptionCriterion("help", False),
            OptionCriterion("input", True),
            OptionCriterion("human-readable", False),
        ],
    )


class TestSplitTokenUnit:
    """Unit tests for the lexical split of option tokens."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("-i", ("-", "i", None)),
            ("-ifile.txt", ("-", "i", "file.txt")),
            ("-ipepe.txt", ("-", "i", "pepe.txt")),
            ("-i-", ("-", "i", "-")),
            ("-w10", ("-", "w", "10")),
            ("--input", ("--", "input", None)),
            ("--human-readable", ("--", "human-readable", None)),
            ("--v1.2", ("--", "v1.2", None)),
        ],
    )
    def test_split_token_variations(self, token, expected):
        assert TokenClassifier.split_token(token) == expected

    @pytest.mark.parametrize(
        "token", ["-", "--", "-i=x", "--input=file", "-i/tmp/x", "-i file", "--a b"]
    )
    def test_split_token_rejects_malformed_tokens(self, token):
        with pytest.raises(InvalidOptionError) as exc_info:
            TokenClassifier.split_token(token)
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", ["-1", "-5", "--2fast", "---x", "-_x", "-.x"])
    def test_split_token_requires_leading_letter(self, token):
        with pytest.raises(InvalidOptionError, match="must start with a letter"):
            TokenClassifier.split_token(token)

    @pytest.mark.parametrize(
        "token,expected",
        [("-h", True), ("--help", True), ("-", True), ("h", False), ("", False)],
    )
    def test_is_option_like(self, token, expected):
        assert TokenClassifier.is_option_like(token) is expected


class TestClassifyUnit:
    """Unit tests for matching tokens to criteria."""

    def test_classify_short_flag(self, classifier):
        option = classifier.classify("-h")
        assert option == OptionMatch("-h", "-", OptionCriterion("h", False), None)
        assert option.key == "-h"

    def test_classify_short_with_embedded_value(self, classifier):
        option = classifier.classify("-ifile.txt")
        assert option.key == "-i"
        assert option.embedded_value == "file.txt"
        assert option.criterion.requires_value

    def test_classify_long_option(self, classifier):
        option = classifier.classify("--input")
        assert option.key == "--input"
        assert option.embedded_value is None

    @pytest.mark.parametrize("token", ["-x", "--inputs", "--h", "--i", "-H"])
    def test_classify_unrecognized(self, classifier, token):
        with pytest.raises(UnrecognizedOptionError) as exc_info:
            classifier.classify(token)
        assert exc_info.value.token == token

    def test_short_and_long_namespaces_are_distinct(self):
        classifier = TokenClassifier(
            [OptionCriterion("h", False)], [OptionCriterion("hh", False)]
        )
        assert classifier.lookup("-", "h") == OptionCriterion("h", False)
        assert classifier.lookup("--", "h") is None
        assert classifier.lookup("--", "hh") == OptionCriterion("hh", False)

    @pytest.mark.parametrize("token", ["-rf", "-hr", "-hfile"])
    def test_classify_rejects_clustered_flags(self, classifier, token):
        with pytest.raises(UnrecognizedOptionError) as exc_info:
            classifier.classify(token)
        assert exc_info.value.token == token

    def test_classify_rejects_recorded_key(self, classifier):
        with pytest.raises(DuplicateOptionError) as exc_info:
            classifier.classify("-ib", {"-i": "a"})
        assert exc_info.value.option == "-i"

    def test_classify_allows_same_name_in_other_namespace(self):
        classifier = TokenClassifier(
            [OptionCriterion("h", False)], [OptionCriterion("help", False)]
        )
        option = classifier.classify("--help", {"-h": None})
        assert option.key == "--help"

    def test_classify_propagates_lexical_errors(self, classifier):
        with pytest.raises(InvalidOptionError):
            classifier.classify("-1")


class TestIsRecognizedUnit:
    """Unit tests for is_recognized."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("-h", True),
            ("-ivalue", True),
            ("--human-readable", True),
            ("-x", False),
            ("-rf", False),
            ("-5", False),
            ("-", False),
            ("--", False),
            ("value", False),
        ],
    )
    def test_is_recognized(self, classifier, token, expected):
        assert classifier.is_recognized(token) is expected
