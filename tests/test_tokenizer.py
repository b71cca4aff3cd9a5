"""Tests for gitguide.lib.tokenizer module."""

import pytest

from gitguide.lib.tokenizer import tokenize


class TestTokenize:
    """Splitting on unquoted spaces."""

    @pytest.mark.parametrize("line,expected", [
        ("git status", ["git", "status"]),
        ("  git   status  ", ["git", "status"]),
        ('git commit -m "first commit"', ["git", "commit", "-m", "first commit"]),
        ("git commit -m 'first commit'", ["git", "commit", "-m", "first commit"]),
        ("", []),
        ("   ", []),
    ])
    def test_basic_splitting(self, line, expected):
        assert tokenize(line) == expected

    def test_quote_chars_dropped_mid_token(self):
        """Quotes glue to neighbours like a shell does."""
        assert tokenize('a"b c"d') == ["ab cd"]

    def test_other_quote_is_literal_inside_quotes(self):
        assert tokenize('git commit -m "it\'s done"') == ["git", "commit", "-m", "it's done"]
        assert tokenize("x 'say \"hi\"'") == ["x", 'say "hi"']

    def test_unterminated_quote_runs_to_end(self):
        assert tokenize('git commit -m "never closed here') == [
            "git", "commit", "-m", "never closed here",
        ]

    def test_empty_quotes_produce_no_token(self):
        assert tokenize('git commit -m ""') == ["git", "commit", "-m"]

    def test_no_empty_tokens(self):
        assert "" not in tokenize('a  "" b   c')
