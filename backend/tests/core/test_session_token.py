"""Tests for session token generation and header normalization."""

import re

from metro_guide.core.session_token import (
    generate_session_token, normalize_session_token,
)


def test_generated_token_is_32_hex_chars():
    token = generate_session_token()
    assert re.fullmatch(r"[0-9a-f]{32}", token)


def test_generated_tokens_are_unique():
    tokens = {generate_session_token() for _ in range(200)}
    assert len(tokens) == 200


def test_normalize_missing_header():
    assert normalize_session_token(None) is None


def test_normalize_blank_header_counts_as_missing():
    assert normalize_session_token("") is None
    assert normalize_session_token("   ") is None


def test_normalize_strips_whitespace():
    assert normalize_session_token("  abc  ") == "abc"
