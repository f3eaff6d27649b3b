import sys
import os
# --- PATH FIX: Add parent directory so Python finds quote_api ---
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
# ----------------------------------------------------------------

import json
import logging
import pytest

from quote_api.parser import extract_text, parse_response


def _envelope(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}

# ==============================================================================
# 1. ENVELOPE EXTRACTION
# ==============================================================================

@pytest.mark.parametrize("envelope", [
    None,
    {},
    {"candidates": []},
    {"candidates": None},
    {"candidates": [{}]},
    {"candidates": [{"content": {"parts": []}}]},
    {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
    "not a dict",
])
def test_unusable_envelopes_yield_empty_list(envelope):
    """Unit: Absent or malformed envelopes collapse to []."""
    assert parse_response(envelope) == []

def test_extract_text_uses_first_candidate():
    """Unit: Only the first candidate's first part is read."""
    envelope = {"candidates": [
        {"content": {"parts": [{"text": "first"}, {"text": "ignored"}]}},
        {"content": {"parts": [{"text": "second"}]}},
    ]}
    assert extract_text(envelope) == "first"

# ==============================================================================
# 2. JSON DECODING
# ==============================================================================

def test_parse_valid_quote_list():
    """Unit: A JSON array of records is returned as decoded."""
    quotes = [{"quote": "All you need is love.", "book": "Songbook", "author": "Lennon"}]
    assert parse_response(_envelope(json.dumps(quotes))) == quotes

def test_parse_empty_array():
    """Unit: "[]" decodes to an empty list."""
    assert parse_response(_envelope("[]")) == []

def test_parse_invalid_json_is_logged_not_raised(caplog):
    """Unit: "{not json" is logged and treated as no results."""
    with caplog.at_level(logging.ERROR):
        assert parse_response(_envelope("{not json")) == []
    assert "Failed to parse JSON response" in caplog.text

def test_parse_returns_unvalidated_payload():
    """Unit: Records missing fields, or a non-list value, pass through unchecked."""
    assert parse_response(_envelope('[{"quote": "only a quote"}]')) == [{"quote": "only a quote"}]
    assert parse_response(_envelope('{"quote": "x"}')) == {"quote": "x"}

@pytest.mark.parametrize("text", ["[" * 100000, "[" * 100000 + "]" * 100000])
def test_parse_deeply_nested_json_yields_empty_list(text, caplog):
    """Unit: Nesting deep enough to exhaust the decoder is treated as no results."""
    with caplog.at_level(logging.ERROR):
        assert parse_response(_envelope(text)) == []
    assert "Failed to parse JSON response" in caplog.text
