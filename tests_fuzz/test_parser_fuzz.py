import sys
import os
import json
import pytest
from hypothesis import given, strategies as st

# --- PATH FIX ---
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
# ----------------

from quote_api.parser import parse_response
from quote_api.prompts import build_payload, SearchRequest

# ==============================================================================
# STRATEGY: Malformed response envelopes
# ==============================================================================
# JSON-ish garbage that vaguely looks like the envelope but is "corrupted":
# missing candidates, parts that are not lists, text that is not a string, etc.
garbage_strategy = st.recursive(
    st.none() | st.booleans() | st.floats() | st.text(),
    lambda children: st.lists(children) | st.dictionaries(st.text(), children),
)
envelope_like_strategy = st.builds(
    lambda parts: {"candidates": [{"content": {"parts": parts}}]},
    st.lists(st.fixed_dictionaries({"text": garbage_strategy})),
)


@given(envelope=st.one_of(garbage_strategy, envelope_like_strategy))
def test_fuzz_parse_response_never_raises(envelope):
    """
    Property: parse_response absorbs any envelope shape without raising.
    """
    try:
        parse_response(envelope)
    except Exception as e:
        pytest.fail(f"CRASHED on envelope: {envelope!r}\nError: {e}")


@given(text=st.text())
def test_fuzz_candidate_text_is_decoded_or_empty(text):
    """
    Property: Candidate text either decodes as JSON or yields [].
    """
    envelope = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    try:
        expected = json.loads(text)
    except json.JSONDecodeError:
        expected = []
    result = parse_response(envelope)
    # NaN never equals itself; compare the re-encoded form
    assert json.dumps(result, sort_keys=True) == json.dumps(expected, sort_keys=True)


@given(term=st.text())
def test_fuzz_payload_accepts_any_term(term):
    """
    Property: Any search term produces a payload whose prompt contains it.
    """
    payload = build_payload(SearchRequest(term=term))
    assert f'"{term}"' in payload["contents"][0]["parts"][0]["text"]
