import json
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def extract_text(envelope):
    """
    Returns the first candidate's text payload, or None when the envelope is
    missing, has no candidates, or the candidate is not shaped as expected.
    """
    if not isinstance(envelope, Mapping):
        return None
    candidates = envelope.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    try:
        text = candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        logger.error("Response candidate has no text part.")
        return None
    return text if isinstance(text, str) else None


def parse_response(envelope):
    """
    Decodes the candidate text as JSON and returns it unchecked.
    Any failure along the way collapses to an empty list.
    """
    text = extract_text(envelope)
    if text is None:
        return []
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        # Deeply nested arrays exhaust the decoder stack before they fail to parse.
        logger.error("Failed to parse JSON response: %s", e)
        return []
