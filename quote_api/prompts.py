from pydantic import BaseModel, ConfigDict

from quote_api.config import QUOTES_REQUESTED


class SearchRequest(BaseModel):
    term: str


class QuoteRecord(BaseModel):
    """One {quote, book, author} result. Field order drives the response schema."""
    model_config = ConfigDict(frozen=True)

    quote: str
    book: str
    author: str


PROMPT_TEMPLATE = (
    'Find {count} meaningful literary quotes that contain the word "{term}".\n'
    "Each quote must be from a famous book or author.\n"
    "Provide the response as a JSON array of objects. Each object should have the following "
    'properties: "quote", "book", and "author".\n'
    "If no quotes are found, return an empty JSON array."
)


def build_prompt(term: str) -> str:
    # The term goes in verbatim; str.format does not re-parse braces inside it.
    return PROMPT_TEMPLATE.format(count=QUOTES_REQUESTED, term=term)


def build_response_schema() -> dict:
    """Machine-readable output schema: an array of objects with ordered string properties."""
    fields = list(QuoteRecord.model_fields)
    return {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": {name: {"type": "STRING"} for name in fields},
            "propertyOrdering": fields,
        },
    }


def build_payload(request: SearchRequest) -> dict:
    """Request body for generateContent: a single user turn plus JSON generation config."""
    chat_history = [{"role": "user", "parts": [{"text": build_prompt(request.term)}]}]
    return {
        "contents": chat_history,
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": build_response_schema(),
        },
    }
