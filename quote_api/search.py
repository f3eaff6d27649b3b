from quote_api.gemini_client import RetryingClient
from quote_api.parser import parse_response
from quote_api.prompts import SearchRequest, build_payload


def find_quotes(term, client=None):
    """
    Runs one search end to end: prompt -> retrying POST -> parsed payload.
    Network and parse failures both come back as an empty list.
    """
    request = SearchRequest(term=term)
    client = client or RetryingClient()
    result = client.send(build_payload(request))
    return parse_response(result.envelope)
