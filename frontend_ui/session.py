import locale
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

from quote_api.config import QUOTES_PER_PAGE

logger = logging.getLogger(__name__)


class SortKey(str, Enum):
    AUTHOR = "author"
    BOOK = "book"


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


def record_field(record, name):
    """Field value as a string; records are unvalidated, so anything missing reads as ''."""
    if not isinstance(record, Mapping):
        return ""
    value = record.get(name)
    return value if isinstance(value, str) else ""


def collation_key(text):
    # strxfrm rejects embedded NULs
    return locale.strxfrm(text.replace("\x00", ""))


@dataclass
class SearchSession:
    """
    State of one search session. Mutated only through start_search,
    complete_search, change_page and change_sort.
    """
    term: str = ""
    results: List[Any] = field(default_factory=list)
    is_loading: bool = False
    has_searched: bool = False
    current_page: int = 1
    sort_key: SortKey = SortKey.AUTHOR

    # --- Mutation entry points ---
    def start_search(self, term):
        self.term = term
        self.results = []
        self.current_page = 1
        self.is_loading = True
        self.has_searched = True

    def complete_search(self, results):
        if not isinstance(results, list):
            logger.warning("Discarding non-list payload of type %s.", type(results).__name__)
            results = []
        self.results = results
        self.is_loading = False

    def change_page(self, page):
        if page < 1 or page > self.total_pages:
            raise ValueError(f"Page {page} is outside 1..{self.total_pages}")
        self.current_page = page

    def change_sort(self, sort_key):
        # Page is kept on purpose: only the order changes.
        self.sort_key = SortKey(sort_key)

    # --- Derived views ---
    @property
    def view_state(self):
        if self.is_loading:
            return ViewState.LOADING
        if self.results:
            return ViewState.POPULATED
        if self.has_searched:
            return ViewState.EMPTY
        return ViewState.IDLE

    def sorted_results(self):
        key = self.sort_key.value
        return sorted(self.results, key=lambda r: collation_key(record_field(r, key)))

    @property
    def total_pages(self):
        return math.ceil(len(self.results) / QUOTES_PER_PAGE)

    def page_records(self, page):
        start = (page - 1) * QUOTES_PER_PAGE
        return self.sorted_results()[start:start + QUOTES_PER_PAGE]

    def current_page_records(self):
        return self.page_records(self.current_page)

    @property
    def has_previous(self):
        return self.current_page > 1

    @property
    def has_next(self):
        return self.current_page < self.total_pages
