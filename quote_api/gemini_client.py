import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

import requests

from quote_api.config import (
    INITIAL_DELAY_MS,
    MAX_ATTEMPTS,
    REQUEST_TIMEOUT,
    get_api_key,
    get_api_url,
)

logger = logging.getLogger(__name__)


class AttemptOutcome(str, Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    EXHAUSTED = "exhausted"


@dataclass
class SendResult:
    outcome: AttemptOutcome
    envelope: Optional[dict] = None
    attempts: int = 0
    delays_ms: List[int] = field(default_factory=list)
    last_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is AttemptOutcome.SUCCESS


class RetryingClient:
    """
    POSTs a generateContent payload with bounded exponential backoff.

    Each failed attempt (network error, non-success status, or a success body
    that is not JSON) counts toward max_attempts. Between attempts the caller
    is suspended for the current delay, which then doubles. send() never raises
    for transport problems; it reports them through SendResult instead.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        max_attempts: int = MAX_ATTEMPTS,
        initial_delay_ms: int = INITIAL_DELAY_MS,
        timeout: float = REQUEST_TIMEOUT,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_url = api_url or get_api_url()
        self.api_key = api_key if api_key is not None else get_api_key()
        self.max_attempts = max_attempts
        self.initial_delay_ms = initial_delay_ms
        self.timeout = timeout
        self._sleep = sleep

        if not self.api_key:
            logger.warning("GEMINI_API_KEY is not set; requests will be rejected by the service.")

    def _attempt(self, payload: dict):
        """One POST. Returns (outcome, envelope, error description)."""
        try:
            response = requests.post(
                self.api_url,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # The exception text embeds the URL, and with it the key.
            return AttemptOutcome.RETRYABLE, None, f"{type(e).__name__} while calling the API"

        if not response.ok:
            return AttemptOutcome.RETRYABLE, None, f"API call failed with status: {response.status_code}"

        try:
            return AttemptOutcome.SUCCESS, response.json(), None
        except ValueError:
            return AttemptOutcome.RETRYABLE, None, "API returned a non-JSON body"

    def send(self, payload: dict) -> SendResult:
        attempts = 0
        delay_ms = self.initial_delay_ms
        delays_ms = []
        last_error = None

        while attempts < self.max_attempts:
            outcome, envelope, error = self._attempt(payload)
            if outcome is AttemptOutcome.SUCCESS:
                return SendResult(AttemptOutcome.SUCCESS, envelope, attempts, delays_ms)

            last_error = error
            logger.error("API call error: %s", error)
            attempts += 1
            if attempts < self.max_attempts:
                logger.info("Retrying in %s seconds...", delay_ms / 1000)
                self._sleep(delay_ms / 1000)
                delays_ms.append(delay_ms)
                delay_ms *= 2

        logger.error("Max retries reached. Giving up.")
        return SendResult(AttemptOutcome.EXHAUSTED, None, attempts, delays_ms, last_error)
