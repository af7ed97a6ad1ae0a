"""Results-reporting sinks invoked when a puzzle is first solved."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Protocol

import requests

from ..core.exceptions import ResultsSinkError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class PuzzleResult:
    """Summary sent to a results sink."""

    completed_words: int
    total_words: int
    size: int
    finished_at: str
    game: str = "crossword"

    def share_text(self) -> str:
        return (
            f"Palavras cruzadas {self.size}x{self.size}: "
            f"{self.completed_words}/{self.total_words} palavras"
        )


class ResultsSink(Protocol):
    def report(self, result: PuzzleResult) -> None:
        ...


class LoggingResultsSink:
    """Writes results to the log; keeps them for inspection."""

    def __init__(self) -> None:
        self.reports: List[PuzzleResult] = []

    def report(self, result: PuzzleResult) -> None:
        self.reports.append(result)
        LOGGER.info("Puzzle solved: %s", result.share_text())


class WebhookResultsSink:
    """POSTs the result as JSON to a webhook URL."""

    def __init__(
        self,
        url: Optional[str] = None,
        url_env: str = "CRUZADAS_WEBHOOK_URL",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url_env = url_env
        self.url = url or os.environ.get(url_env)
        if not self.url:
            raise ResultsSinkError(f"Missing webhook URL in environment variable {self.url_env}")
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def report(self, result: PuzzleResult) -> None:
        payload = self._payload(result)
        try:
            response = self._session.post(self.url, json=payload, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ResultsSinkError(f"Webhook delivery failed: {exc}") from exc
        LOGGER.info("Result delivered to webhook (%s)", response.status_code)

    @staticmethod
    def _payload(result: PuzzleResult) -> Dict[str, Any]:
        return {
            "type": "game_result",
            "data": {**asdict(result), "shareText": result.share_text()},
        }
