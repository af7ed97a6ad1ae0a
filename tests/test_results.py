import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from cruzadas.core.exceptions import ResultsSinkError
from cruzadas.io.results import LoggingResultsSink, PuzzleResult, WebhookResultsSink


def sample_result() -> PuzzleResult:
    return PuzzleResult(completed_words=8, total_words=8, size=13, finished_at="2024-05-01T10:00:00+00:00")


class PuzzleResultTests(unittest.TestCase):
    def test_share_text(self) -> None:
        self.assertEqual(sample_result().share_text(), "Palavras cruzadas 13x13: 8/8 palavras")


class LoggingResultsSinkTests(unittest.TestCase):
    def test_report_is_recorded_and_logged(self) -> None:
        sink = LoggingResultsSink()
        with self.assertLogs("cruzadas.io.results", level="INFO") as captured:
            sink.report(sample_result())
        self.assertEqual(sink.reports, [sample_result()])
        self.assertIn("8/8", captured.output[0])


class WebhookResultsSinkTests(unittest.TestCase):
    def test_missing_url_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ResultsSinkError):
                WebhookResultsSink()

    def test_url_read_from_environment(self) -> None:
        with patch.dict(os.environ, {"CRUZADAS_WEBHOOK_URL": "https://example.test/hook"}):
            sink = WebhookResultsSink(session=MagicMock())
        self.assertEqual(sink.url, "https://example.test/hook")

    def test_report_posts_json_payload(self) -> None:
        session = MagicMock()
        session.post.return_value.status_code = 204
        sink = WebhookResultsSink(url="https://example.test/hook", timeout_seconds=3, session=session)

        sink.report(sample_result())

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        self.assertEqual(args, ("https://example.test/hook",))
        self.assertEqual(kwargs["timeout"], 3)
        payload = kwargs["json"]
        self.assertEqual(payload["type"], "game_result")
        self.assertEqual(payload["data"]["completed_words"], 8)
        self.assertEqual(payload["data"]["game"], "crossword")
        self.assertEqual(payload["data"]["shareText"], "Palavras cruzadas 13x13: 8/8 palavras")
        session.post.return_value.raise_for_status.assert_called_once()

    def test_http_error_is_wrapped(self) -> None:
        session = MagicMock()
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        sink = WebhookResultsSink(url="https://example.test/hook", session=session)
        with self.assertRaises(ResultsSinkError):
            sink.report(sample_result())

    def test_connection_error_is_wrapped(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.ConnectionError("refused")
        sink = WebhookResultsSink(url="https://example.test/hook", session=session)
        with self.assertRaises(ResultsSinkError):
            sink.report(sample_result())


if __name__ == "__main__":
    unittest.main()
