import tempfile
import unittest
from unittest import mock

import requests

from puzzle_input import (
    CachedInputProvider,
    DownloadError,
    InputCache,
    InputCacheError,
    InputDownloader,
    SessionTokenSource,
    TokenError,
    load_default_config,
)
from time_key import DayKey

TOKEN = "0123456789abcdef" * 8


def _response(status_code: int, text: str = "") -> mock.Mock:
    response = mock.Mock()
    response.status_code = status_code
    response.text = text
    return response


class TestInputDownloader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.cache = InputCache(self._tmp.name)
        self.tokens = SessionTokenSource(
            self.cache, env_var="AOC_SESSION", environ={"AOC_SESSION": TOKEN}
        )
        self.session = mock.Mock(spec=requests.Session)
        self.downloader = InputDownloader(
            self.tokens,
            base_url="https://puzzles.example/",
            user_agent="tests",
            timeout_s=5,
            session=self.session,
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_requests_day_input_with_session_cookie(self) -> None:
        self.session.get.return_value = _response(200, "1\n2\n")

        text = self.downloader.download(DayKey(2022, 5))

        self.assertEqual(text, "1\n2\n")
        self.session.get.assert_called_once_with(
            "https://puzzles.example/2022/day/5/input",
            cookies={"session": TOKEN},
            timeout=5,
        )

    def test_auth_failures_flagged(self) -> None:
        for status in (400, 401, 403):
            self.session.get.return_value = _response(status)
            with self.assertRaises(DownloadError) as ctx:
                self.downloader.download(DayKey(2022, 5))
            self.assertTrue(ctx.exception.auth_failure)
            self.assertEqual(ctx.exception.status_code, status)

    def test_not_released_yet(self) -> None:
        self.session.get.return_value = _response(404)
        with self.assertRaises(DownloadError) as ctx:
            self.downloader.download(DayKey(2030, 1))
        self.assertFalse(ctx.exception.auth_failure)
        self.assertIn("not available yet", str(ctx.exception))

    def test_unexpected_status(self) -> None:
        self.session.get.return_value = _response(500)
        with self.assertRaises(DownloadError) as ctx:
            self.downloader.download(DayKey(2022, 5))
        self.assertEqual(ctx.exception.status_code, 500)

    def test_transport_errors_wrapped(self) -> None:
        self.session.get.side_effect = requests.ConnectionError("down")
        with self.assertRaises(DownloadError) as ctx:
            self.downloader.download(DayKey(2022, 5))
        self.assertIsNone(ctx.exception.status_code)

    def test_missing_token_raises_before_request(self) -> None:
        tokens = SessionTokenSource(self.cache, env_var="AOC_SESSION", environ={})
        downloader = InputDownloader(
            tokens, base_url="https://x.example", user_agent="t", timeout_s=1, session=self.session
        )
        with self.assertRaises(TokenError):
            downloader.download(DayKey(2022, 5))
        self.session.get.assert_not_called()

    def test_default_session_retries_transient_statuses(self) -> None:
        downloader = InputDownloader.from_config(load_default_config(), self.tokens)
        session = downloader._get_session()
        adapter = session.get_adapter("https://adventofcode.com/2022/day/1/input")
        self.assertIn(503, adapter.max_retries.status_forcelist)
        self.assertIn("puzzle-harness", session.headers["User-Agent"])
        downloader.close()


class TestCachedInputProvider(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.cache = InputCache(self._tmp.name)
        self.cache.write_token(TOKEN)
        self.tokens = SessionTokenSource(self.cache, env_var="AOC_SESSION", environ={})
        self.downloader = mock.Mock(spec=InputDownloader)
        self.downloader.tokens = self.tokens
        self.provider = CachedInputProvider(self.cache, self.downloader)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_download_is_cached(self) -> None:
        self.downloader.download.return_value = "  a\nb\n"
        key = DayKey(2022, 5)

        self.assertEqual(self.provider(key), "  a\nb")
        self.assertEqual(self.provider(key), "  a\nb")

        self.downloader.download.assert_called_once_with(key)
        self.assertTrue(self.cache.input_path(key).exists())

    def test_auth_failure_invalidates_token(self) -> None:
        self.downloader.download.side_effect = DownloadError(
            "rejected", status_code=401, auth_failure=True
        )
        with self.assertRaises(DownloadError):
            self.provider(DayKey(2022, 5))
        self.assertIsNone(self.cache.read_token())

    def test_other_failures_keep_token(self) -> None:
        self.downloader.download.side_effect = DownloadError("later", status_code=404)
        with self.assertRaises(DownloadError):
            self.provider(DayKey(2022, 5))
        self.assertEqual(self.cache.read_token(), TOKEN)

    def test_cache_write_failure_still_returns_text(self) -> None:
        self.downloader.download.return_value = "abc\n"
        with mock.patch.object(
            InputCache, "write_input", side_effect=InputCacheError("disk full")
        ):
            self.assertEqual(self.provider(DayKey(2022, 5)), "abc")

    def test_close_releases_downloader(self) -> None:
        self.provider.close()
        self.downloader.close.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
