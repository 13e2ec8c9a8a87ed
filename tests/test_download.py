import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from aocsolver.download import BASE_URL, DownloadError, Downloader


def _response(body):
    opened = MagicMock()
    opened.__enter__.return_value.read.return_value = body
    return opened


def test_reads_cached_input(tmp_path):
    (tmp_path / "2023" / "4").parent.mkdir(parents=True)
    (tmp_path / "2023" / "4").write_text("cached input", encoding="utf-8")
    downloader = Downloader("placeholder", tmp_path)
    with patch("urllib.request.urlopen") as urlopen:
        assert downloader.day(2023, 4) == "cached input"
        assert urlopen.call_count == 0


def test_fetches_and_caches(tmp_path):
    cookie = "placeholder"
    downloader = Downloader(cookie, tmp_path)
    with patch("urllib.request.urlopen", return_value=_response(b"1\n2\n")) as urlopen:
        assert downloader.day(2019, 1) == "1\n2\n"
        request = urlopen.call_args[0][0]

    assert request.full_url == f"{BASE_URL}/2019/day/1/input"
    assert request.get_header("Cookie") == cookie
    assert (tmp_path / "2019" / "1").read_text(encoding="utf-8") == "1\n2\n"

    with patch("urllib.request.urlopen") as urlopen:
        assert downloader.day(2019, 1) == "1\n2\n"
        assert urlopen.call_count == 0


def test_fetch_failure_raises(tmp_path):
    downloader = Downloader("placeholder", tmp_path)
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("down")):
        with pytest.raises(DownloadError):
            downloader.day(2023, 2)
    assert not (tmp_path / "2023" / "2").exists()


def test_from_env_reads_variable(monkeypatch):
    cookie = "placeholder"
    monkeypatch.setenv("SESSION_COOKIE", cookie)
    assert Downloader.from_env().cookie == cookie


def test_from_env_reads_dotenv_file(monkeypatch, tmp_path):
    cookie = "placeholder"
    monkeypatch.setenv("SESSION_COOKIE", "secret")
    monkeypatch.delenv("SESSION_COOKIE")
    (tmp_path / ".env").write_text(f"SESSION_COOKIE={cookie}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert Downloader.from_env().cookie == cookie


def test_from_env_missing(monkeypatch, tmp_path):
    monkeypatch.setenv("SESSION_COOKIE", "secret")
    monkeypatch.delenv("SESSION_COOKIE")
    monkeypatch.chdir(tmp_path)
    with pytest.raises(DownloadError):
        Downloader.from_env()