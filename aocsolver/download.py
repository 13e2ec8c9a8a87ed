"""Fetching and caching puzzle inputs."""

from __future__ import annotations

import os
import urllib.error
import urllib.request
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

BASE_URL = "https://adventofcode.com"
USER_AGENT = "aocsolver/0.1"


class DownloadError(RuntimeError):
    """Raised when an input cannot be read, fetched or stored."""


class Downloader:
    """Gets puzzle inputs, keeping a copy under `input_dir/<year>/<day>`."""

    def __init__(self, cookie: str, input_dir: str | os.PathLike[str] = "input") -> None:
        self.cookie = cookie
        self.input_dir = Path(input_dir)

    @classmethod
    def from_env(cls) -> Downloader:
        """Build a downloader from SESSION_COOKIE, loading a .env file if one is found."""
        load_dotenv(find_dotenv(usecwd=True))
        try:
            cookie = os.environ["SESSION_COOKIE"]
        except KeyError:
            raise DownloadError("unable to read SESSION_COOKIE") from None
        return cls(cookie)

    def day(self, year: int, day: int) -> str:
        """Return the input for a day, from the local copy if present."""
        path = self.input_dir / str(year) / str(day)
        if path.exists():
            try:
                with path.open(encoding="utf-8", newline="") as handle:
                    return handle.read()
            except OSError as exc:
                raise DownloadError("cannot open input") from exc

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DownloadError("unable to create directory") from exc

        text = self._fetch(year, day)

        try:
            with path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise DownloadError("unable to write to file") from exc
        return text

    def _fetch(self, year: int, day: int) -> str:
        request = urllib.request.Request(
            f"{BASE_URL}/{year}/day/{day}/input",
            headers={"Cookie": self.cookie, "User-Agent": USER_AGENT},
        )
        try:
            with urllib.request.urlopen(request) as response:
                body = response.read()
        except urllib.error.URLError as exc:
            raise DownloadError("failed to fetch input") from exc
        try:
            return body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DownloadError("failed to get text from response body") from exc