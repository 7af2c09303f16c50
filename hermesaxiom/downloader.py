"""Background download of model files with SHA-256 verification."""

from __future__ import annotations

import hashlib
import os
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Optional, Union

import requests

PathLike = Union[str, "os.PathLike[str]"]

_CHUNK_SIZE = 1 << 20


def verify_file(file_path: PathLike, expected_hash: str) -> bool:
    """True if the SHA-256 hex digest of the file equals ``expected_hash``."""
    digest = hashlib.sha256()
    try:
        with open(file_path, "rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError:
        return False
    return digest.hexdigest() == expected_hash


class ModelDownloader:
    """Fetches model files on background threads."""

    def download_model(
        self,
        download_url: str,
        file_path: PathLike,
        file_hash: Optional[str] = None,
    ) -> "Future[bool]":
        """Start a download; the future resolves to True when the file is in place and valid."""
        future: "Future[bool]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = self._download(download_url, Path(file_path), file_hash)
            except BaseException as exc:  # handed to the caller through the future
                future.set_exception(exc)
            else:
                future.set_result(result)

        threading.Thread(target=run, daemon=True).start()
        return future

    @staticmethod
    def _download(download_url: str, path: Path, file_hash: Optional[str]) -> bool:
        if path.exists() and file_hash and verify_file(path, file_hash):
            return True

        try:
            response = requests.get(download_url)
        except requests.RequestException:
            return False
        if response.status_code != 200:
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)

        if file_hash:
            return verify_file(path, file_hash)
        return True