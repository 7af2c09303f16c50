import responses

from hermesaxiom.downloader import ModelDownloader, verify_file

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
URL = "http://localhost/models/model.gguf"


def test_verify_file_matches_known_digest(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"abc")
    assert verify_file(path, ABC_SHA256) is True


def test_verify_file_rejects_wrong_digest(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"abd")
    assert verify_file(path, ABC_SHA256) is False


def test_verify_file_missing_file(tmp_path):
    assert verify_file(tmp_path / "absent.bin", ABC_SHA256) is False


def test_download_writes_file_and_creates_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "model.gguf"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"abc", status=200)
        result = ModelDownloader().download_model(URL, target, ABC_SHA256).result(timeout=10)
    assert result is True
    assert target.read_bytes() == b"abc"


def test_download_without_hash_succeeds(tmp_path):
    target = tmp_path / "model.gguf"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"weights", status=200)
        result = ModelDownloader().download_model(URL, str(target), None).result(timeout=10)
    assert result is True
    assert target.read_bytes() == b"weights"


def test_download_http_error_returns_false(tmp_path):
    target = tmp_path / "model.gguf"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"nope", status=404)
        result = ModelDownloader().download_model(URL, target, None).result(timeout=10)
    assert result is False
    assert not target.exists()


def test_download_hash_mismatch_returns_false(tmp_path):
    target = tmp_path / "model.gguf"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"tampered", status=200)
        result = ModelDownloader().download_model(URL, target, ABC_SHA256).result(timeout=10)
    assert result is False
    assert target.read_bytes() == b"tampered"


def test_existing_valid_file_skips_download(tmp_path):
    target = tmp_path / "model.gguf"
    target.write_bytes(b"abc")
    with responses.RequestsMock() as rsps:
        result = ModelDownloader().download_model(URL, target, ABC_SHA256).result(timeout=10)
        calls = len(rsps.calls)
    assert result is True
    assert calls == 0


def test_existing_invalid_file_is_replaced(tmp_path):
    target = tmp_path / "model.gguf"
    target.write_bytes(b"old")
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, URL, body=b"abc", status=200)
        result = ModelDownloader().download_model(URL, target, ABC_SHA256).result(timeout=10)
    assert result is True
    assert target.read_bytes() == b"abc"


def test_connection_failure_returns_false(tmp_path):
    target = tmp_path / "model.gguf"
    with responses.RequestsMock():
        result = ModelDownloader().download_model(URL, target, None).result(timeout=10)
    assert result is False
    assert not target.exists()