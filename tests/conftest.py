import pytest

from veryfi import VeryfiClient


@pytest.fixture
def client():
    client = VeryfiClient("vrf_client", "secret", "jdoe", "key123")
    yield client
    client.close()


@pytest.fixture
def receipt_file(tmp_path):
    path = tmp_path / "receipt.jpg"
    path.write_bytes(b"fake image bytes")
    return path
