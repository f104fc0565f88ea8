"""Tests for credentials, request signing and header construction."""

import base64
import hashlib
import hmac
import json

import pytest

from veryfi.auth import Credentials, build_headers, current_timestamp, generate_signature


def _expected_signature(secret: str, payload: dict, timestamp: int) -> str:
    message = json.dumps({**payload, "timestamp": str(timestamp)}, separators=(",", ":"), ensure_ascii=False)
    digest = hmac.new(secret.encode(), message.encode(), hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class TestCredentials:
    def test_authorization_header_value(self):
        credentials = Credentials("cid", "secret", "jdoe", "key123")
        assert credentials.authorization == "apikey jdoe:key123"

    @pytest.mark.parametrize("field", ["client_id", "client_secret", "username", "api_key"])
    def test_empty_field_rejected(self, field):
        values = {"client_id": "c", "client_secret": "s", "username": "u", "api_key": "k"}
        values[field] = ""
        with pytest.raises(ValueError, match=f"{field} is required"):
            Credentials(**values)


class TestSignature:
    def test_matches_hmac_of_payload_with_timestamp(self):
        payload = {"page": 1, "page_size": 50}
        signature = generate_signature("secret", payload, 1700000000000)
        assert signature == _expected_signature("secret", payload, 1700000000000)

    def test_does_not_mutate_payload(self):
        payload = {"id": 42}
        generate_signature("secret", payload, 1)
        assert payload == {"id": 42}

    def test_changes_with_timestamp(self):
        assert generate_signature("secret", {}, 1) != generate_signature("secret", {}, 2)

    def test_changes_with_secret(self):
        assert generate_signature("a", {"x": 1}, 1) != generate_signature("b", {"x": 1}, 1)

    def test_non_ascii_signed_as_raw_utf8(self):
        message = '{"notes":"Café","timestamp":"1"}'.encode("utf-8")
        digest = hmac.new(b"secret", message, hashlib.sha256).digest()

        assert generate_signature("secret", {"notes": "Café"}, 1) == base64.b64encode(digest).decode()


class TestHeaders:
    def test_full_header_set(self):
        credentials = Credentials("cid", "secret", "jdoe", "key123")
        headers = build_headers(credentials, {"id": 7}, timestamp=1700000000000)

        assert headers == {
            "User-Agent": "Python Veryfi-Python/1.0.0",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Client-Id": "cid",
            "Authorization": "apikey jdoe:key123",
            "X-Veryfi-Request-Timestamp": "1700000000000",
            "X-Veryfi-Request-Signature": _expected_signature("secret", {"id": 7}, 1700000000000),
        }

    def test_default_timestamp_is_now_in_milliseconds(self):
        credentials = Credentials("cid", "secret", "jdoe", "key123")
        before = current_timestamp()
        headers = build_headers(credentials, {})
        after = current_timestamp()

        assert before <= int(headers["X-Veryfi-Request-Timestamp"]) <= after
        assert len(headers["X-Veryfi-Request-Timestamp"]) == 13
