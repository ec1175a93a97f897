"""Tests for domain/auth.py: Slack signature verification."""

import hmac
import time
from unittest.mock import patch

import pytest

from caramelbot.domain.auth import (
    REPLAY_WINDOW_SECONDS,
    compute_signature,
    verify_slack_request,
)

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
BODY = "token=xyzz0WbapA4vBCDEFasx0q6G&command=%2Fweather&text=94070"


def _headers(timestamp, body=BODY, secret=SECRET):
    return {
        "x-slack-request-timestamp": str(timestamp),
        "x-slack-signature": compute_signature(secret, str(timestamp), body),
    }


class TestComputeSignature:
    def test_format(self):
        sig = compute_signature(SECRET, "1531420618", BODY)
        assert sig.startswith("v0=")
        assert len(sig) == 3 + 64

    def test_deterministic(self):
        assert compute_signature(SECRET, "1", BODY) == compute_signature(SECRET, "1", BODY)

    def test_sensitive_to_every_body_character(self):
        original = compute_signature(SECRET, "1", BODY)
        for i in range(len(BODY)):
            flipped = BODY[:i] + ("A" if BODY[i] != "A" else "B") + BODY[i + 1:]
            assert compute_signature(SECRET, "1", flipped) != original

    def test_sensitive_to_secret_and_timestamp(self):
        base = compute_signature(SECRET, "1", BODY)
        assert compute_signature("other", "1", BODY) != base
        assert compute_signature(SECRET, "2", BODY) != base


class TestVerify:
    def test_valid_request(self):
        now = int(time.time())
        assert verify_slack_request(_headers(now), BODY, "", SECRET, now=now) is True

    def test_bytes_body(self):
        now = int(time.time())
        assert verify_slack_request(_headers(now), BODY.encode(), "", SECRET, now=now) is True

    def test_case_insensitive_plain_dict(self):
        now = 1_700_000_000
        headers = {
            "X-Slack-Request-Timestamp": str(now),
            "X-Slack-Signature": compute_signature(SECRET, str(now), BODY),
        }
        assert verify_slack_request(headers, BODY, "", SECRET, now=now) is True

    def test_wrong_secret(self):
        now = 1_700_000_000
        headers = _headers(now, secret="not-the-secret")
        assert verify_slack_request(headers, BODY, "", SECRET, now=now) is False

    def test_tampered_body(self):
        now = 1_700_000_000
        assert verify_slack_request(_headers(now), BODY + "x", "", SECRET, now=now) is False

    @pytest.mark.parametrize("skew", [REPLAY_WINDOW_SECONDS + 1, -(REPLAY_WINDOW_SECONDS + 1), 86400])
    def test_stale_timestamp_rejected_even_with_valid_signature(self, skew):
        ts = 1_700_000_000
        assert verify_slack_request(_headers(ts), BODY, "", SECRET, now=ts + skew) is False

    def test_edge_of_window_accepted(self):
        ts = 1_700_000_000
        now = ts + REPLAY_WINDOW_SECONDS
        assert verify_slack_request(_headers(ts), BODY, "", SECRET, now=now) is True

    def test_missing_signature(self):
        now = 1_700_000_000
        headers = {"x-slack-request-timestamp": str(now)}
        assert verify_slack_request(headers, BODY, "", SECRET, now=now) is False

    def test_missing_timestamp(self):
        now = 1_700_000_000
        headers = {"x-slack-signature": compute_signature(SECRET, str(now), BODY)}
        assert verify_slack_request(headers, BODY, "", SECRET, now=now) is False

    def test_malformed_timestamp(self):
        headers = {"x-slack-request-timestamp": "yesterday", "x-slack-signature": "v0=abc"}
        assert verify_slack_request(headers, BODY, "", SECRET, now=0) is False

    def test_missing_secret_rejects(self):
        now = 1_700_000_000
        assert verify_slack_request(_headers(now, secret=""), BODY, "", "", now=now) is False

    def test_length_mismatch_skips_comparator(self):
        now = 1_700_000_000
        headers = {"x-slack-request-timestamp": str(now), "x-slack-signature": "v0=short"}
        with patch("caramelbot.domain.auth.hmac.compare_digest") as compare:
            assert verify_slack_request(headers, BODY, "", SECRET, now=now) is False
        compare.assert_not_called()

    def test_equal_length_uses_comparator(self):
        now = 1_700_000_000
        with patch(
            "caramelbot.domain.auth.hmac.compare_digest", wraps=hmac.compare_digest
        ) as compare:
            assert verify_slack_request(_headers(now), BODY, "", SECRET, now=now) is True
        compare.assert_called_once()

    def test_non_ascii_signature_is_a_failure_not_an_error(self):
        now = 1_700_000_000
        headers = {
            "x-slack-request-timestamp": str(now),
            "x-slack-signature": "v0=" + "é" * 64,
        }
        assert verify_slack_request(headers, BODY, "", SECRET, now=now) is False

    def test_fallback_body_used_without_raw_body(self):
        now = 1_700_000_000
        fallback = '{"type":"event_callback"}'
        headers = _headers(now, body=fallback)
        assert verify_slack_request(headers, None, fallback, SECRET, now=now) is True
        assert verify_slack_request(headers, b"", fallback, SECRET, now=now) is True

    def test_raw_body_wins_over_fallback(self):
        now = 1_700_000_000
        raw = '{"b": 1, "a": 2}'
        reserialized = '{"b":1,"a":2}'
        headers = _headers(now, body=raw)
        assert verify_slack_request(headers, raw, reserialized, SECRET, now=now) is True
