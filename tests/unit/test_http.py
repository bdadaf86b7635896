"""Tests for response decoding."""

import pytest

from endpoint_harness.errors import CheckExecutionFailure
from endpoint_harness.http import HttpResponse, decode_body


@pytest.mark.parametrize(
    ("body", "charset", "expected"),
    [
        (b'{"ok": true}', None, '{"ok": true}'),
        (b"caf\xe9", "latin-1", "café"),
        (b"\xff\xfe\xfa", None, "���"),
        (b"ok", "not-a-codec", "ok"),
    ],
)
def test_decode_body(body: bytes, charset: str | None, expected: str) -> None:
    """Decoding never raises, whatever the body or declared charset."""
    assert decode_body(body, charset) == expected


def test_json_of_replaced_body_raises_execution_failure() -> None:
    """A lossy body only fails a check that reads it as JSON."""
    response = HttpResponse(status=200, text=decode_body(b"\xff\xfe\xfa", None))

    assert response.ok
    with pytest.raises(CheckExecutionFailure, match="malformed JSON"):
        response.json()
