from __future__ import annotations

import pytest

from core.composer import CREDITS_BANNER, compose

BANNER = b"# Generated by gitignite\n# Template: https://github.com/github/gitignore\n\n"


@pytest.mark.parametrize("payload", [b"", b"*.log\n", b"\x00\xff binary\r\n", BANNER])
def test_no_credits_is_identity(payload: bytes) -> None:
    assert compose(payload, no_credits=True) == payload


@pytest.mark.parametrize("payload", [b"", b"*.log\n", b"node_modules/\ndist/\n"])
def test_credits_banner_is_prepended(payload: bytes) -> None:
    composed = compose(payload, no_credits=False)
    assert composed == BANNER + payload
    assert composed.startswith(CREDITS_BANNER)


def test_banner_added_once_per_call() -> None:
    payload = b"*.pyc\n"
    first = compose(payload, no_credits=False)
    assert first == compose(payload, no_credits=False)
    assert first.count(b"# Generated by gitignite") == 1
