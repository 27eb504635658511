"""Final file composition."""

from __future__ import annotations

CREDITS_BANNER = (
    b"# Generated by gitignite\n"
    b"# Template: https://github.com/github/gitignore\n"
    b"\n"
)


def compose(payload: bytes, no_credits: bool) -> bytes:
    """Prepend the attribution banner unless `no_credits` is set."""

    if no_credits:
        return payload
    return CREDITS_BANNER + payload
