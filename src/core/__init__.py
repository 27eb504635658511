"""gitignite core: domain, pure logic and services."""

__version__ = "0.3.0"
