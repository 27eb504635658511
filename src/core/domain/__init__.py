"""Domain models and errors.

Pure data structures (pydantic v2) and the exception hierarchy. The domain
knows nothing about HTTP, the CLI or the filesystem layout.
"""
