"""Adapters: I/O against the upstream template repository.

Each adapter implements a contract from `core.interfaces`.
"""
