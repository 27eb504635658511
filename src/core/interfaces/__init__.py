"""Interfaces of the Core.

Contracts (Protocol) implemented by concrete adapters, so services depend on
abstractions and can be tested with in-memory doubles.
"""
