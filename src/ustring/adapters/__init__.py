"""Adapters (infrastructure) for USTRING.

Provide concrete implementations of the interfaces, such as transcoders
backed by the Python codec registry.

Dependency rule: may import `ustring.interfaces` and `ustring.domain`; the
domain must not import this package.
"""
