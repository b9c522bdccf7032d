"""Entrypoints (inbound adapters) for USTRING.

Expose the library to the outside world through the ``ustring`` CLI. Parse
and validate inputs, call the service layer, and present results.

Dependency rule: may import `ustring.service_layer` and `ustring.bootstrap`;
avoid importing `ustring.adapters` directly.
"""
