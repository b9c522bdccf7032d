"""Interfaces (application boundary) for USTRING.

Defines framework-free contracts shared by the service layer and adapters,
currently the transcoder port used to turn UTF-8 bytes into UTF-16 units.

Dependency rule: this package is independent: do not import from any
`ustring.*` modules. It may be imported by `ustring.service_layer`,
`ustring.adapters`, and `ustring.bootstrap`.
"""
