"""USTRING test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module/class/function.
- contract/  : Shared behavior enforced across every transcoder adapter.
- e2e/       : The ``ustring`` CLI driven through Click's test runner.
- helpers/   : Shared utilities (no tests here).

General guidance
- Prefer fakes over mocks at the transcoder boundary.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
