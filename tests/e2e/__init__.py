"""End-to-end tests driving the ``ustring`` CLI through Click's test runner."""
