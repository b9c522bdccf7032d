"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; the only external service, the transcoder, is replaced by
  fakes where its behavior matters.
- Keep tests small, fast, and deterministic.
"""
