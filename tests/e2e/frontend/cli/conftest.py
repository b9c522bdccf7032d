"""Fixtures for end-to-end CLI tests.

Every invocation runs inside an isolated filesystem with the flight recorder
pointed at a local file, and with the USTRING environment reset so the host
configuration cannot leak into expectations.
"""

from collections.abc import Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from ustring.entrypoints.cli.main import ustring

# pylint: disable=redefined-outer-name

LOG_FILE = "flight_recorder.log"


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def invoke(runner: CliRunner, fs) -> Callable[..., Result]:  # pylint: disable=unused-argument
    """Invoke the ``ustring`` group with a clean, test-local environment."""

    def _invoke(
        args: Sequence[str],
        env: dict[str, str] | None = None,
        input: bytes | str | None = None,  # pylint: disable=redefined-builtin
    ) -> Result:
        base_env = {
            "USTRING_LOG_PATH": LOG_FILE,
            "USTRING_TRANSCODER": "codecs",
            "USTRING_HOST_BYTE_ORDER": "little",
        }
        base_env.update(env or {})
        return runner.invoke(ustring, list(args), env=base_env, input=input)

    return _invoke


@pytest.fixture
def log_file() -> str:
    """Flight recorder path used by `invoke`, relative to the isolated filesystem."""
    return LOG_FILE
