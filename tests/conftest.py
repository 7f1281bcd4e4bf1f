import pytest

from sxs_manifest.constants import EnvVars


@pytest.fixture(autouse=True)
def _clear_writer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep writer settings from the developer's shell out of the tests."""
    for name in (
        EnvVars.INDENT,
        EnvVars.INDENT_STRING,
        EnvVars.LINE_SEPARATOR,
        EnvVars.ENCODING,
    ):
        monkeypatch.delenv(name, raising=False)
