from pathlib import Path
from typing import Callable
from typing import Sequence

import pytest
from pytest import MonkeyPatch
from typer.testing import CliRunner
from typer.testing import Result

from anaconda_qr.cli import app

CLIInvoker = Callable[[Sequence[str]], Result]


@pytest.fixture()
def tmp_cwd(monkeypatch: MonkeyPatch, tmp_path: Path) -> Path:
    """Create & return a temporary directory after setting current working directory to it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def config_toml(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Point the anaconda config file at an empty temporary path."""
    config_file = tmp_path / "config.toml"
    monkeypatch.setenv("ANACONDA_CONFIG_TOML", str(config_file))
    for key in (
        "ANACONDA_QR_ERROR_CORRECTION",
        "ANACONDA_QR_BOOST_ECL",
        "ANACONDA_QR_MIN_VERSION",
        "ANACONDA_QR_MAX_VERSION",
        "ANACONDA_QR_MASK",
        "ANACONDA_QR_QUIET_ZONE",
        "ANACONDA_QR_INVERT",
        "ANACONDA_QR_PARALLEL_MASKS",
    ):
        monkeypatch.delenv(key, raising=False)
    return config_file


@pytest.fixture()
def invoke_cli(tmp_cwd: Path) -> CLIInvoker:
    """Returns a function, which can be used to call the CLI from within a temporary directory."""
    runner = CliRunner()

    def f(args: Sequence[str]) -> Result:
        return runner.invoke(app, list(args))

    return f
