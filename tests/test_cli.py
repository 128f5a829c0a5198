import os
import subprocess
import sys
from pathlib import Path

import pytest

from xo.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, **env: str) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "xo.cli"]
    full_env = dict(os.environ)
    full_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), full_env.get("PYTHONPATH")]))
    full_env.update(env)
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, env=full_env)


def test_cli_help_smoke(tmp_path: Path):
    for args in (
        ["--help"],
        ["show", "--help"],
        ["symmetry", "--help"],
        ["replay", "--help"],
    ):
        r = _run_cli(args, cwd=tmp_path)
        assert r.returncode == 0
        assert r.stdout or r.stderr


def test_cli_show_and_symmetry(tmp_path: Path):
    r = _run_cli(["show", "--board", "111220000"], cwd=tmp_path)
    assert r.returncode == 0
    s = r.stdout + r.stderr
    assert "winner=x" in s and "valid=True" in s
    assert "x  x  x" in r.stdout

    r = _run_cli(["symmetry", "--board", "100020000"], cwd=tmp_path)
    assert r.returncode == 0
    assert "canonical_form=" in r.stdout + r.stderr


def test_cli_style_from_environment(tmp_path: Path):
    r = _run_cli(["show", "--board", "100000000"], cwd=tmp_path, XO_STYLE="emoji")
    assert r.returncode == 0
    assert "❌" in r.stdout
    r = _run_cli(["show", "--board", "100000000", "--style", "ascii"], cwd=tmp_path, XO_STYLE="emoji")
    assert "❌" not in r.stdout


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x"])
def test_cli_error_invalid_boards(bad: str):
    assert main(["show", "--board", bad]) == 2
    assert main(["symmetry", "--board", bad]) == 2


def test_cli_error_invalid_counts():
    assert main(["symmetry", "--board", "111000000"]) == 2


def test_cli_symmetry_stdin(tmp_path: Path):
    r = subprocess.run(
        [sys.executable, "-m", "xo.cli", "symmetry", "--stdin"],
        cwd=tmp_path,
        input="100000000\n\nbad\n111000000\n010000000\n",
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC)},
    )
    assert r.returncode == 0
    lines = r.stdout.strip().splitlines()
    assert lines[0] == "board,canonical_form,orbit_size,canonical_op"
    assert len(lines) == 3
    assert lines[1].startswith("100000000,")


def test_cli_replay(caplog):
    with caplog.at_level("INFO"):
        assert main(["replay", "--moves", "aa,ba,bb,ca,cc"]) == 0
    assert any("winner=x" in r.getMessage() for r in caplog.records)
    assert main(["replay", "--moves", "aa,aa"]) == 2
    assert main(["replay", "--moves", "aa,aa", "--unchecked"]) == 0
    assert main(["replay", "--moves", "aa,zz"]) == 2
    assert main(["replay", "--moves", "\u00b2"]) == 2
    assert main(["replay", "--moves", "4,0,8"]) == 0
