"""Tests for applying env files to an environment.

The loader writes every pair in file order, so later duplicates win.
Most tests pass a plain dict as the target so the real process
environment is left alone; the ``os.environ`` tests use monkeypatch to
clean up after themselves.
"""

import io
import os
from pathlib import Path

import pytest

from envfile.envs import Envs
from envfile.errors import EnvironmentApplyError, KeyWhitespaceError
from envfile.loader import load, load_envs, load_file

TESTDATA = Path(__file__).parent / "testdata"


class _RejectingEnviron(dict[str, str]):
    """A target that refuses one key, like a picky platform."""

    def __init__(self, bad_key: str) -> None:
        super().__init__()
        self.bad_key = bad_key

    def __setitem__(self, key: str, value: str) -> None:
        if key == self.bad_key:
            msg = f"illegal environment variable name: {key}"
            raise ValueError(msg)
        super().__setitem__(key, value)


class TestLoadEnvs:
    """Verify load_envs writes pairs into the target mapping."""

    def test_sets_all_pairs(self) -> None:
        """Every pair should end up in the target."""
        target: dict[str, str] = {}
        load_envs(Envs(["A=1", "B=2"]), target)
        assert target == {"A": "1", "B": "2"}

    def test_later_duplicate_wins(self) -> None:
        """The last assignment of a key is the one that sticks."""
        target: dict[str, str] = {}
        load_envs(Envs(["A=1", "A=2"]), target)
        assert target["A"] == "2"

    def test_overwrites_existing(self) -> None:
        """Values already in the target are replaced."""
        target = {"A": "old", "KEEP": "me"}
        load_envs(Envs(["A=new"]), target)
        assert target == {"A": "new", "KEEP": "me"}

    def test_failure_stops_without_rollback(self) -> None:
        """Assignments before the rejected one stay applied."""
        target = _RejectingEnviron("BAD")
        with pytest.raises(EnvironmentApplyError) as exc:
            load_envs(Envs(["A=1", "BAD=x", "C=3"]), target)
        assert exc.value.key == "BAD"
        assert isinstance(exc.value.__cause__, ValueError)
        assert dict(target) == {"A": "1"}

    def test_sets_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a target, os.environ is updated."""
        monkeypatch.delenv("ENVFILE_TEST_A", raising=False)
        monkeypatch.delenv("ENVFILE_TEST_B", raising=False)
        envs = Envs(["ENVFILE_TEST_A=aaaa", "ENVFILE_TEST_B= b b"])
        try:
            load_envs(envs)
            for key, value in envs.pairs():
                assert os.environ[key] == value
        finally:
            for key, _ in envs.pairs():
                os.environ.pop(key, None)

    def test_platform_rejects_nul(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """os.environ refuses NUL characters; the error is wrapped."""
        monkeypatch.setenv("ENVFILE_TEST_NUL", "before")
        with pytest.raises(EnvironmentApplyError) as exc:
            load_envs(Envs(["ENVFILE_TEST_NUL=a\x00b"]))
        assert exc.value.key == "ENVFILE_TEST_NUL"
        assert os.environ["ENVFILE_TEST_NUL"] == "before"

    def test_error_message_includes_platform_reason(self) -> None:
        """The platform's own explanation is part of the message."""
        target = _RejectingEnviron("BAD")
        with pytest.raises(EnvironmentApplyError) as exc:
            load_envs(Envs(["BAD=x"]), target)
        assert exc.value.reason == "illegal environment variable name: BAD"
        assert str(exc.value) == (
            "cannot set environment variable 'BAD': illegal environment variable name: BAD"
        )


class TestLoad:
    """Verify the parse-then-apply helpers."""

    def test_load_stream(self) -> None:
        """load should parse a stream and apply it."""
        target: dict[str, str] = {}
        envs = load(io.BytesIO(b"# c\nFOO=foo\nFOO=bar\n"), target)
        assert list(envs) == ["FOO=foo", "FOO=bar"]
        assert target == {"FOO": "bar"}

    def test_load_stream_parse_error_applies_nothing(self) -> None:
        """A malformed stream must not touch the target."""
        target: dict[str, str] = {}
        with pytest.raises(KeyWhitespaceError):
            load(io.BytesIO(b"A=1\nB B=2\n"), target)
        assert target == {}

    def test_load_file(self) -> None:
        """load_file should parse a file and apply it."""
        target: dict[str, str] = {}
        load_file(TESTDATA / "test01.env", target)
        assert target == {"FOO": "foo", "BAR": " bar bar", "BAZ": "baz # baz"}

    def test_load_file_missing(self, tmp_path: Path) -> None:
        """A missing file raises the OS error and applies nothing."""
        target: dict[str, str] = {}
        with pytest.raises(FileNotFoundError):
            load_file(tmp_path / "missing.env", target)
        assert target == {}

    def test_load_file_into_os_environ(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """load_file with no target updates os.environ."""
        monkeypatch.setenv("ENVFILE_TEST_FILE", "before")
        path = tmp_path / ".env"
        path.write_text("ENVFILE_TEST_FILE=after\n", encoding="utf-8")
        load_file(path)
        assert os.environ["ENVFILE_TEST_FILE"] == "after"
