"""Pytest configuration and fixtures for tsm tests."""

import subprocess

import pytest

from tsm.runner import ProcessRunner


class FakeRunner(ProcessRunner):
    """Stands in for ProcessRunner: records commands instead of spawning them.

    returncodes maps a program/subcommand key ("fzf", "tmux has-session", ...)
    to the exit status to report; stdout maps the same keys to captured output.
    """

    def __init__(self, returncodes=None, stdout=None, missing=()):
        super().__init__()
        self.returncodes = returncodes or {}
        self.stdout = stdout or {}
        self.missing = set(missing)
        self.calls = []

    @staticmethod
    def key(command):
        if command[0] == "tmux" and len(command) > 1:
            return f"tmux {command[1]}"
        return command[0]

    def run(self, command, io=None, input=None, capture=False):
        command = [str(part) for part in command]
        self.calls.append({"command": command, "io": io, "input": input})
        if command[0] in self.missing:
            raise FileNotFoundError(command[0])
        key = self.key(command)
        return subprocess.CompletedProcess(
            command,
            self.returncodes.get(key, 0),
            stdout=self.stdout.get(key, "") if capture else None,
        )

    @property
    def commands(self):
        return [call["command"] for call in self.calls]

    def tmux_subcommands(self):
        return [c[1] for c in self.commands if c[0] == "tmux"]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory for runners with scripted exit codes and output."""
    return FakeRunner


@pytest.fixture(autouse=True)
def outside_tmux(monkeypatch):
    """Run every test as if started from a plain terminal."""
    monkeypatch.delenv("TMUX", raising=False)
    monkeypatch.delenv("TSM_CONFIG", raising=False)


@pytest.fixture
def projects(tmp_path):
    """Two base directories with a few project folders and a stray file."""
    code = tmp_path / "code"
    work = tmp_path / "work"
    for d in ["alpha", "beta.js", "node_modules", "zeta"]:
        (code / d).mkdir(parents=True)
    (code / "notes.txt").write_text("not a directory")
    for d in ["client-site", "archive.old"]:
        (work / d).mkdir(parents=True)
    return {"code": code, "work": work}
