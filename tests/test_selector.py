"""Tests for the fzf and builtin directory pickers."""

import questionary

from tsm.selector import (
    build_directory_choices,
    select_directory,
    select_directory_builtin,
)

PATHS = ["/code/alpha", "/code/beta", "/work/client"]


class TestSelectDirectory:
    def test_pipes_newline_joined_candidates(self, fake_runner):
        select_directory(PATHS, fake_runner)

        call = fake_runner.calls[0]
        assert call["command"] == ["fzf"]
        assert call["input"] == "/code/alpha\n/code/beta\n/work/client"

    def test_returns_stripped_selection(self, make_runner):
        runner = make_runner(stdout={"fzf": "/code/beta\n"})
        assert select_directory(PATHS, runner) == "/code/beta"

    def test_empty_output_is_no_selection(self, make_runner):
        runner = make_runner(stdout={"fzf": "\n"})
        assert select_directory(PATHS, runner) is None

    def test_non_zero_exit_is_no_selection(self, make_runner):
        """fzf exits 130 on Esc/Ctrl-C and 1 on no match."""
        runner = make_runner(returncodes={"fzf": 130}, stdout={"fzf": "/code/beta"})
        assert select_directory(PATHS, runner) is None

    def test_missing_fzf_is_no_selection(self, make_runner):
        runner = make_runner(missing=["fzf"])
        assert select_directory(PATHS, runner) is None

    def test_custom_command(self, make_runner):
        runner = make_runner(stdout={"sk": "/work/client"})
        assert select_directory(PATHS, runner, command=["sk"]) == "/work/client"
        assert runner.commands == [["sk"]]


class TestBuildDirectoryChoices:
    def test_separator_per_parent(self):
        choices = build_directory_choices(PATHS)

        separators = [c for c in choices if isinstance(c, questionary.Separator)]
        assert [s.title for s in separators] == ["--- /code ---", "--- /work ---"]

    def test_choice_values_are_full_paths(self):
        choices = build_directory_choices(PATHS)

        picks = [c for c in choices if not isinstance(c, questionary.Separator)]
        assert [c.title for c in picks] == ["alpha", "beta", "client"]
        assert [c.value for c in picks] == PATHS


class _FakeQuestion:
    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


class TestSelectDirectoryBuiltin:
    def test_returns_answer(self, monkeypatch):
        monkeypatch.setattr(
            questionary, "select", lambda *a, **kw: _FakeQuestion("/work/client")
        )
        assert select_directory_builtin(PATHS) == "/work/client"

    def test_cancel_is_no_selection(self, monkeypatch):
        monkeypatch.setattr(questionary, "select", lambda *a, **kw: _FakeQuestion(None))
        assert select_directory_builtin(PATHS) is None

    def test_no_candidates_skips_prompt(self, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("prompt should not be shown")

        monkeypatch.setattr(questionary, "select", fail)
        assert select_directory_builtin([]) is None
