"""Pytest fixtures for FrontDesk tests."""

import builtins

import pytest


@pytest.fixture
def feed_input(monkeypatch):
    """Replace ``input`` with a scripted sequence of operator answers.

    Running past the end of the script raises EOFError, like a closed stdin.
    """

    def _feed(*answers):
        answers_iter = iter(str(a) for a in answers)

        def fake_input(prompt=""):
            print(prompt, end="")
            try:
                return next(answers_iter)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr(builtins, "input", fake_input)

    return _feed
