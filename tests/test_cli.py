"""Tests for the command-line entry point and jyutping lookup."""

import pytest

from meowdict import cli, jyutping
from meowdict.errors import NotFoundError


@pytest.fixture
def captured(monkeypatch):
    calls = []

    def fake_run_command(tokens, session, queries=None):
        calls.append((list(tokens), session, queries))

    monkeypatch.setattr(cli, "run_command", fake_run_command)
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return calls


def test_one_shot_lookup(captured):
    assert cli.main(["貓", "狗"]) == 0
    tokens, session, _ = captured[0]
    assert tokens == ["貓", "狗"]
    assert session.input_conversion_enabled is False


def test_one_shot_flags_become_tokens(captured):
    cli.main(["-i", "-r", "-t", "汉字"])
    assert captured[0][0] == ["--input-s2t", "--result-t2s", "--translation", "汉字"]


def test_translation_and_jyutping_are_exclusive(captured):
    with pytest.raises(SystemExit):
        cli.main(["-t", "-j", "貓"])


def test_no_words_starts_console(monkeypatch, captured):
    started = []
    monkeypatch.setattr(cli.MeowdictConsole, "create_console", lambda self: started.append(True))
    assert cli.main([]) == 0
    assert started == [True]
    assert captured == []


class FakeTerminal:
    def isatty(self):
        return True

    def write(self, text):
        return len(text)

    def flush(self):
        pass


def test_flags_without_words_is_usage_error(captured, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-t"])
    assert exc_info.value.code == 2
    assert "need at least one word" in capsys.readouterr().err
    assert captured == []


def test_color_on_terminal(monkeypatch, captured):
    monkeypatch.setattr(cli.sys, "stdout", FakeTerminal())
    cli.main(["貓"])
    assert captured[0][2].color is True


def test_no_color_option(monkeypatch, captured):
    monkeypatch.setattr(cli.sys, "stdout", FakeTerminal())
    cli.main(["--no-color", "貓"])
    assert captured[0][2].color is False


def test_no_color_when_not_a_terminal(captured):
    cli.main(["貓"])
    assert captured[0][2].color is False


def test_jyutping_lookup(monkeypatch):
    monkeypatch.setattr(
        jyutping.pycantonese,
        "characters_to_jyutping",
        lambda chars: [("廣東話", "gwong2dung1waa2")],
    )
    result = jyutping.get_jyutping("廣東話")
    assert result.word == "廣東話"
    assert result.segments == (("廣東話", "gwong2dung1waa2"),)


def test_jyutping_unknown_word(monkeypatch):
    monkeypatch.setattr(
        jyutping.pycantonese,
        "characters_to_jyutping",
        lambda chars: [("xyz", None)],
    )
    with pytest.raises(NotFoundError):
        jyutping.get_jyutping("xyz")
