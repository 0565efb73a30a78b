"""Tests for the interactive session surface and settings."""
import logging

import pytest

from conftest import ScriptedPresenter
from cli import CLI, play_welcome_sound
from config import Settings, load_env_file
from presenter import Presenter


def test_session_runs_until_exit():
    presenter = ScriptedPresenter(["Alice", "how are you", "", "EXIT", "phishing"])
    session = CLI(presenter).run()
    assert session.user_name == "Alice"
    assert "Welcome, Alice!" in presenter.output
    assert [e.description for e in session.activity.list()] == [
        "Responded with static response for: 'how are you'"]
    assert presenter.inputs == ["phishing"]
    assert "Thank you for using CyberGuardian, Alice!" in presenter.output
    assert presenter.prompts[-1] == "\nAlice: "


def test_closed_input_ends_the_session():
    presenter = ScriptedPresenter(["Bob", "phishing"])
    session = CLI(presenter).run()
    assert session.state.current_topic == "phishing"
    assert "Stay safe, stay smart. Press Enter to exit." in presenter.output


def test_none_read_is_not_fatal():
    presenter = ScriptedPresenter(["Cara", None, "exit"])
    CLI(presenter).run()
    assert "It seems like something went wrong with the input." in presenter.output


def test_blank_name_is_displayed_as_friend():
    presenter = ScriptedPresenter(["  ", "exit"])
    session = CLI(presenter).run()
    assert session.user_name == ""
    assert "Welcome, friend!" in presenter.output


def test_missing_welcome_sound_is_reported(tmp_path):
    presenter = ScriptedPresenter()
    assert play_welcome_sound(str(tmp_path / "missing.wav"), presenter) is False
    assert presenter.errors and presenter.errors[0].startswith("Audio file not found")
    assert play_welcome_sound(None, presenter) is False
    assert len(presenter.errors) == 1


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CYBERGUARDIAN_TYPING_DELAY", "5")
    monkeypatch.setenv("CYBERGUARDIAN_LOG_LEVEL", "debug")
    monkeypatch.setenv("CYBERGUARDIAN_WELCOME_SOUND", "welcome.wav")
    settings = Settings.load()
    assert settings.typing_delay_ms == 5
    assert settings.log_level == "DEBUG"
    assert settings.welcome_sound == "welcome.wav"


def test_invalid_settings_fall_back(monkeypatch, caplog):
    monkeypatch.setenv("CYBERGUARDIAN_TYPING_DELAY", "fast")
    monkeypatch.setenv("CYBERGUARDIAN_LOG_LEVEL", "chatty")
    monkeypatch.delenv("CYBERGUARDIAN_WELCOME_SOUND", raising=False)
    with caplog.at_level(logging.WARNING):
        settings = Settings.load()
    assert settings.typing_delay_ms == 30
    assert settings.log_level == "WARNING"
    assert "CYBERGUARDIAN_TYPING_DELAY" in caplog.text


def test_env_file_parsing(tmp_path):
    env = tmp_path / ".env"
    env.write_text("# palette\nCYBERGUARDIAN_PRIMARY=#112233\nOTHER=1\nbroken line\nCYBERGUARDIAN_TYPING_DELAY = '0'\n")
    assert load_env_file(env) == {"CYBERGUARDIAN_PRIMARY": "#112233", "CYBERGUARDIAN_TYPING_DELAY": "0"}
    assert load_env_file(tmp_path / "absent.env") == {}


def test_presenter_interface_is_abstract():
    with pytest.raises(TypeError):
        Presenter()
