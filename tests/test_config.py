from pathlib import Path

import pytest

from designbible.config import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_INPUT_FILE,
    load_settings,
)

ENV_VARS = (
    "DESIGNBIBLE_INPUT",
    "DESIGNBIBLE_IMAGE_DIR",
    "DESIGNBIBLE_OUTPUT",
    "DESIGNBIBLE_SET_TITLE",
    "DESIGNBIBLE_REQUEST_DELAY_S",
    "GEMINI_API_KEY",
    "GEMINI_TEXT_API_KEY",
    "GEMINI_IMAGE_MODEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    settings = load_settings()
    assert settings.input_file == Path(DEFAULT_INPUT_FILE)
    assert settings.image_model == DEFAULT_IMAGE_MODEL
    assert settings.request_delay_s == 1.0
    assert settings.api_key is None


def test_environment(monkeypatch):
    monkeypatch.setenv("DESIGNBIBLE_INPUT", "bible.txt")
    monkeypatch.setenv("GEMINI_TEXT_API_KEY", "text-key")
    monkeypatch.setenv("DESIGNBIBLE_REQUEST_DELAY_S", "2.5")
    settings = load_settings()
    assert settings.input_file == Path("bible.txt")
    assert settings.api_key == "text-key"
    assert settings.request_delay_s == 2.5


def test_dotenv_file(tmp_path, monkeypatch):
    # register the variable so monkeypatch unsets it after load_dotenv
    monkeypatch.setenv("DESIGNBIBLE_SET_TITLE", "placeholder")
    monkeypatch.delenv("DESIGNBIBLE_SET_TITLE")
    (tmp_path / ".env").write_text("DESIGNBIBLE_SET_TITLE=Shards Reborn\n", encoding="utf-8")
    assert load_settings().set_title == "Shards Reborn"


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("DESIGNBIBLE_OUTPUT", "env.html")
    settings = load_settings(output_file="cli.html", image_dir=None)
    assert settings.output_file == Path("cli.html")
    assert settings.image_dir == Path("alara_art_output")


def test_unknown_override():
    with pytest.raises(TypeError):
        load_settings(colour="blue")
