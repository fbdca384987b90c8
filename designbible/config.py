"""Runtime settings for designbible.

Values come from environment variables (optionally loaded from a `.env`
file) and can be overridden by CLI options.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_INPUT_FILE = "alara_design_bible.txt"
DEFAULT_IMAGE_DIR = "alara_art_output"
DEFAULT_OUTPUT_FILE = "index.html"
DEFAULT_SET_TITLE = "Alara Resurgent"
DEFAULT_IMAGE_MODEL = "gemini-3-pro-image-preview"
DEFAULT_REQUEST_DELAY_S = 1.0


def load_env_file() -> Optional[Path]:
    """Load a .env file from the current directory or the project root.

    Returns:
        The path that was loaded, or None if no .env file was found.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        env_path = Path(__file__).resolve().parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        return env_path
    return None


@dataclass
class Settings:
    input_file: Path
    image_dir: Path
    output_file: Path
    set_title: str
    api_key: Optional[str]
    image_model: str
    request_delay_s: float


def load_settings(**overrides) -> Settings:
    """Build Settings from the environment.

    Keyword arguments override environment values; a value of None means
    "not given" so click options can be passed straight through.
    """
    load_env_file()

    values = {
        "input_file": Path(os.environ.get("DESIGNBIBLE_INPUT", DEFAULT_INPUT_FILE)),
        "image_dir": Path(os.environ.get("DESIGNBIBLE_IMAGE_DIR", DEFAULT_IMAGE_DIR)),
        "output_file": Path(os.environ.get("DESIGNBIBLE_OUTPUT", DEFAULT_OUTPUT_FILE)),
        "set_title": os.environ.get("DESIGNBIBLE_SET_TITLE", DEFAULT_SET_TITLE),
        "api_key": os.environ.get("GEMINI_API_KEY") or os.environ.get("GEMINI_TEXT_API_KEY"),
        "image_model": os.environ.get("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        "request_delay_s": float(
            os.environ.get("DESIGNBIBLE_REQUEST_DELAY_S", DEFAULT_REQUEST_DELAY_S)
        ),
    }

    known = {f.name for f in fields(Settings)}
    for key, value in overrides.items():
        if key not in known:
            raise TypeError(f"Unknown setting: {key}")
        if value is None:
            continue
        if key in ("input_file", "image_dir", "output_file"):
            value = Path(value)
        values[key] = value

    return Settings(**values)
