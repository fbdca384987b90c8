#!/usr/bin/env python3
"""Gemini image generation for card art.

One request per card, no retries. The first inline image part of the
response is saved to the output path as PNG.
"""

import base64
import io
import logging
import os
import sys

from google import genai
from google.genai import types
from PIL import Image, UnidentifiedImageError

from designbible.config import DEFAULT_IMAGE_MODEL
from designbible.errors import ImageGenerationError

logger = logging.getLogger(__name__)


def make_client(api_key: str | None):
    if not api_key:
        raise ImageGenerationError("GEMINI_API_KEY (or GEMINI_TEXT_API_KEY) env var is not set.")
    return genai.Client(api_key=api_key)


def _extract_image(response) -> tuple[bytes, str]:
    """Return (bytes, mime_type) of the first image part in a response."""
    if not response.candidates:
        raise ImageGenerationError("No candidates returned from Gemini.")

    candidate = response.candidates[0]
    parts = (candidate.content.parts if candidate.content and candidate.content.parts else [])

    for part in parts:
        inline = part.inline_data
        if inline and inline.data and (inline.mime_type or "").startswith("image/"):
            data = inline.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            return data, inline.mime_type
        file_data = getattr(part, "file_data", None)
        if file_data and file_data.file_uri:
            logger.warning(f"Gemini returned a file URI instead of inline data: {file_data.file_uri}")

    raise ImageGenerationError("No image data returned.")


def save_png(image_bytes: bytes, mime_type: str, out_path: str) -> None:
    """Write image bytes to out_path, converting to PNG when needed."""
    try:
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        if mime_type == "image/png":
            with open(out_path, "wb") as f:
                f.write(image_bytes)
            return
        img = Image.open(io.BytesIO(image_bytes))
        img.save(out_path, "PNG")
    except (OSError, UnidentifiedImageError) as e:
        if os.path.exists(out_path):
            os.remove(out_path)
        raise ImageGenerationError(f"Could not save image to {out_path}: {e}") from e

    logger.debug(f"Converted {mime_type} response to PNG ({img.size[0]}x{img.size[1]})")


def generate_image(
    prompt: str,
    out_path: str,
    *,
    api_key: str | None = None,
    model: str = DEFAULT_IMAGE_MODEL,
    client=None,
) -> None:
    """Generate an illustration from a text prompt using Gemini.

    Args:
        prompt: The text prompt describing the desired image.
        out_path: Path where the generated PNG will be saved.
        api_key: Gemini API key, used when no client is given.
        model: Gemini model ID to use.
        client: Optional pre-built genai.Client.

    Raises:
        ImageGenerationError: If the API call fails or no image is returned.
    """
    if client is None:
        client = make_client(api_key)

    config = types.GenerateContentConfig(
        response_modalities=["IMAGE"],
    )

    try:
        response = client.models.generate_content(
            model=model,
            contents=[types.Content(role="user", parts=[types.Part.from_text(text=prompt)])],
            config=config,
        )
    except Exception as e:
        raise ImageGenerationError(f"Gemini API request failed: {e}") from e

    image_bytes, mime_type = _extract_image(response)
    save_png(image_bytes, mime_type, out_path)


def main() -> int:
    """CLI entrypoint for testing image generation."""
    if len(sys.argv) < 3:
        print("Usage: python -m designbible.gemini.image <prompt_text_file> <out_png_path>")
        return 1

    prompt_file = sys.argv[1]
    out_png = sys.argv[2]

    with open(prompt_file, "r", encoding="utf-8") as f:
        prompt = f.read().strip()

    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("GEMINI_TEXT_API_KEY")
    try:
        generate_image(prompt, out_png, api_key=api_key)
    except ImageGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
