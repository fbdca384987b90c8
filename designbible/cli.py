#!/usr/bin/env python3
"""designbible CLI - parse a set design bible into a spoiler gallery and card art."""

import logging

import click

from designbible import __version__
from designbible.cards.identity import group_identity
from designbible.cards.parse import load_design_bible
from designbible.config import load_settings
from designbible.errors import DesignBibleNotFound, ImageGenerationError


def _load(settings):
    try:
        return load_design_bible(settings.input_file)
    except DesignBibleNotFound as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """designbible - turn a set design bible into cards, a gallery and art.

    Parse the card file, build the spoiler page, export a card list,
    and generate illustrations with Gemini.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command()
@click.option("--input", "input_file", help="Design bible text file")
def parse(input_file):
    """Print a summary of every parsed card."""
    settings = load_settings(input_file=input_file)
    cards, sections = _load(settings)

    for card in cards:
        click.echo(f"#{card.id or '?'} {card.name} — {group_identity(card)}")

    click.echo(
        f"{len(cards)} card(s); {len(sections.flavor)} flavor line(s), "
        f"{len(sections.mechanics)} mechanics line(s)"
    )


@cli.command()
@click.option("--input", "input_file", help="Design bible text file")
@click.option("--image-dir", help="Directory holding card art (relative to the page)")
@click.option("--out", "output_file", help="Output HTML path")
@click.option("--title", "set_title", help="Set title shown on the page")
def gallery(input_file, image_dir, output_file, set_title):
    """Build the static spoiler gallery page."""
    from designbible.gallery.builder import write_gallery

    settings = load_settings(
        input_file=input_file,
        image_dir=image_dir,
        output_file=output_file,
        set_title=set_title,
    )
    click.echo("Parsing design bible...")
    cards, _ = _load(settings)
    click.echo(f"  Processed {len(cards)} cards.")

    out = write_gallery(
        cards,
        settings.output_file,
        image_dir=settings.image_dir.as_posix(),
        set_title=settings.set_title,
    )
    click.echo(f"Generated {out}")


@cli.command()
@click.option("--input", "input_file", help="Design bible text file")
@click.option("--image-dir", help="Output directory for card art")
@click.option("--model", "image_model", help="Gemini image model ID")
@click.option("--delay", "request_delay_s", type=float, help="Seconds to wait between requests")
@click.option("--dry-run", is_flag=True, help="Print prompts without calling Gemini")
def art(input_file, image_dir, image_model, request_delay_s, dry_run):
    """Generate missing card illustrations with Gemini."""
    from designbible.gemini.batch import generate_art, pending_cards
    from designbible.gemini.prompt import generate_prompt

    settings = load_settings(
        input_file=input_file,
        image_dir=image_dir,
        image_model=image_model,
        request_delay_s=request_delay_s,
    )
    cards, _ = _load(settings)

    if dry_run:
        for card in pending_cards(cards, settings.image_dir):
            click.echo(f"--- {card.file_name}")
            click.echo(generate_prompt(card))
        return

    try:
        summary = generate_art(cards, image_dir=settings.image_dir, settings=settings)
    except ImageGenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Generated {len(summary.generated)}, skipped {len(summary.skipped)}, "
        f"failed {len(summary.failed)} of {summary.total} cards."
    )
    if summary.failed:
        raise SystemExit(1)


@cli.command()
@click.option("--input", "input_file", help="Design bible text file")
@click.option("--out", "output_path", default="cardlist.yml", show_default=True, help="Output YAML path")
@click.option("--title", "set_title", help="Set title stored in the manifest")
def export(input_file, output_path, set_title):
    """Export the parsed cards to a YAML card list."""
    from designbible.gallery.export import build_card_manifest, save_card_manifest

    settings = load_settings(input_file=input_file, set_title=set_title)
    cards, sections = _load(settings)

    manifest = build_card_manifest(cards, sections, settings.set_title)
    saved = save_card_manifest(manifest, output_path)
    click.echo(f"Card list saved to: {saved}")
    click.echo(f"Total: {manifest['total_cards']} cards")


if __name__ == "__main__":
    cli()
