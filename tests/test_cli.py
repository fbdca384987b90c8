import pytest
import yaml
from click.testing import CliRunner

from designbible.cli import cli
from designbible.gemini.batch import ArtRunSummary


@pytest.fixture
def runner(monkeypatch, tmp_path):
    for name in ("DESIGNBIBLE_INPUT", "DESIGNBIBLE_IMAGE_DIR", "DESIGNBIBLE_OUTPUT", "DESIGNBIBLE_SET_TITLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return CliRunner()


def test_parse_summary(runner, bible_file):
    result = runner.invoke(cli, ["parse", "--input", str(bible_file)])

    assert result.exit_code == 0, result.output
    assert "#M01 Varrus, the Steel Sower — The Shard of Esper (Alara)" in result.output
    assert "#C02 Jund Raider — The Shard of Jund (Alara)" in result.output
    assert "3 card(s); 2 flavor line(s), 2 mechanics line(s)" in result.output


def test_missing_input(runner, tmp_path):
    result = runner.invoke(cli, ["parse", "--input", str(tmp_path / "nope.txt")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_gallery(runner, bible_file, tmp_path):
    out = tmp_path / "site" / "index.html"
    result = runner.invoke(cli, [
        "gallery", "--input", str(bible_file), "--out", str(out),
        "--image-dir", "art", "--title", "Shards Reborn",
    ])

    assert result.exit_code == 0, result.output
    assert "Processed 3 cards." in result.output
    page = out.read_text(encoding="utf-8")
    assert "<h1>Shards Reborn</h1>" in page
    assert "art/M01_varrus__the_steel_sower.png" in page


def test_export(runner, bible_file, tmp_path):
    out = tmp_path / "cardlist.yml"
    result = runner.invoke(cli, ["export", "--input", str(bible_file), "--out", str(out)])

    assert result.exit_code == 0, result.output
    with open(out, encoding="utf-8") as f:
        manifest = yaml.safe_load(f)
    assert manifest["total_cards"] == 3
    assert manifest["set"] == "Alara Resurgent"


def test_art_dry_run(runner, bible_file, tmp_path):
    art_dir = tmp_path / "art"
    art_dir.mkdir()
    (art_dir / "U03_quiet_hollow.png").write_bytes(b"png")

    result = runner.invoke(cli, ["art", "--input", str(bible_file), "--image-dir", str(art_dir), "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "--- M01_varrus__the_steel_sower.png" in result.output
    assert "--- C02_jund_raider.png" in result.output
    assert "U03_quiet_hollow.png" not in result.output


def test_art_reports_failures(runner, bible_file, monkeypatch):
    def fake_generate_art(cards, *, image_dir, settings):
        return ArtRunSummary(total=len(cards), generated=["a.png"], failed=["b.png"], skipped=["c.png"])

    monkeypatch.setattr("designbible.gemini.batch.generate_art", fake_generate_art)
    result = runner.invoke(cli, ["art", "--input", str(bible_file)])

    assert result.exit_code == 1
    assert "Generated 1, skipped 1, failed 1 of 3 cards." in result.output


def test_art_without_api_key(runner, bible_file, monkeypatch, tmp_path):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_TEXT_API_KEY", raising=False)
    result = runner.invoke(cli, ["art", "--input", str(bible_file), "--image-dir", str(tmp_path / "art")])

    assert result.exit_code == 1
    assert "GEMINI_API_KEY" in result.output
