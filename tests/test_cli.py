import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from lexical_richness.cli import app

runner = CliRunner()

SMALL_WINDOWS = ["--segment-window", "2", "--window-size", "2"]


def test_cli_analyze_outputs_summary_for_directory(tmp_path: Path):
    """analyze walks a directory and reports each .txt file by relative path."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir), *SMALL_WINDOWS])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "nested/chapter2.txt"]
    first = payload["documents"][0]
    assert first["words"] == 12
    assert first["terms"] == 9
    assert first["metrics"]["ttr"] == pytest.approx(9 / 12)
    assert set(first["metrics"]) == {
        "ttr",
        "rttr",
        "cttr",
        "herdan",
        "maas",
        "msttr",
        "mattr",
    }


def test_cli_analyze_single_file(tmp_path: Path):
    path = tmp_path / "single.txt"
    path.write_text("Rain rain go away", encoding="utf-8")

    result = runner.invoke(app, ["analyze", "--input-path", str(path), *SMALL_WINDOWS])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["doc_id"] == "single.txt"
    assert payload["documents"][0]["terms"] == 3


def test_cli_analyze_text_applies_config_file(tmp_path: Path):
    """analyze-text reads overrides from YAML; CLI flags win over the file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "metrics: [ttr, msttr, mattr]\nsegment_window: 3\nwindow_size: 4\n",
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        [
            "analyze-text",
            "a a b b c c d",
            "--config",
            str(config_path),
            "--segment-window",
            "2",
            "--keep-partial",
        ],
    )

    assert result.exit_code == 0
    document = json.loads(result.stdout)["documents"][0]
    assert document["doc_id"] == "<text>"
    assert list(document["metrics"]) == ["ttr", "msttr", "mattr"]
    assert document["metrics"]["msttr"] == pytest.approx(0.625)


def test_cli_analyze_text_rejects_non_positive_window():
    result = runner.invoke(app, ["analyze-text", "some words", "--window-size", "0"])

    assert result.exit_code != 0


def test_cli_rejects_config_with_unknown_metric(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("metrics: [mtld]\n", encoding="utf-8")

    result = runner.invoke(app, ["analyze-text", "some words", "-c", str(config_path)])

    assert result.exit_code != 0


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "segment_window" in result.stdout
    assert "mattr" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with a nested file and an ignored non-text file."""
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay. The sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "chapter2.txt").write_text(
        "The captain stood on deck.", encoding="utf-8"
    )
    (corpus_dir / "notes.md").write_text("# ignored", encoding="utf-8")
    return corpus_dir


@pytest.mark.parametrize("contents", ["metrics:\n", "window_size: '3'\n"])
def test_cli_reports_wrongly_typed_config_as_bad_parameter(
    tmp_path: Path, contents: str
):
    """Badly typed YAML values surface as a usage error, not a traceback."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(contents, encoding="utf-8")

    result = runner.invoke(app, ["analyze-text", "a b c", "-c", str(config_path)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)
