from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import RichnessConfig, load_config
from .models import Document, RichnessReport
from .report import analyze_corpus, report_to_dict

app = typer.Typer(help="Lexical Richness CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}

INLINE_DOC_ID = "<text>"


class CorpusSummary(TypedDict):
    documents: List[dict]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    segment_window: int | None = typer.Option(
        None, "--segment-window", help="Segment size used by MSTTR."
    ),
    window_size: int | None = typer.Option(
        None, "--window-size", help="Window size used by MATTR."
    ),
    discard: bool | None = typer.Option(
        None,
        "--discard/--keep-partial",
        help="Drop (or keep) the trailing partial MSTTR segment.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress."),
) -> None:
    """Analyze a .txt file or a directory of .txt files and emit a JSON summary."""
    _configure_logging(verbose)
    cfg = _load_cli_config(config, segment_window, window_size, discard)
    documents = _load_documents(input_path)
    results = analyze_corpus(documents, cfg)
    typer.echo(json.dumps(_build_summary(results), indent=2))


@app.command("analyze-text")
def analyze_text(
    text: str = typer.Argument(..., help="Text to analyze."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    segment_window: int | None = typer.Option(
        None, "--segment-window", help="Segment size used by MSTTR."
    ),
    window_size: int | None = typer.Option(
        None, "--window-size", help="Window size used by MATTR."
    ),
    discard: bool | None = typer.Option(
        None,
        "--discard/--keep-partial",
        help="Drop (or keep) the trailing partial MSTTR segment.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress."),
) -> None:
    """Analyze an inline string and emit the same JSON summary as analyze."""
    _configure_logging(verbose)
    cfg = _load_cli_config(config, segment_window, window_size, discard)
    results = analyze_corpus([Document(doc_id=INLINE_DOC_ID, text=text)], cfg)
    typer.echo(json.dumps(_build_summary(results), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = RichnessConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    # Logs go to stderr so stdout stays valid JSON.
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_cli_config(
    config_path: Path | None,
    segment_window: int | None,
    window_size: int | None,
    discard: bool | None,
) -> RichnessConfig:
    """Load the configuration file (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if segment_window is not None:
        cfg.segment_window = segment_window
    if window_size is not None:
        cfg.window_size = window_size
    if discard is not None:
        cfg.discard = discard
    if cfg.segment_window <= 0 or cfg.window_size <= 0:
        raise typer.BadParameter("Segment and window sizes must be positive.")
    return cfg


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, RichnessReport]) -> CorpusSummary:
    """Create a JSON-serializable summary for each analyzed document."""
    return {
        "documents": [report_to_dict(report) for _, report in sorted(results.items())]
    }


if __name__ == "__main__":
    main()
