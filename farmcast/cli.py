"""
FarmCast — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Resolve the weather snapshot (file, or seeded synthetic demo).
  4. Run the advisory engine / chat responder.
  5. Report result to stdout.

Install and run::

    pip install -e .
    farmcast --help
    farmcast validate-config
    farmcast advise --snapshot data/snapshots/fresno.json
    farmcast advise --demo-seed 7 --json-out demo.json
    farmcast ask "Should I irrigate today?" --snapshot data/snapshots/fresno.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="farmcast",
    help="FarmCast — weather-driven crop alerts and recommendations.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from farmcast.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from farmcast.utils.logging import configure_logging
    configure_logging(config.logging)


def _report_path(config, path: str) -> Path:
    """Resolve an export path; relative paths land under ``[data] reports_dir``."""
    out = Path(path)
    return out if out.is_absolute() else Path(config.data.reports_dir) / out


def _resolve_snapshot_or_exit(config, snapshot_path: Optional[str], demo_seed: Optional[int]):
    """Load the snapshot file, or generate a synthetic one.

    Precedence: ``--snapshot`` > ``--demo-seed`` > ``[data] snapshot_path`` >
    ``[demo]`` settings.
    """
    from pydantic import ValidationError

    from farmcast.ingestion.loader import SnapshotFormatError, load_snapshot
    from farmcast.ingestion.synthetic import generate_snapshot

    path = snapshot_path
    if path is None and demo_seed is None:
        path = config.data.snapshot_path

    if path:
        try:
            return load_snapshot(Path(path))
        except FileNotFoundError as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)
        except (SnapshotFormatError, ValidationError) as exc:
            typer.echo(f"[ERROR] Invalid snapshot {path}: {exc}", err=True)
            raise typer.Exit(code=1)

    seed = demo_seed if demo_seed is not None else config.demo.seed
    typer.echo(f"Using synthetic demo snapshot (seed={seed}).", err=True)
    return generate_snapshot(
        seed=seed,
        days=config.demo.forecast_days,
        location=config.demo.location,
    )


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Snapshot path:    {config.data.snapshot_path or '(synthetic demo)'}")
    typer.echo(f"  Reports dir:      {config.data.reports_dir}")
    typer.echo(f"  Demo seed:        {config.demo.seed}")
    typer.echo(f"  Demo days:        {config.demo.forecast_days}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")


@app.command("advise")
def advise(
    snapshot_path: Optional[str] = typer.Option(
        None,
        "--snapshot",
        help="Weather snapshot JSON (weatherapi.com forecast.json or normalized).",
    ),
    demo_seed: Optional[int] = typer.Option(
        None,
        "--demo-seed",
        help="Generate a synthetic snapshot with this seed instead of reading a file.",
    ),
    json_out: Optional[str] = typer.Option(
        None,
        "--json-out",
        help="Also write the advisory report as JSON (relative paths go under reports_dir).",
    ),
    alerts_csv: Optional[str] = typer.Option(
        None,
        "--alerts-csv",
        help="Also write the alerts as CSV (relative paths go under reports_dir).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the report as JSON instead of ASCII tables.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Classify conditions and print crop recommendations and alerts."""
    from farmcast.advisory.engine import evaluate
    from farmcast.reporting.export import export_alerts_csv, export_report_json
    from farmcast.reporting.formatters import format_advisory_report

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    snapshot = _resolve_snapshot_or_exit(config, snapshot_path, demo_seed)
    report = evaluate(snapshot)

    if as_json:
        typer.echo(json.dumps(report.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        typer.echo(format_advisory_report(report, snapshot))

    if json_out:
        written = export_report_json(report, _report_path(config, json_out))
        typer.echo(f"[OK] Report written to {written}", err=True)
    if alerts_csv:
        written = export_alerts_csv(report, _report_path(config, alerts_csv))
        typer.echo(f"[OK] Alerts written to {written}", err=True)


@app.command("ask")
def ask(
    question: str = typer.Argument(..., help="Free-text question, e.g. 'Should I water?'"),
    snapshot_path: Optional[str] = typer.Option(
        None,
        "--snapshot",
        help="Weather snapshot JSON (weatherapi.com forecast.json or normalized).",
    ),
    demo_seed: Optional[int] = typer.Option(
        None,
        "--demo-seed",
        help="Generate a synthetic snapshot with this seed instead of reading a file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Answer a farming question from the current weather conditions."""
    from farmcast.advisory.classifier import classify
    from farmcast.chat.responder import answer

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    snapshot = _resolve_snapshot_or_exit(config, snapshot_path, demo_seed)
    typer.echo(answer(question, snapshot, classify(snapshot)))


if __name__ == "__main__":
    app()
