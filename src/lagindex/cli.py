from __future__ import annotations

"""Command line interface for lagindex using Typer."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import json
import logging

import numpy as np
import typer
from pydantic import ValidationError

from .config import Settings, load_settings
from .core import common_timestamps, lag_indices, validate_series
from .errors import LagIndexError
from .ingest import TimestampParseError, read_timestamps
from .types import IntervalMode
from .utils.logging import configure_logging

app = typer.Typer(help="Shared lag indices for overlapping time series")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            raise typer.BadParameter(f"invalid JSON override value: {raw}") from None
    return raw


def _apply_override(data: Dict[str, Any], keys: List[str], value: object) -> None:
    target: Any = data
    for key in keys[:-1]:
        if not isinstance(target, dict) or key not in target:
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        target = target[key]
    if not isinstance(target, dict) or keys[-1] not in target:
        raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
    target[keys[-1]] = value


def _step_to_json(step: Any) -> Any:
    if step is None:
        return None
    if isinstance(step, np.timedelta64):
        return float(step / np.timedelta64(1, "s"))
    return step.item() if isinstance(step, np.generic) else step


def _load_pair(cfg: Settings, series_a: Path, series_b: Path, column: Optional[str]):
    column = column if column is not None else cfg.ingest.column
    return (
        read_timestamps(series_a, column=column),
        read_timestamps(series_b, column=column),
    )


def _fail(exc: Exception, debug: bool) -> None:
    if debug:
        logger.exception("lag index assignment failed")
        raise exc
    typer.secho(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. assign.interval=monthly",
    ),
) -> None:
    """Initialise the Typer context with validated settings."""

    if isinstance(ctx.obj, Settings):
        settings = ctx.obj
    else:
        if config is not None and not config.exists():
            raise typer.BadParameter(f"configuration file not found: {config}")
        try:
            settings = load_settings(config) if config else Settings()
        except (RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
            raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump(mode="json")
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            _apply_override(data, key.split("."), _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    configure_logging(settings.log.level, fmt=settings.log.format)
    ctx.obj = settings


@app.command()
def assign(
    ctx: typer.Context,
    series_a: Path = typer.Argument(..., exists=True, dir_okay=False),
    series_b: Path = typer.Argument(..., exists=True, dir_okay=False),
    interval: Optional[str] = typer.Option(
        None, "--interval", "-i", help="annual, monthly, daily or exact"
    ),
    column: Optional[str] = typer.Option(
        None, "--column", "-c", help="Timestamp column for CSV inputs"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Assign lag indices to two timestamp files.

    The result is a JSON document with the base series, the anchor
    timestamp, the common step and one index list per input.  It is
    printed unless ``--output`` is given.
    """

    cfg: Settings = ctx.obj
    interval = interval if interval is not None else cfg.assign.interval.value

    try:
        dates_a, dates_b = _load_pair(cfg, series_a, series_b, column)
        result = lag_indices(dates_a, dates_b, interval)
    except (LagIndexError, TimestampParseError) as exc:
        _fail(exc, debug)
        return

    payload = {
        "interval": IntervalMode.parse(interval).value,
        "base": result.base,
        "anchor": str(np.datetime_as_string(result.anchor)),
        "step": _step_to_json(result.step),
        "indices_a": result.indices_a.tolist(),
        "indices_b": result.indices_b.tolist(),
    }
    text = json.dumps(payload)
    if output:
        with open(output, "w", encoding="utf8") as fh:
            fh.write(text)
        typer.echo(f"Wrote lag indices for {len(dates_a)} + {len(dates_b)} timestamps to {output}")
    else:
        typer.echo(text)


@app.command()
def overlap(
    ctx: typer.Context,
    series_a: Path = typer.Argument(..., exists=True, dir_okay=False),
    series_b: Path = typer.Argument(..., exists=True, dir_okay=False),
    column: Optional[str] = typer.Option(None, "--column", "-c"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Report the timestamps shared by two files."""

    cfg: Settings = ctx.obj
    try:
        dates_a, dates_b = _load_pair(cfg, series_a, series_b, column)
        a, b = validate_series(dates_a, dates_b)
    except (LagIndexError, TimestampParseError) as exc:
        _fail(exc, debug)
        return

    shared = common_timestamps(a, b)
    typer.echo(
        f"shared={shared.size} first={np.datetime_as_string(shared[0])} "
        f"last={np.datetime_as_string(shared[-1])}"
    )


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
