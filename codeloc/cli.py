"""Command-line interface for codeloc."""

from __future__ import annotations

import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import orjson
import typer

from .config import DEFAULT_CONFIG_FILE, CodelocConfig, merge_config
from .errors import LocationError
from .logging import configure_logging, get_logger
from .lsp.location import Location
from .lsp.position import Position
from .lsp.range import Range
from .lsp.uri import FileUri
from .serde import dumps_json, dumps_msgpack, loads_json, loads_msgpack, location_to_data, range_to_data

app = typer.Typer(help="Validate and encode source code locations.")
LOGGER = get_logger(__name__)

POSITION_PATTERN = re.compile(r"([0-9]+):([0-9]+)")


@app.callback()
def main() -> None:
    """codeloc CLI root."""
    return None


def _setup(config_path: Path, cli_options: dict[str, object]) -> CodelocConfig:
    config = merge_config(config_path, cli_options)
    configure_logging(config.log_level)
    return config


def _parse_position(text: str) -> Position:
    match = POSITION_PATTERN.fullmatch(text.strip())
    if match is None:
        raise typer.BadParameter(f"Expected LINE:CHARACTER, got {text!r}")
    return Position(int(match.group(1)), int(match.group(2)))


def _echo_json(payload: dict[str, object], config: CodelocConfig) -> None:
    option = orjson.OPT_INDENT_2 if config.json_indent else 0
    typer.echo(orjson.dumps(payload, option=option).decode("utf-8"))


@contextmanager
def _exit_on_location_error() -> Iterator[None]:
    try:
        yield
    except LocationError as error:
        LOGGER.error("%s", error)
        typer.echo(orjson.dumps(error.to_data()).decode("utf-8"), err=True)
        raise typer.Exit(code=1) from error


@app.command("uri")
def uri_command(
    text: str = typer.Argument(..., help="URI to validate, e.g. file:///src/main.py."),
    config_path: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), "--config", help="YAML configuration file."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    """Validate a file URI and show its parts."""
    config = _setup(config_path, {"log_level": log_level})
    with _exit_on_location_error():
        uri = FileUri.validated(text)
        path = uri.to_file_path()
    _echo_json(
        {"uri": uri.text, "scheme": uri.scheme, "filename": uri.filename, "path": str(path)},
        config,
    )


@app.command("range")
def range_command(
    start: str = typer.Argument(..., help="Start position as LINE:CHARACTER."),
    end: str = typer.Argument(..., help="End position as LINE:CHARACTER."),
    contains: Optional[List[str]] = typer.Option(None, "--contains", help="Position to test for containment."),
    config_path: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), "--config", help="YAML configuration file."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    """Validate a range and optionally test positions against it."""
    config = _setup(config_path, {"log_level": log_level})
    with _exit_on_location_error():
        range_ = Range.validated(_parse_position(start), _parse_position(end))
        probes = {text: range_.contains_position(_parse_position(text)) for text in contains or []}
    _echo_json({"range": range_to_data(range_), "empty": range_.is_empty(), "contains": probes}, config)


@app.command("location")
def location_command(
    uri: str = typer.Argument(..., help="File URI of the document."),
    start: str = typer.Argument(..., help="Start position as LINE:CHARACTER."),
    end: str = typer.Argument(..., help="End position as LINE:CHARACTER."),
    output_format: Optional[str] = typer.Option(None, "--format", help="Encoding: json or msgpack."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the encoded location to this file."),
    config_path: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), "--config", help="YAML configuration file."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    """Validate a location and encode it."""
    config = _setup(config_path, {"log_level": log_level, "output_format": output_format})
    with _exit_on_location_error():
        location = Location.validated(uri, Range(_parse_position(start), _parse_position(end)))

    if config.output_format == "msgpack":
        payload = dumps_msgpack(location)
    else:
        payload = dumps_json(location, indent=config.json_indent)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(payload)
        LOGGER.info("Wrote %s location to %s", config.output_format, output)
    elif config.output_format == "msgpack":
        typer.echo(payload.hex())
    else:
        typer.echo(payload.decode("utf-8"))


@app.command("decode")
def decode_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="File holding an encoded location."),
    input_format: Optional[str] = typer.Option(None, "--format", help="Encoding: json or msgpack."),
    config_path: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), "--config", help="YAML configuration file."),
    log_level: Optional[str] = typer.Option(None, help="Log level."),
) -> None:
    """Decode a stored location and print it as JSON."""
    config = _setup(config_path, {"log_level": log_level, "output_format": input_format})
    payload = source.read_bytes()
    with _exit_on_location_error():
        if config.output_format == "msgpack":
            location = loads_msgpack(payload, Location)
        else:
            location = loads_json(payload, Location)
    LOGGER.info("Decoded location in %s", location.uri)
    _echo_json({"location": location_to_data(location), "filename": location.filename}, config)


__all__ = ["app"]
