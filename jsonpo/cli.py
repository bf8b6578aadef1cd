from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional
import logging

import typer
from pydantic import ValidationError

from jsonpo import io_utils
from jsonpo import po_model
from jsonpo import rainbeam
from jsonpo import webext
from jsonpo.config import ConvertConfig, load_config
from jsonpo.constants import CONVERT_MODES, ConvertMode
from jsonpo.schema import (
    RainbeamFile,
    WebExtMessages,
    format_validation_errors,
    validate_rainbeam,
    validate_webext,
)

HELP = """Convert between Rainbeam or WebExtension i18n JSON and Gettext PO.

If the input file name ends in .json, it is converted from JSON to PO and the
PO is written to the output file. Otherwise the input is read as PO and
converted back to JSON.

In rainbeam mode, -s names the source-language file: its text becomes msgid
and the input pre-fills msgstr. In wei18n mode, -s and any extra positional
files are reference translations shown to translators as comments.
"""


def _exit_with_error(message: str, code: int = 1) -> NoReturn:
    """Print error message to stderr and exit with given code."""
    typer.secho(f"Error: {message}", fg="red", err=True)
    raise typer.Exit(code)


app = typer.Typer(add_completion=False)


def _resolve_config(config_path: Optional[Path]) -> ConvertConfig:
    if config_path is None:
        return ConvertConfig()
    try:
        return load_config(config_path)
    except ValidationError as exc:
        _exit_with_error(
            f"invalid config {config_path}: " + "; ".join(format_validation_errors(exc))
        )
    except (OSError, ValueError) as exc:
        _exit_with_error(str(exc))


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_webext(path: Path, label: str) -> WebExtMessages:
    raw = io_utils.read_json(path, label)
    return validate_webext(raw, label=f"{label} {path}").unwrap()


def _load_rainbeam(path: Path, label: str) -> RainbeamFile:
    raw = io_utils.read_json(path, label)
    return validate_rainbeam(raw, label=f"{label} {path}").unwrap()


def json_to_po(
    *,
    mode: str,
    locale: str,
    input_path: Path,
    source: Optional[Path],
    references: list[Path],
    config: ConvertConfig,
) -> str:
    if mode == ConvertMode.RAINBEAM:
        if references:
            typer.secho(
                "Warning: reference files are not used in rainbeam mode; use -s for the source file.",
                err=True,
            )
        target = _load_rainbeam(input_path, "input")
        source_value = _load_rainbeam(source, "source") if source is not None else None
        document = rainbeam.to_po(
            target,
            locale,
            source_value,
            project_id_version=config.project_id_version,
        )
    else:
        reference_paths = ([source] if source is not None else []) + list(references)
        messages = _load_webext(input_path, "input")
        reference_values = [_load_webext(path, "reference") for path in reference_paths]
        document = webext.to_po(
            messages,
            locale,
            reference_values,
            project_id_version=config.project_id_version,
        )
    return po_model.compile_po(document, wrapwidth=config.wrap_width)


def po_to_json(*, mode: str, input_path: Path, config: ConvertConfig) -> str:
    document = po_model.parse_po_path(input_path)
    if mode == ConvertMode.RAINBEAM:
        payload = rainbeam.dump_file(rainbeam.to_json(document))
    else:
        payload = webext.dump_messages(webext.to_json(document))
    return io_utils.render_json(payload, indent=config.json_indent)


@app.command(help=HELP)
def convert(
    ctx: typer.Context,
    references: Optional[list[Path]] = typer.Argument(None, help="Reference translation files (wei18n)."),
    mode: Optional[str] = typer.Option(None, "--mode", "-m", help="rainbeam or wei18n."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Language written to the PO header."),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="JSON or PO input file."),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file."),
    source: Optional[Path] = typer.Option(None, "--source", "-s", help="Source-language JSON file."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="JSON settings file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    if locale is None or input_path is None or output_path is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(1)
    _configure_logging(verbose)
    config = _resolve_config(config_path)
    resolved_mode = mode or config.default_mode
    if resolved_mode not in CONVERT_MODES:
        _exit_with_error(
            f"invalid mode {resolved_mode!r}; expected one of: {', '.join(CONVERT_MODES)}"
        )

    try:
        if str(input_path).endswith(".json"):
            text = json_to_po(
                mode=resolved_mode,
                locale=locale,
                input_path=input_path,
                source=source,
                references=list(references or []),
                config=config,
            )
        else:
            text = po_to_json(mode=resolved_mode, input_path=input_path, config=config)
        io_utils.write_text_atomic(output_path, text)
    except (OSError, ValueError) as exc:
        _exit_with_error(str(exc))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
