from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from config.errors import FormatUrlTemplateError
from config.options import normalize_keys
from config.parser import load_json_or_jsonc
from formatters.base import ParsedUrl
from plugin import plugin_factory

logger = logging.getLogger("urltemplate")


def _parse_mapping(entry: str) -> tuple[str, str, str]:
    key_part, sep, replacement = entry.partition("=")
    field, dot, raw = key_part.partition(".")
    if not sep or not dot or not field or not raw:
        raise click.BadParameter(f"expected FIELD.RAW=VALUE, got {entry!r}", param_hint="--map")
    return field, raw, replacement


def _jsonable(value: Any) -> Any:
    if isinstance(value, ParsedUrl):
        return value.href
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON/JSONC file with plugin options.",
)
@click.option("--url/--no-url", "apply_to_url", default=None, help="Render templates in `uri`.")
@click.option("--query/--no-query", "apply_to_query_string", default=None, help="Render templates in `qs`.")
@click.option(
    "--map",
    "mappings",
    multiple=True,
    metavar="FIELD.RAW=VALUE",
    help="Add a valuesMap entry, e.g. authType.saml=form.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(
    request_file: Path,
    config_file: Path | None,
    apply_to_url: bool | None,
    apply_to_query_string: bool | None,
    mappings: tuple[str, ...],
    verbose: bool,
) -> None:
    """Render {placeholders} in a request options file and print the result."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="[%(levelname)s] %(message)s")

    try:
        request_options = load_json_or_jsonc(request_file.resolve())
        params = normalize_keys(load_json_or_jsonc(config_file.resolve())) if config_file else {}
    except FormatUrlTemplateError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.debug("loaded request options from %s", request_file)

    if apply_to_url is not None:
        params["applyToUrl"] = apply_to_url
    if apply_to_query_string is not None:
        params["applyToQueryString"] = apply_to_query_string
    if mappings:
        values_map = params.setdefault("valuesMap", {})
        if not isinstance(values_map, dict):
            raise click.ClickException("valuesMap in --config must be an object")
        for entry in mappings:
            field, raw, replacement = _parse_mapping(entry)
            table = values_map.setdefault(field, {})
            if not isinstance(table, dict):
                raise click.ClickException(f"valuesMap.{field} in --config must be an object")
            table[raw] = replacement

    try:
        result = plugin_factory(params).load(None, request_options)
    except FormatUrlTemplateError as exc:
        raise click.ClickException(str(exc)) from exc

    output = {"uri": _jsonable(result.get("uri")), "qs": result.get("qs")}
    click.echo(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
