# file: calllog/cli.py
"""
calllog CLI.

Commands:
  - display: the label to show for a number
  - uri: the URI used to call a number
  - check: whether calls/SMS can be placed to a number
  - geocode: offline geocoded description of a number
  - info: all of the above, optionally as JSON
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from calllog import __version__
from calllog.config import CalllogSettings, load_settings
from calllog.core.parser import format_for_region
from calllog.helper import NumberInfo, PhoneNumberHelper
from calllog.logging_config import configure_logging

logger = logging.getLogger(__name__)


class _State:
    def __init__(self, settings: CalllogSettings, helper: PhoneNumberHelper) -> None:
        self.settings = settings
        self.helper = helper


def _region(state: _State, region: str | None) -> str | None:
    return region or state.settings.default_country_iso


def _formatted(state: _State, number: str, formatted: str | None, region: str | None) -> str | None:
    """Explicit --formatted wins; otherwise format for the region when the number parses."""

    if formatted:
        return formatted
    if region is None or state.helper.is_sip_number(number):
        return None
    parsed = state.helper.parse_phone_number(number, region)
    if parsed is None:
        return None
    return format_for_region(parsed, region)


def _human_text(info: NumberInfo) -> str:
    lines = [
        f"Number: {info.number}",
        f"  Display: {info.display}",
        f"  Can place calls: {'yes' if info.can_place_calls else 'no'}",
        f"  Can send SMS: {'yes' if info.can_send_sms else 'no'}",
        f"  Voicemail: {'yes' if info.is_voicemail else 'no'}",
        f"  SIP: {'yes' if info.is_sip else 'no'}",
        f"  Call URI: {info.call_uri}",
        f"  Geocode: {info.geocode}",
    ]
    return "\n".join(lines) + "\n"


region_option = click.option(
    "--region",
    default=None,
    help="Country ISO (alpha-2) used when NUMBER has no leading +country code.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML config path.",
)
@click.option("--voicemail", default=None, help="Voicemail number (overrides config).")
@click.option("--locale", default=None, help="Locale for geocoded descriptions (overrides config).")
@click.pass_context
def main(
    ctx: click.Context, config_path: Path | None, voicemail: str | None, locale: str | None
) -> None:
    """Phone number helpers for call log display."""

    try:
        settings = load_settings(yaml_path=config_path)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    updates: dict[str, str] = {}
    if voicemail is not None:
        updates["voicemail_number"] = voicemail
    if locale is not None:
        updates["locale"] = locale
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(level=settings.log_level, json_logging=settings.json_logging)
    logger.debug("Loaded settings", extra={"locale": settings.locale})
    ctx.obj = _State(settings, PhoneNumberHelper.from_settings(settings))


@main.command("display")
@click.argument("number", type=str)
@click.option("--formatted", default=None, help="Pre-formatted number to show when applicable.")
@region_option
@click.pass_obj
def display_cmd(state: _State, number: str, formatted: str | None, region: str | None) -> None:
    """Print the label to show for NUMBER."""

    region = _region(state, region)
    click.echo(
        state.helper.get_display_number(number, _formatted(state, number, formatted, region))
    )


@main.command("uri")
@click.argument("number", type=str)
@click.pass_obj
def uri_cmd(state: _State, number: str) -> None:
    """Print the URI used to place a call to NUMBER."""

    click.echo(str(state.helper.get_call_uri(number)))


@main.command("check")
@click.argument("number", type=str)
@click.pass_obj
def check_cmd(state: _State, number: str) -> None:
    """Report whether calls and SMS can be placed to NUMBER.

    Exits with status 1 when NUMBER cannot be called.
    """

    can_call = state.helper.can_place_calls_to(number)
    can_sms = state.helper.can_send_sms_to(number)
    click.echo(f"call: {'yes' if can_call else 'no'}")
    click.echo(f"sms: {'yes' if can_sms else 'no'}")
    if not can_call:
        click.get_current_context().exit(1)


@main.command("geocode")
@click.argument("number", type=str)
@region_option
@click.pass_obj
def geocode_cmd(state: _State, number: str, region: str | None) -> None:
    """Print the geocoded description of NUMBER (empty if unknown)."""

    parsed = state.helper.parse_phone_number(number, _region(state, region))
    if parsed is None:
        raise click.ClickException(f"Unable to parse number: {number}")
    click.echo(state.helper.get_geocode_for_number(parsed))


@main.command("info")
@click.argument("number", type=str)
@click.option("--formatted", default=None, help="Pre-formatted number to show when applicable.")
@region_option
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
@click.pass_obj
def info_cmd(
    state: _State, number: str, formatted: str | None, region: str | None, as_json: bool
) -> None:
    """Describe NUMBER: display label, capabilities, call URI and geocode."""

    region = _region(state, region)
    info = state.helper.describe(
        number,
        formatted_number=_formatted(state, number, formatted, region),
        country_iso=region,
    )
    if as_json:
        click.echo(json.dumps(info.to_dict(), indent=2, sort_keys=True, ensure_ascii=False))
    else:
        click.echo(_human_text(info), nl=False)
