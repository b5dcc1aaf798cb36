#!/usr/bin/env python3
"""
Post CLI - Send Payloads to Expensify

Every post shows the payload first. It is then sent after confirmation,
sent right away with --auto-confirm, or not sent at all with --dry-run.
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click
import yaml

from ..command import Command, PayloadCommand, PerDiemCommand, Sink, execute
from ..context.models import Context
from ..context.store import DEFAULT_CONTEXT_NAME, ContextStore
from ..core.config import Config
from ..core.country import Destination
from ..core.dates import FinancialDate
from ..core.errors import ExpendError, PostAborted
from ..expensify.client import ExpensifyClient
from ..perdiem.expander import Mode
from ..perdiem.rates import Kind, load_rate_table
from ..perdiem.timeperiod import parse_time_period


@dataclass(frozen=True)
class PostOptions:
    """Options shared by all post subcommands."""

    user_id: str | None
    user_secret: str | None
    auto_confirm: bool
    dry_run: bool
    context_dir: Path
    reference_date: FinancialDate | None


def _dump(value: Any) -> str:
    return yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)


def _confirm_payload(options: PostOptions) -> Callable[[str, Any], None]:
    def confirm(payload_type: str, payload: Any) -> None:
        click.echo(f"The following '{payload_type}' payload would be sent to Expensify:")
        click.echo(_dump(payload))

        if options.dry_run:
            raise PostAborted("Aborted before post due to dry-run mode.")
        if options.auto_confirm:
            return
        if not sys.stdin.isatty():
            raise PostAborted("Cannot prompt if stdin is not a tty. Use -y to auto-confirm the operation.")
        if not click.confirm("Post this payload to Expensify?", default=False, err=True):
            raise PostAborted("Aborted by user")

    return confirm


def _credentials(config: Config, options: PostOptions) -> tuple[str, str]:
    if options.user_id and options.user_secret:
        return options.user_id, options.user_secret
    if config.expensify.user_id and config.expensify.user_secret:
        return config.expensify.user_id, config.expensify.user_secret

    click.echo("Posting requires credentials generated on the Expensify website.", err=True)
    user_id = click.prompt("Please enter your user id", err=True).strip()
    user_secret = click.prompt("Please enter your user secret (it won't display)", hide_input=True, err=True)
    return user_id, user_secret.strip()


def _expensify_sink(config: Config, options: PostOptions) -> Sink:
    def sink(payload_type: str, payload: Any) -> Any:
        user_id, user_secret = _credentials(config, options)
        client = ExpensifyClient(
            user_id,
            user_secret,
            base_url=config.expensify.base_url,
            timeout=config.expensify.timeout,
        )
        return client.post(payload_type, payload)

    return sink


def _run(ctx: click.Context, command: Command) -> None:
    config = ctx.obj["config"]
    options = ctx.obj["post"]

    try:
        rate_table = load_rate_table(config.rates_file)
        response = execute(command, _expensify_sink(config, options), _confirm_payload(options), rate_table)
    except PostAborted as e:
        if options.dry_run:
            click.echo(str(e), err=True)
            return
        raise click.ClickException(str(e)) from e
    except (ExpendError, ValueError, OSError, yaml.YAMLError) as e:
        raise click.ClickException(str(e)) from e

    click.echo("Expensify said:")
    click.echo(_dump(response))


def _load_user(options: PostOptions, name: str) -> Context:
    try:
        return Context(user=ContextStore(options.context_dir).load(name))
    except ExpendError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--user-id", "-u", help="The Expensify partner user id")
@click.option("--user-secret", "-s", help="The Expensify partner user secret")
@click.option("--auto-confirm", "-y", is_flag=True, help="Post without prompting. Mutually exclusive with -n")
@click.option("--dry-run", "-n", is_flag=True, help="Only show what would be posted. Mutually exclusive with -y")
@click.option(
    "--context-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to load contexts from (default: from configuration)",
)
@click.option(
    "--weekdate",
    "-w",
    help="A date (YYYY-MM-DD) in the week per-diem days refer to (default: this week)",
)
@click.pass_context
def post(
    ctx: click.Context,
    user_id: str | None,
    user_secret: str | None,
    auto_confirm: bool,
    dry_run: bool,
    context_dir: Path | None,
    weekdate: str | None,
) -> None:
    """Post a per-diem or a payload file to Expensify."""
    ctx.ensure_object(dict)

    if auto_confirm and dry_run:
        raise click.UsageError("--auto-confirm and --dry-run are mutually exclusive.")
    if user_id and not user_secret:
        raise click.UsageError("Please provide the secret as well with --user-secret.")
    if user_secret and not user_id:
        raise click.UsageError("Please provide the user as well with --user-id.")

    reference_date = None
    if weekdate:
        try:
            reference_date = FinancialDate.from_string(weekdate)
        except ValueError as e:
            raise click.BadParameter(f"Invalid date format: {weekdate}. Use YYYY-MM-DD", param_hint="--weekdate") from e

    ctx.obj["post"] = PostOptions(
        user_id=user_id,
        user_secret=user_secret,
        auto_confirm=auto_confirm,
        dry_run=dry_run,
        context_dir=context_dir or ctx.obj["config"].context_dir,
        reference_date=reference_date,
    )


@post.command(name="per-diem")
@click.argument("time_period")
@click.argument("kind", type=click.Choice([k.value for k in Kind], case_sensitive=False))
@click.option("--context", "-c", "context_name", default=DEFAULT_CONTEXT_NAME, show_default=True)
@click.option("--subtract", "-s", is_flag=True, help="Negate all amounts, e.g. to subtract meals from a full-day range")
@click.option(
    "--comment",
    "-m",
    help="Purpose of the per-diem. Appended to the generated '<from> to <to>' comment of multi-day entries",
)
@click.option(
    "--destination",
    "-d",
    type=click.Choice([d.value for d in Destination], case_sensitive=False),
    help="Travel destination abroad (default: domestic)",
)
@click.pass_context
def per_diem(
    ctx: click.Context,
    time_period: str,
    kind: str,
    context_name: str,
    subtract: bool,
    comment: str | None,
    destination: str | None,
) -> None:
    """
    Post a per-diem, relative to the current week by default.

    TIME_PERIOD is one of:

    \b
      weekdays         Monday to Friday
      mon | monday     a single day, case-insensitive
      mon-wed          an inclusive range of days
      mon,wed,sat      any days; duplicates and order are fixed automatically
    """
    options = ctx.obj["post"]
    user_context = _load_user(options, context_name)

    try:
        period = parse_time_period(time_period)
    except ExpendError as e:
        raise click.ClickException(str(e)) from e

    command = PerDiemCommand(
        context=Context(
            user=user_context.user,
            reference_date=options.reference_date,
            destination=Destination.parse(destination) if destination else None,
            comment=comment,
        ),
        period=period,
        kind=Kind.parse(kind),
        mode=Mode.SUBTRACT if subtract else Mode.ADD,
    )
    _run(ctx, command)


# Short spelling accepted as well
post.add_command(per_diem, name="perdiem")


@post.command(name="from-file")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("payload_type", default="create")
@click.option(
    "--context",
    "-c",
    "context_name",
    help="Context whose email and project are stamped onto the payload",
)
@click.pass_context
def from_file(ctx: click.Context, input_file: Path, payload_type: str, context_name: str | None) -> None:
    """
    Load a JSON or YAML file and post it as payload.

    PAYLOAD_TYPE is the Expensify job type to execute.
    """
    options = ctx.obj["post"]

    try:
        with open(input_file, encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise click.ClickException(f"Failed to load payload from '{input_file}': {e}") from e

    context = _load_user(options, context_name) if context_name else None
    _run(ctx, PayloadCommand(payload_type=payload_type, payload=payload, context=context))
