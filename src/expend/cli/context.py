#!/usr/bin/env python3
"""
Context CLI - Manage Named Contexts

A context holds the settings shared by many posts: project, email, country
and the tag and category names used in Expensify.
"""

from pathlib import Path

import click
import yaml

from ..context.models import Categories, Category, Tag, Tags, UserContext
from ..context.store import DEFAULT_CONTEXT_NAME, ContextStore
from ..core.country import Country
from ..core.errors import ExpendError


def _store(ctx: click.Context) -> ContextStore:
    return ContextStore(ctx.obj["context_dir"])


@click.group(name="context")
@click.option(
    "--from",
    "--at",
    "from_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to read contexts from and write them to (default: from configuration)",
)
@click.pass_context
def context(ctx: click.Context, from_dir: Path | None) -> None:
    """Interact with contexts - sets of properties shared across many posts."""
    ctx.ensure_object(dict)
    ctx.obj["context_dir"] = from_dir or ctx.obj["config"].context_dir


@context.command(name="list")
@click.pass_context
def list_contexts(ctx: click.Context) -> None:
    """List all available named contexts."""
    store = _store(ctx)
    names = store.names()
    if not names:
        raise click.ClickException("Did not find a single context. Create one using 'context set'.")
    for name in names:
        click.echo(name)


@context.command(name="set")
@click.option("--name", "-n", default=DEFAULT_CONTEXT_NAME, show_default=True, help="The name of the context")
@click.option("--project", "-p", required=True, help="The project identifier, exactly as shown in Expensify")
@click.option("--email", "-e", required=True, help="The email address used to log in to Expensify")
@click.option(
    "--country",
    "-c",
    type=click.Choice([c.value for c in Country], case_sensitive=False),
    default=Country.GERMANY.value,
    show_default=True,
    help="The country you are in; decides currency and rates",
)
@click.option("--travel-tag-name", default="Travel", show_default=True, help="Tag name for travel expenses")
@click.option("--travel-tag-unbillable", is_flag=True, help="Make all travel expenses unbillable")
@click.option(
    "--category-per-diems-name",
    default="Per Diem",
    show_default=True,
    help="Category name for per-diem expenses",
)
@click.pass_context
def set_context(
    ctx: click.Context,
    name: str,
    project: str,
    email: str,
    country: str,
    travel_tag_name: str,
    travel_tag_unbillable: bool,
    category_per_diems_name: str,
) -> None:
    """Set the optionally named context to the given values."""
    user = UserContext(
        project=project,
        email=email,
        country=Country.parse(country),
        categories=Categories(per_diems=Category(name=category_per_diems_name)),
        tags=Tags(travel=Tag(name=travel_tag_name, billable=not travel_tag_unbillable)),
    )
    try:
        path = _store(ctx).save(name, user)
    except OSError as e:
        raise click.ClickException(f"Failed to write context '{name}': {e}") from e

    if ctx.obj.get("verbose", False):
        click.echo(f"Wrote {path}", err=True)
    click.echo(f"Context '{name}' set successfully")


@context.command(name="get")
@click.argument("name", default=DEFAULT_CONTEXT_NAME)
@click.pass_context
def get_context(ctx: click.Context, name: str) -> None:
    """Show a named context."""
    store = _store(ctx)
    try:
        user = store.load(name)
    except ExpendError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Showing context at '{store.path_for(name)}'")
    click.echo(yaml.safe_dump(user.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True))
