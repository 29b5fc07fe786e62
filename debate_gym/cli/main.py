"""Debate Gym CLI — gym command."""

from __future__ import annotations

import json
from typing import Any

import click

from debate_gym.cli.client import GymClient


def _format_table(rows: list[dict], columns: list[str]) -> str:
    """Simple table formatter."""
    if not rows:
        return "No results."
    widths = {c: len(c) for c in columns}
    for row in rows:
        for c in columns:
            widths[c] = max(widths[c], len(str(row.get(c, ""))))

    header = "  ".join(c.upper().ljust(widths[c]) for c in columns)
    separator = "  ".join("-" * widths[c] for c in columns)
    lines = [header, separator]
    for row in rows:
        lines.append("  ".join(str(row.get(c, "")).ljust(widths[c]) for c in columns))
    return "\n".join(lines)


@click.group()
@click.option("--api", default="http://localhost:8400", envvar="GYM_API", help="API base URL")
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.option("--token", default=None, envvar="GYM_TOKEN", help="Supabase access token")
@click.pass_context
def cli(ctx: click.Context, api: str, output_format: str, token: str | None) -> None:
    """Debate Gym CLI — browse the void and submit drills."""
    ctx.obj = GymClient(base_url=api, auth_token=token)
    ctx.meta["output_format"] = output_format


def _output(ctx: click.Context, data: Any, columns: list[str] | None = None) -> None:
    fmt = ctx.meta.get("output_format", "table")
    if fmt == "table" and isinstance(data, list) and columns:
        click.echo(_format_table(data, columns))
    else:
        click.echo(json.dumps(data, indent=2, default=str))


def _call(fn, *args: Any) -> Any:
    try:
        return fn(*args)
    except RuntimeError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.pass_context
def masks(ctx: click.Context) -> None:
    """List the masks available in the void."""
    client: GymClient = ctx.obj
    _output(ctx, _call(client.list_masks), ["id", "name", "icon_type", "color"])


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show live void counters."""
    client: GymClient = ctx.obj
    data = _call(client.stats)
    if ctx.meta.get("output_format") == "json":
        _output(ctx, data)
        return
    for key, value in data.items():
        click.echo(f"{key}: {value}")


@cli.command()
@click.option("--page", default=1, type=int)
@click.option("--limit", default=50, type=int)
@click.pass_context
def messages(ctx: click.Context, page: int, limit: int) -> None:
    """Show recent void messages."""
    client: GymClient = ctx.obj
    data = _call(client.list_messages, page, limit)
    _output(ctx, data["messages"], ["mask_name", "content", "created_at"])
    if data.get("hasMore"):
        click.echo(f"-- {data['total']} total, more on page {page + 1}")


@cli.command()
@click.argument("session_id")
@click.argument("content")
@click.pass_context
def post(ctx: click.Context, session_id: str, content: str) -> None:
    """Post an anonymous message."""
    client: GymClient = ctx.obj
    message = _call(client.post_message, session_id, content)
    click.echo(f"Posted as {message['mask_name']}")


# --- Session commands ---


@cli.group()
def session() -> None:
    """Manage your void session."""


@session.command("show")
@click.pass_context
def session_show(ctx: click.Context) -> None:
    """Show your active session."""
    client: GymClient = ctx.obj
    _output(ctx, _call(client.get_session))


@session.command("start")
@click.argument("mask_id")
@click.pass_context
def session_start(ctx: click.Context, mask_id: str) -> None:
    """Enter the void with a mask."""
    client: GymClient = ctx.obj
    data = _call(client.start_session, mask_id)
    click.echo(f"Entered the void as {data['mask_name']} until {data['expires_at']}")


@session.command("end")
@click.argument("session_id")
@click.pass_context
def session_end(ctx: click.Context, session_id: str) -> None:
    """Leave the void."""
    client: GymClient = ctx.obj
    _call(client.end_session, session_id)
    click.echo(f"Ended session {session_id}")


# --- Drill commands ---


@cli.command()
@click.argument("drill_id")
@click.argument("score", type=float)
@click.pass_context
def attempt(ctx: click.Context, drill_id: str, score: float) -> None:
    """Submit a drill score."""
    client: GymClient = ctx.obj
    data = _call(client.submit_attempt, drill_id, score)
    click.echo(f"Recorded attempt {data['id']}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
