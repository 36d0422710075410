"""CLI for form-sync.

Replays scripted login-form sessions against scripted transport responses,
which makes submission behavior reproducible without a UI or a server.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from form_sync import __version__
from form_sync.config import CONFIG_ENV_VAR, FormConfig, get_config_path, load_config
from form_sync.core.errors import ConfigError, FormSyncError
from form_sync.diagnostics import AttemptRecord
from form_sync.form import FormSession, create_login_session
from form_sync.io import read_jsonl, write_jsonl
from form_sync.remote.transport import ScriptedTransport
from form_sync.ui.notifications import ConsoleNotifier
from form_sync.ui.visibility import VisibilityFlag
from form_sync.validation.schema import JsonSchema

app = typer.Typer(
    name="form-sync",
    help="Submission controller for client-side forms.",
    no_args_is_help=True,
)
console = Console()

ACTIONS = ("set", "submit", "reset", "clear_errors", "open", "close")


def version_callback(value: bool) -> None:
    if value:
        console.print(f"form-sync version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """form-sync: Submission controller for client-side forms."""
    pass


def _load_config_or_exit(config_path: Path | None) -> FormConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


async def _replay(session: FormSession, events: list[dict[str, Any]]) -> list[AttemptRecord]:
    """Apply scripted UI events to a session, in order."""
    records: list[AttemptRecord] = []
    for step, event in enumerate(events, 1):
        action = event.get("action")
        if action == "set":
            session.set_field(event["field"], event["value"])
        elif action == "submit":
            record = await session.submit()
            records.append(record)
            console.print(f"  attempt {record.attempt}: [bold]{record.status.value}[/bold]")
        elif action == "reset":
            session.reset(event.get("field"))
        elif action == "clear_errors":
            session.clear_errors()
        elif action == "open":
            session.visibility.open()
        elif action == "close":
            session.visibility.close()
        else:
            raise ValueError(
                f"Step {step}: unknown action {action!r} (expected one of: {', '.join(ACTIONS)})"
            )
    return records


def _state_table(session: FormSession, sensitive_field: str) -> Table:
    table = Table(title="Final form state")
    table.add_column("Field")
    table.add_column("Value")
    table.add_column("Error")

    for name, value in session.remote.values.items():
        shown = "*" * len(value) if name == sensitive_field and isinstance(value, str) else repr(value)
        table.add_row(name, escape(shown), escape(session.store.error_for(name) or ""))
    for name, message in session.store.general_errors().items():
        table.add_row(escape(name), "", escape(message))
    return table


@app.command()
def run(
    script_path: Annotated[
        Path,
        typer.Option("--script", "-s", help="JSONL file of UI events"),
    ],
    responses_path: Annotated[
        Path,
        typer.Option("--responses", "-r", help="JSONL file of transport responses"),
    ],
    output_path: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Attempt records JSONL output path"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", envvar=CONFIG_ENV_VAR, help="Path to config YAML"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING)"),
    ] = "WARNING",
) -> None:
    """Replay a scripted login session.

    Event records look like {"action": "set", "field": "email", "value": "a@b.com"},
    {"action": "submit"}, {"action": "close"}. Response records look like
    {"ok": true} or {"ok": false, "errors": {"password": "Invalid credentials"}}.
    """
    logging.basicConfig(level=log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    for path in (script_path, responses_path):
        if not path.exists():
            console.print(f"[red]Error:[/red] File not found: {path}")
            raise typer.Exit(1)

    config = _load_config_or_exit(config_path)

    try:
        events = list(read_jsonl(script_path))
        transport = ScriptedTransport.from_records(read_jsonl(responses_path))
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[bold]form-sync[/bold] v{__version__}")
    console.print(f"  Script: {script_path} ({len(events)} events)")
    console.print(f"  Responses: {responses_path} ({transport.pending} scripted)")
    console.print(f"  Endpoint: {config.endpoint}")

    visibility = VisibilityFlag(is_open=True)
    with create_login_session(transport, ConsoleNotifier(console), visibility, config) as session:
        try:
            records = asyncio.run(_replay(session, events))
        except (FormSyncError, KeyError, ValueError) as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

        console.print()
        console.print(_state_table(session, config.sensitive_field))
        console.print(f"  Form open: {visibility.is_open}")

    summary = session.orchestrator.attempts.summary()
    console.print("\n[bold]Summary:[/bold]")
    console.print(f"  Attempts: {len(records)}")
    for status, count in summary.items():
        if count:
            console.print(f"  {status}: {count}")
    console.print(f"  Transport calls: {len(transport.calls)}")

    if output_path is not None:
        written = write_jsonl(output_path, records)
        console.print(f"  Records written: {written}")


@app.command()
def validate(
    values_path: Annotated[
        Path,
        typer.Argument(help="JSON file with field values"),
    ],
    schema_path: Annotated[
        Path,
        typer.Option("--schema", "-s", help="JSON Schema file"),
    ],
) -> None:
    """Gate a set of values against a JSON Schema and print field errors."""
    import jsonschema

    for path in (values_path, schema_path):
        if not path.exists():
            console.print(f"[red]Error:[/red] File not found: {path}")
            raise typer.Exit(1)

    loaded = []
    for path in (values_path, schema_path):
        try:
            loaded.append(json.loads(path.read_text()))
        except json.JSONDecodeError as e:
            console.print(f"[red]Error:[/red] Invalid JSON in {path}: {escape(str(e))}")
            raise typer.Exit(1)
    values, schema = loaded

    try:
        errors = JsonSchema(schema).validate(values)
    except jsonschema.SchemaError as e:
        console.print(f"[red]Invalid schema:[/red] {escape(e.message)}")
        raise typer.Exit(1)

    if not errors:
        console.print(f"[green]Valid:[/green] {values_path}")
        return

    for field, message in errors.items():
        console.print(f"[red]{escape(field)}:[/red] {escape(message)}")
    raise typer.Exit(1)


@app.command("show-config")
def show_config(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", envvar=CONFIG_ENV_VAR, help="Path to config YAML"),
    ] = None,
) -> None:
    """Print the effective configuration."""
    config = _load_config_or_exit(config_path)
    source = config_path if config_path is not None else get_config_path()
    console.print(f"[bold]Config source:[/bold] {source}")
    console.print_json(config.model_dump_json())


if __name__ == "__main__":
    app()
