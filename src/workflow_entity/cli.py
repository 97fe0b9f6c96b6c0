"""Command line interface for workflow entity."""

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .events.dispatcher import EventDispatcher
from .events.envelope import ResolvedContext
from .exceptions import WorkflowEntityError
from .infrastructure.session import CapturingRuleMatcher, StaticUserSession
from .infrastructure.translation import CatalogTranslator
from .infrastructure.routing import RouteUrlGenerator
from .infrastructure.sharing import InMemoryShareManager
from .infrastructure.storage import InMemoryRootFolder
from .infrastructure.tags import InMemoryTagManager
from .entity.file_entity import FileEntity
from .models.config import EntityConfig, load_config
from .models.scenario import load_scenario, validate_scenario_json

console = Console()


def _configure(config_path: Optional[Path], verbose: bool) -> EntityConfig:
    cfg = load_config(config_path) if config_path else EntityConfig.default()
    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return cfg


@click.group()
@click.version_option(version=__version__)
def cli():
    """Inspect how filesystem events look to workflow rules."""
    pass


@cli.command()
@click.option(
    '--config',
    type=click.Path(exists=True, path_type=Path),
    help='Configuration file path'
)
def events(config: Optional[Path]):
    """List the events file rules can be triggered by."""
    try:
        cfg = _configure(config, verbose=False)
        root = InMemoryRootFolder()
        entity = FileEntity(
            l10n=CatalogTranslator.for_locale(cfg.l10n_dir, cfg.locale),
            url_generator=RouteUrlGenerator(cfg.base_url),
            root=root,
            share_manager=InMemoryShareManager(root),
            user_session=StaticUserSession(),
            tag_manager=InMemoryTagManager(),
            config=cfg,
        )

        table = Table(title=entity.get_name())
        table.add_column("Event", style="cyan")
        table.add_column("Channel")
        for entity_event in entity.get_events():
            table.add_row(entity_event.display_name, entity_event.event_name)
        console.print(table)

    except WorkflowEntityError as e:
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('scenario', type=click.Path(exists=True, path_type=Path))
@click.option(
    '--config',
    type=click.Path(exists=True, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--check-user',
    'check_users',
    multiple=True,
    help='User id to run the authorization check for (repeatable)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
def describe(scenario: Path, config: Optional[Path], check_users: Tuple[str, ...], verbose: bool):
    """Dispatch the event of SCENARIO and show what the file entity makes of it."""
    try:
        cfg = _configure(config, verbose)
        loaded = load_scenario(scenario)
        entity = loaded.build_entity(cfg)
        matcher = CapturingRuleMatcher()
        contexts: List[ResolvedContext] = []

        def on_event(event_name, event):
            context = entity.prepare_rule_matcher(matcher, event_name, event)
            if context is not None:
                contexts.append(context)

        dispatcher = EventDispatcher()
        dispatcher.add_listener(loaded.event_name, on_event)
        dispatcher.dispatch(loaded.event_name, loaded.event)

        if not contexts:
            console.print(f"[yellow]Event {loaded.event_name} is not a file event[/yellow]")
            return

        context = contexts[0]
        subject = entity.resolve_subject(context)

        table = Table(title="File event", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Channel", context.event_name)
        table.add_row("Kind", context.kind.name if context.kind else "unknown")
        table.add_row("Subject", subject.map(lambda node: f"{escape(node.name)} (#{node.id})").or_else("[dim]unresolved[/dim]"))
        if matcher.file_info:
            storage, path = matcher.file_info
            table.add_row("Storage", str(storage))
            table.add_row("Internal path", escape(path))
        table.add_row("Display text", escape(entity.get_display_text(context)) or "[dim]none[/dim]")
        table.add_row("URL", entity.get_url(context) or "[dim]none[/dim]")
        console.print(table)

        if check_users:
            access_table = Table(title="Authorization")
            access_table.add_column("User", style="cyan")
            access_table.add_column("Allowed")
            for uid in check_users:
                allowed = entity.is_legitimated_for_user_id(context, uid)
                access_table.add_row(uid, "[green]yes[/green]" if allowed else "[red]no[/red]")
            console.print(access_table)

    except WorkflowEntityError as e:
        console.print(f"\n[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('scenario', type=click.Path(exists=True, path_type=Path))
def validate(scenario: Path):
    """Check SCENARIO against the scenario schema."""
    try:
        with open(scenario, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e.msg} at line {e.lineno}, column {e.colno}[/red]")
        sys.exit(1)

    errors = validate_scenario_json(data)
    if errors:
        console.print(f"[red]Found {len(errors)} problem(s) in {scenario}:[/red]")
        for error in errors:
            console.print(f"  • {escape(error)}")
        sys.exit(1)

    console.print(f"[green]✓ {scenario} is a valid scenario[/green]")


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
