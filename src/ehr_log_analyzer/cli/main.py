"""Main CLI entry point."""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.loader import LogLoader
from ..core.result_view import ResultView, ALL
from ..utils.config import ConfigManager
from ..utils.logger import setup_logger
from ..utils.exceptions import ConfigurationError, LogAnalyzerError


console = Console()

TABS = ["players", "rpcs", "chats", "eac"]

SUMMARY_CARDS = [
    ("total_players", "Total Players", "cyan"),
    ("rpc_events", "RPC Events", "green"),
    ("chat_messages", "Chat Messages", "cyan"),
    ("eac_reports", "EAC Reports", "red"),
]


def _load_view(ctx: click.Context, log_file: str) -> ResultView:
    config = ctx.obj["config"]
    with console.status(f"[cyan]Processing {escape(log_file)}...[/cyan]"):
        result = LogLoader(config).load(log_file)
    return ResultView(result, config)


def _fail(error: LogAnalyzerError):
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    sys.exit(1)


def _tab_options(func):
    func = click.option('--filter', '-F', 'filter_value', default=ALL, show_default=True,
                        help='RPC type (rpcs tab) or severity Fatal/Error (eac tab)')(func)
    func = click.option('--search', '-s', default='', help='Case-insensitive text search')(func)
    func = click.option('--tab', '-t', default='players', show_default=True,
                        type=click.Choice(TABS), help='Result table to use')(func)
    return func


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--config-dir', default=None, help='Configuration directory path')
@click.option('--app-log-file', help='Log file for application logs')
@click.version_option(package_name='ehr-log-analyzer')
@click.pass_context
def main(ctx, verbose, config_dir, app_log_file):
    """Analyze Endless Host Roles game client logs saved as HTML."""

    log_level = "DEBUG" if verbose else "WARNING"
    setup_logger(level=log_level, log_file=app_log_file)

    ctx.ensure_object(dict)
    config = ConfigManager(config_dir)
    try:
        config.settings
    except (FileNotFoundError, ValueError) as e:
        _fail(ConfigurationError(str(e)))
    ctx.obj["config"] = config


@main.command()
@click.argument('log_file', type=click.Path(dir_okay=False))
@click.pass_context
def summary(ctx, log_file):
    """Show player, RPC, chat and EAC report totals."""
    try:
        view = _load_view(ctx, log_file)
    except LogAnalyzerError as e:
        _fail(e)

    metrics = view.summary()
    table = Table(title="EHR Log Summary")
    for _, label, color in SUMMARY_CARDS:
        table.add_column(label, style=f"bold {color}", justify="center")
    table.add_row(*(str(metrics[key]) for key, _, _ in SUMMARY_CARDS))
    console.print(table)


@main.command()
@click.argument('log_file', type=click.Path(dir_okay=False))
@_tab_options
@click.option('--limit', '-n', type=int, default=None, help='Show at most N rows')
@click.pass_context
def show(ctx, log_file, tab, search, filter_value, limit):
    """Print one result table, optionally searched and filtered."""
    try:
        view = _load_view(ctx, log_file)
        df = view.filtered(tab, search, filter_value)
        tab_config = view.tab_config(tab)
    except LogAnalyzerError as e:
        _fail(e)

    columns = tab_config.get("display_columns", tab_config["columns"])
    table = Table(title=tab_config["title"], show_lines=False)
    for col in columns:
        table.add_column(col)

    rows = df if limit is None else df.head(limit)
    for _, row in rows.iterrows():
        table.add_row(*(escape(str(row[col])) for col in columns))

    if df.empty:
        console.print(f"[yellow]{tab_config['empty_message']}[/yellow]")
    else:
        console.print(table)

    if tab in ("rpcs", "eac"):
        options = ", ".join(view.filter_options(tab)) or "none"
        console.print(f"[dim]Filters: {escape(options)}[/dim]")
    console.print(f"Showing {len(df)} results")


@main.command()
@click.argument('log_file', type=click.Path(dir_okay=False))
@_tab_options
@click.option('--output', '-o', type=click.Path(), default=None,
              help='Output CSV file or directory (default: tab file name in current directory)')
@click.pass_context
def export(ctx, log_file, tab, search, filter_value, output):
    """Export the filtered rows of one table to CSV."""
    try:
        view = _load_view(ctx, log_file)
        path = view.export_csv(tab, output, search, filter_value)
    except LogAnalyzerError as e:
        _fail(e)

    console.print(f"[green]✓ Exported {tab} to {escape(str(path))}[/green]")


if __name__ == '__main__':
    main()
