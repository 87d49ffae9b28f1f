# ledger_tracker/cli.py
import logging

import click
from dotenv import load_dotenv

from ledger_tracker.config import load_config
from ledger_tracker.core.errors import LedgerError
from ledger_tracker.core.store import TransactionStore
from ledger_tracker.core.summary import SummaryEngine
from ledger_tracker.loaders import get_loader
from ledger_tracker.outputs import render_summary, write_transactions
from ledger_tracker.parsing import parse_year_month
from ledger_tracker.shell import InteractiveShell, report_load


@click.group(invoke_without_command=True)
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to a YAML config file (default: ./ledgerly.yaml if present)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file with LEDGER_* overrides'
)
@click.option(
    '--load', 'load_files',
    multiple=True,
    type=click.Path(dir_okay=False),
    help='Ledger file to load before starting. May be given more than once.'
)
@click.pass_context
def main(ctx, config_path, env_file, load_files):
    """
    Personal finance ledger. With no command, start the interactive menu
    for recording income and expenses, loading ledger files and viewing
    monthly summaries.
    """
    if env_file:
        load_dotenv(env_file)

    try:
        cfg = load_config(config_path)
    except LedgerError as e:
        raise click.ClickException(str(e))

    logging.basicConfig(level=cfg['log_level'])

    store = TransactionStore()
    loader = get_loader(store, cfg)
    for path in list(cfg['load_files']) + list(load_files):
        report_load(path, loader.load(path))

    ctx.obj = {'config': cfg, 'store': store, 'loader': loader}

    if ctx.invoked_subcommand is None:
        InteractiveShell(store, loader, cfg['currency_symbol']).run()


@main.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    '--month', 'month_str',
    required=True,
    help='Month to summarize, as YYYY-MM'
)
@click.pass_obj
def summary(obj, files, month_str):
    """Load FILES and print the summary for one month."""
    ym = parse_year_month(month_str)
    if not ym.ok:
        raise click.BadParameter(str(ym.error), param_hint="'--month'")

    for path in files:
        report_load(path, obj['loader'].load(path))

    year, month = ym.value
    result = SummaryEngine(obj['store']).summarize(year, month)
    click.echo()
    for line in render_summary(result, obj['config']['currency_symbol']):
        click.echo(line)


@main.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    '--output', 'output_path',
    required=True,
    type=click.Path(dir_okay=False),
    help='Ledger file to write'
)
@click.pass_obj
def export(obj, files, output_path):
    """Load FILES and write every transaction to a single ledger file."""
    failed = False
    for path in files:
        if report_load(path, obj['loader'].load(path)).errors:
            failed = True

    if failed and not obj['store'].all():
        raise click.ClickException(f"Nothing was loaded; {output_path} left unchanged.")

    try:
        written = write_transactions(
            obj['store'].all(), output_path, encoding=obj['config']['encoding']
        )
    except LedgerError as e:
        raise click.ClickException(str(e))
    click.echo(f"Wrote {written} transaction(s) to {output_path}.")
