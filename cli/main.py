# cli/main.py
import logging
import click

from .commands.db import init_db, stats
from .commands.benchmark import benchmark

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='SQLAlchemy database URL (defaults to $DATABASE_URL, then sqlite:///catalog.db)')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, database_url, verbose):
    """Media catalog persistence tools"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(init_db)
cli.add_command(stats)
cli.add_command(benchmark)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
