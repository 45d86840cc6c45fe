import logging
import sys

import click
from pydantic import ValidationError

from parkinglot.dispatcher.dispatcher import CommandDispatcher
from parkinglot.lot_config.lot_config import LotConfig
from parkinglot.outcome.outcome import Fatal

logger = logging.getLogger(__name__)


def load_config(config_path):
    if config_path is None:
        return LotConfig()
    try:
        return LotConfig.from_json_file(config_path)
    except (TypeError, ValueError, ValidationError) as e:
        raise click.BadParameter(str(e), param_hint='--config')


def run_session(dispatcher: CommandDispatcher, lines):
    """Feed lines to the dispatcher until one ends the session.

    Returns the process exit code.
    """
    for line in lines:
        line = line.rstrip('\n')
        if dispatcher.config.echo_commands:
            click.echo(line)

        outcome = dispatcher.dispatch(line)
        for output_line in outcome.lines:
            click.echo(output_line)

        if outcome.ends_session():
            if isinstance(outcome, Fatal):
                click.echo(outcome.error)
                click.echo('fatal error detected, stopping program')
                return dispatcher.config.fatal_exit_code
            return 0

    logger.debug('end of input')
    return 0


@click.command()
@click.option('--config', 'config_path', default=None, type=click.Path(exists=True, dir_okay=False),
              help='json file overriding the default lot configuration')
@click.option('--verbose', is_flag=True, default=False, help='log every dispatched command to stderr')
@click.argument('input_file', type=click.File('r', errors='replace'), default='-')
def run(config_path, verbose, input_file):
    """Run parking lot commands read from INPUT_FILE, or stdin by default."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format='%(asctime)s %(name)s %(levelname)s %(message)s'
        )

    dispatcher = CommandDispatcher(config=load_config(config_path))
    exit_code = run_session(dispatcher, input_file)
    sys.exit(exit_code)


if __name__ == '__main__':
    run()
