import asyncio
import logging
import os
import sys
from pathlib import Path

import click

from ._version import __version__
from .configuration import load_config_from_env
from .error_handling import ConfigurationError
from .logging_config import configure_logging
from .server import load_environment_variables, serve


@click.command()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v INFO, -vv DEBUG)")
@click.option(
    "--env-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Additional directory to load a .env file from",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write DEBUG logs to this file",
)
@click.option(
    "--test-mode",
    is_flag=True,
    help="Run in test mode for CI (stays alive without immediate stdio)",
)
@click.version_option(__version__)
def main(verbose: int, env_dir: Path | None, log_file: Path | None, test_mode: bool) -> None:
    """MCP GitHub Server - GitHub repository operations for MCP"""
    if verbose == 1:
        os.environ["LOG_LEVEL"] = "INFO"
    elif verbose >= 2:
        os.environ["LOG_LEVEL"] = "DEBUG"

    configure_logging(os.environ.get("LOG_LEVEL", "WARNING"), log_file)
    logger = logging.getLogger(__name__)

    load_environment_variables(env_dir)

    try:
        config = load_config_from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        click.echo(str(e), err=True)
        sys.exit(1)

    try:
        asyncio.run(serve(config, test_mode=test_mode))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.critical(f"Fatal error in main(): {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
