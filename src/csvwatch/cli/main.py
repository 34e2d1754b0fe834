#!/usr/bin/env python3
"""
csvwatch CLI - Main entry point
"""

from pathlib import Path
from typing import Optional

import click
from colorama import Fore, Style, init

from csvwatch import __version__
from csvwatch.cli.utils import fail, load_config_with_fallback
from csvwatch.core.config import RELOAD_POLICIES
from csvwatch.core.errors import ConfigError, WatchPathError
from csvwatch.core.watcher import ChangeNotifier, make_reload_policy
from csvwatch.utils.logging_utils import setup_logger
from csvwatch.utils.path_utils import resolve_path
from csvwatch.web.app import create_app
from csvwatch.web.livereload import LiveReloadServer
from csvwatch.web.serving import bind_server

# Initialize colorama for cross-platform colored output
init()


@click.command()
@click.option('--target', '-t', type=click.Path(),
              help='Target CSV file path (required)')
@click.option('--port', '-p', type=int,
              help='Port number (default: 3000)')
@click.option('--stylesheet', '-s', type=click.Path(),
              help='Custom CSS file path (ex. ./style.css)')
@click.option('--config', '-c', type=click.Path(),
              help='Path to configuration file (TOML)')
@click.option('--host',
              help='Address to bind (default: 0.0.0.0)')
@click.option('--livereload-port', type=int,
              help='Port for the live-reload script and websocket (default: 35729)')
@click.option('--reload-policy', type=click.Choice(RELOAD_POLICIES),
              help='Which file writes trigger a reload (default: exact)')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.version_option(version=__version__)
def main(target: Optional[str], port: Optional[int], stylesheet: Optional[str],
         config: Optional[str], host: Optional[str], livereload_port: Optional[int],
         reload_policy: Optional[str], verbose: bool):
    """csvwatch - Serve a CSV file as an HTML table that reloads on change.

    Open http://localhost:PORT/result to view the table. Add ?e=AB to hide
    rows whose first column is A or B.
    """
    setup_logger('csvwatch', 'DEBUG' if verbose else 'INFO')

    config_obj = load_config_with_fallback(config, Path.cwd(), verbose)
    try:
        config_obj = config_obj.merged(
            target=target,
            port=port,
            stylesheet=stylesheet,
            host=host,
            livereload_port=livereload_port,
            reload_policy=reload_policy,
        )
    except ConfigError as e:
        fail(str(e))

    if not verbose:
        setup_logger('csvwatch', config_obj.log_level)

    if config_obj.target is None:
        fail("-t option required")

    target_path = resolve_path(str(config_obj.target))
    stylesheet_path = resolve_path(str(config_obj.stylesheet)) if config_obj.stylesheet else None
    config_obj = config_obj.merged(target=target_path, stylesheet=stylesheet_path)

    click.echo(f"{Fore.GREEN}Starting csvwatch...{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Target: {target_path}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Stylesheet: {stylesheet_path or 'built-in'}{Style.RESET_ALL}")
    click.echo(f"{Fore.CYAN}Reload policy: {config_obj.reload_policy}{Style.RESET_ALL}")

    livereload_server = LiveReloadServer(host=config_obj.host, port=config_obj.livereload_port)
    notifier = ChangeNotifier(
        target_path,
        livereload_server,
        should_forward=make_reload_policy(config_obj.reload_policy, target_path)
    )

    try:
        notifier.start()
        livereload_server.start()
        http_server = bind_server(config_obj.host, config_obj.port, create_app(config_obj))
    except (OSError, WatchPathError) as e:
        notifier.stop()
        livereload_server.stop()
        fail(str(e), verbose)

    click.echo(f"{Fore.GREEN}Serving http://localhost:{config_obj.port}/result{Style.RESET_ALL}")
    click.echo(f"{Fore.YELLOW}Press Ctrl+C to stop...{Style.RESET_ALL}")

    try:
        http_server.serve_forever()
    except KeyboardInterrupt:
        click.echo(f"\n{Fore.YELLOW}Stopping csvwatch...{Style.RESET_ALL}")
    finally:
        http_server.server_close()
        notifier.stop()
        livereload_server.stop()
    click.echo(f"{Fore.GREEN}csvwatch stopped.{Style.RESET_ALL}")


if __name__ == '__main__':
    main()
