"""CLI entry point for issuescribe.

Fetches one issue or pull request and its comments and writes them to a
plain-text transcript. Owner, repo and issue number are remembered between
runs, so after the first run any of them may be omitted:

  issuescribe -O octocat -R hello-world -I 42
  issuescribe -I 43
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from issuescribe_core.errors import IssueScribeError
from issuescribe_store.cache import CacheError
from issuescribe_store.models import ParameterSet

console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _run(config_path: str, overrides: ParameterSet, output: str | None = None) -> None:
    from issuescribe_core.config import load_config
    from issuescribe_core.errors import ConfigurationError
    from issuescribe_core.fetcher import fetch_thread
    from issuescribe_store.cache import resolve_parameters
    from issuescribe_cli.auth import resolve_access_token

    config = load_config(config_path, cli_overrides={"output_file": output})

    params = resolve_parameters(overrides, filename=config["cache_file"])

    # Checked after the cache is written, but before any request is sent.
    token = resolve_access_token(config["token_env"])
    if not token:
        raise ConfigurationError(f"GitHub access token not found in environment (${config['token_env']}).")

    summary = fetch_thread(
        params.owner,
        params.repo,
        params.issue_number,
        token,
        output_path=config["output_file"],
        base_url=config["base_url"],
    )
    console.print(
        f"Issue details and {summary.total_comments} comments have been fetched "
        f"and saved to [bold]{summary.output_path}[/bold]."
    )


@click.command()
@click.version_option(
    version=importlib.metadata.version("issuescribe"),
    prog_name="issuescribe",
)
@click.option("-O", "--owner", default="", help="Repository owner.")
@click.option("-R", "--repo", default="", help="Repository name.")
@click.option("-I", "--issueNumber", "issue_number", default="", help="Reference number of the issue or PR.")
@click.option(
    "--config",
    "config_path",
    default=".issuescribe.yml",
    show_default=True,
    help="Path to the settings file.",
    envvar="ISSUESCRIBE_CONFIG",
)
@click.option("--output", default=None, help="Transcript file to write. Overrides the settings file.")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and cache activity.")
def main(owner: str, repo: str, issue_number: str, config_path: str, output: str | None, verbose: bool):
    """Save a GitHub issue or PR and its comment thread as plain text.

    \b
    Required environment variables:
      GITHUB_ACCESS_TOKEN  GitHub personal access token
    """
    _configure_logging(verbose)

    overrides = ParameterSet(owner=owner, repo=repo, issue_number=issue_number)
    try:
        _run(config_path, overrides, output)
    except (IssueScribeError, CacheError) as e:
        raise click.ClickException(str(e)) from e
