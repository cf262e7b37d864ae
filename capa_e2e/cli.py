#!/usr/bin/env python3
"""
End-to-end fixture CLI

Commands:
    roles       Resolve multi-tenancy role ARNs and print them as exports
    quotas      Print the service quotas the suite needs
    settings    Parse the default suite flags and print the resulting settings

Usage:
    capa-e2e roles [--role TAG ...] [--region REGION] [--profile PROFILE] [--format env|json]
    capa-e2e quotas [--pretty/--compact]
    capa-e2e settings [SUITE FLAGS]

Module: cli
"""

import json
import os
import shlex
import sys
import traceback
from typing import Any, Optional, Tuple

import click
from dotenv import load_dotenv

from .auth import MULTI_TENANCY_ROLES, MultitenancyRole
from .config import get_config
from .logging_config import configure_logging
from .quotas import get_limited_resources
from .settings import Settings, create_context, default_flags
from .version import __version__


def format_json(data: Any, pretty: bool = True) -> str:
    """Format data as JSON string"""
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def handle_error(error: Exception, verbose: bool = False) -> None:
    """Print the error to stderr and exit with status 1"""
    if verbose:
        click.echo(f"Error: {type(error).__name__}: {error}", err=True)
        traceback.print_exc()
    else:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="capa-e2e")
def cli():
    """
    cluster-api-provider-aws end-to-end fixtures

    Helpers used to prepare the environment before the suite provisions
    clusters: multi-tenancy role ARNs, quota requirements and suite settings.
    """
    load_dotenv()
    config = get_config()
    configure_logging(config.log_level, json_logs=config.json_logs)


@cli.command()
@click.option(
    "--role",
    "-r",
    "role_tags",
    multiple=True,
    type=click.Choice([role.value for role in MultitenancyRole]),
    help="Role to resolve (repeatable, default: all multi-tenancy roles)",
)
@click.option("--region", default="", help="AWS region for the IAM client (default: AWS_REGION)")
@click.option("--profile", default=None, help="AWS profile to use (default: AWS_PROFILE)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["env", "json"], case_sensitive=False),
    default="env",
    show_default=True,
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose error output")
def roles(role_tags: Tuple[str, ...], region: str, profile: Optional[str], output_format: str, verbose: bool):
    """
    Resolve multi-tenancy role ARNs and export their variables

    Prints the exported variables so the output can be evaluated by a shell.

    Examples:
        capa-e2e roles
        capa-e2e roles --role Jump --role Nested
        eval "$(capa-e2e roles --region us-east-1)"
    """
    try:
        context = create_context(config=get_config(aws_region=region, aws_profile=profile))
        selected = [MultitenancyRole.from_tag(tag) for tag in role_tags] or list(MULTI_TENANCY_ROLES)

        context.resolver.set_all_env_vars(context.session, selected)

        exported = {
            name: os.environ[name]
            for role in selected
            for name in (role.env_var_arn, role.env_var_name, role.env_var_identity)
        }

        if output_format.lower() == "json":
            click.echo(format_json(exported))
        else:
            for name, value in exported.items():
                click.echo(f"export {name}={shlex.quote(value)}")

    except Exception as e:
        handle_error(e, verbose)


@cli.command()
@click.option("--pretty/--compact", default=True, help="Pretty print JSON output", show_default=True)
def quotas(pretty: bool):
    """
    Print the service quotas required by the suite

    Examples:
        capa-e2e quotas
        capa-e2e quotas --compact
    """
    table = {key: quota.to_dict() for key, quota in get_limited_resources().items()}
    click.echo(format_json(table, pretty=pretty))


@cli.command()
@default_flags
@click.option("--pretty/--compact", default=True, help="Pretty print JSON output", show_default=True)
def settings(settings: Settings, pretty: bool):
    """
    Parse the default suite flags and print the resulting settings

    Examples:
        capa-e2e settings --config-path e2e_conf.yaml --kubetest.ginkgo-nodes 4
    """
    click.echo(format_json(settings.model_dump(), pretty=pretty))


def main():
    cli()


if __name__ == "__main__":
    main()
