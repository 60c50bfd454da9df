#!/usr/bin/env python3
"""
RDS Snapshot Copy - CLI
Resolve the database, KMS key and snapshot for an RDS snapshot copy
"""

import click

from rds_snapshot_copy import __version__
from rds_snapshot_copy.core.models import DatabaseType
from rds_snapshot_copy.jobs.resolve_parameters import ResolveParametersJob
from rds_snapshot_copy.utils.config import ConfigManager
from rds_snapshot_copy.utils.decorators import cli_operation, handle_output
from rds_snapshot_copy.utils.exceptions import ValidationRules
from rds_snapshot_copy.utils.logger import set_level, setup_logger


def setup_logging(verbose: bool = False):
    level = "DEBUG" if verbose else "INFO"
    logger = setup_logger("rds_snapshot_copy.cli", "cli.log", level)
    set_level(level)
    return logger


def validate_account_ids(ctx, param, value):
    invalid = [account_id for account_id in value if not ValidationRules.validate_aws_account_id(account_id)]
    if invalid:
        raise click.BadParameter(f"not 12-digit AWS account ids: {', '.join(invalid)}")
    return list(value)


@click.group()
@click.option("--region", help="AWS region (overrides configuration)")
@click.option("--profile", help="AWS named profile (overrides configuration)")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    help="Directory holding settings.yaml",
)
@click.pass_context
def cli(ctx, region, profile, config_dir):
    """RDS Snapshot Copy - pick the database, key and snapshot to copy"""
    ctx.ensure_object(dict)

    ctx.obj["region"] = region
    ctx.obj["profile"] = profile
    ctx.obj["config"] = ConfigManager(config_dir)


@cli.command()
@click.option("--db-identifier", "-d", help="DB instance or cluster identifier")
@click.option("--kms-key-id", "-k", help="KMS key id used to encrypt the copy")
@click.option(
    "--db-type",
    "-t",
    default="instance",
    show_default=True,
    type=click.Choice(["instance", "cluster", "database"], case_sensitive=False),
    help="Kind of resource the identifier names ('database' means instance)",
)
@click.option("--snapshot-id", "-s", help="Snapshot to copy")
@click.option(
    "--use-existing/--no-use-existing",
    default=None,
    help="Answer 'use an existing snapshot' without prompting",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the result as YAML")
@click.option("--verbose", is_flag=True, help="Enable verbose output")
@click.argument("account_ids", nargs=-1, callback=validate_account_ids)
@click.pass_context
@cli_operation
def resolve(ctx, db_identifier, kms_key_id, db_type, snapshot_id, use_existing, output, verbose, account_ids):
    """Resolve the parameters of a snapshot copy

    Anything not given as an option is listed from RDS or KMS and offered as
    a choice. ACCOUNT_IDS are the accounts the snapshot is meant to be
    shared with; their current restore access is reported.
    """
    setup_logging(verbose)
    db_type = DatabaseType.from_string(db_type)

    job = ResolveParametersJob(
        config_manager=ctx.obj["config"],
        profile=ctx.obj["profile"],
        region=ctx.obj["region"],
    )
    params = job.execute(
        db_identifier=db_identifier,
        kms_key_id=kms_key_id,
        db_type=db_type,
        snapshot_id=snapshot_id,
        use_existing=use_existing,
    )

    # Sharing is looked up first so a failure leaves nothing on stdout
    status = job.sharing_status(params, account_ids, db_type) if account_ids else {}

    handle_output(params, output, job.correlation_id)

    if status:
        for account_id, shared in status.items():
            state = "shared" if shared else "not shared"
            click.echo(f"{account_id}: {state}")


@cli.command()
def version():
    """Show version information"""
    click.echo(f"RDS Snapshot Copy - Version {__version__}")


if __name__ == "__main__":
    cli()
