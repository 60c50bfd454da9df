"""Decorator patterns for snapshot copy commands."""

import click
import yaml
from functools import wraps
from typing import Any, Callable, Optional

from rds_snapshot_copy.utils.logger import setup_logger


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Centralized error handling for operations.

    Args:
        operation_name: Name of the operation that failed
        error: Exception that occurred
    """
    error_msg = f"Error in {operation_name}: {str(error)}"
    click.echo(error_msg, err=True)

    logger = setup_logger("rds_snapshot_copy.errors", "errors.log")
    logger.error(
        error_msg,
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def handle_output(
    results: Any,
    output_path: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Print the results, or write them to ``output_path`` as YAML."""
    logger = setup_logger("rds_snapshot_copy.output", "operations.log")

    if output_path:
        data = results.to_dict() if hasattr(results, "to_dict") else results
        with open(output_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        click.echo(f"Results saved to {output_path}", err=True)
        logger.info(f"[{correlation_id or 'N/A'}] Results saved to {output_path}")
    else:
        click.echo(str(results))
        logger.info(f"[{correlation_id or 'N/A'}] Operation completed: {type(results).__name__}")


def cli_operation(func: Callable) -> Callable:
    """Report failures of a click command and exit non-zero.

    Errors are shown as raised; nothing is retried.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        operation_name = func.__name__.replace("_", "-")
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.ClickException):
            raise
        except Exception as e:
            handle_operation_error(operation_name, e)
            raise click.exceptions.Exit(1) from e

    return wrapper
