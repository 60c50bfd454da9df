"""Prepare the parameters of an RDS snapshot copy."""

__version__ = "1.0.0"
