"""CLI commands for staffgen."""

from . import generate, config_cmd

__all__ = ["generate", "config_cmd"]
