"""CLI module for the contact intake service."""

from portfolio_contact.cli.main import app, main

__all__ = ["app", "main"]
