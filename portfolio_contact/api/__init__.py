"""HTTP binding for the contact intake service."""

from portfolio_contact.api.app import create_app

__all__ = ["create_app"]
