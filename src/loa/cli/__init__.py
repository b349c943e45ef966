"""Text front end: the interactive command session."""

from loa.cli.session import TextSession

__all__ = ["TextSession"]
