"""tgplay: paged terminal navigator for goto targets, commands and notes."""

__version__ = "0.3.0"
