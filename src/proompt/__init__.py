"""proompt: run structured, repeatable AI prompts through an assistant CLI."""

__version__ = "1.0.0"
