"""GitExpress: generate code with an AI model and commit it to GitHub."""

__version__ = "0.1.0"
