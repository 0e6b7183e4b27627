from .gatherer import cli, main

__all__ = ["cli", "main"]
