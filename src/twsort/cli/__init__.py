from twsort.cli.main import cli

__all__ = ["cli"]
