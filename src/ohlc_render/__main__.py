"""Entry point for running the renderer as a module.

This allows the CLI to be invoked with ``python -m ohlc_render``.
"""

from .cli import cli

if __name__ == "__main__":  # pragma: no cover
    cli()
