"""Console script entry point for the ``monthname`` command.

System Role:
    Lives at package level, outside ``adapters``, so it may import the
    composition root and hand production wiring to the CLI.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
