"""
Utility Functions Module for Release Image Tags

Helpers that don't fit into the more specific modules.

Functions:
    setup_logging: Configures application logging
    write_github_output: Appends step outputs for GitHub Actions
"""

import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def write_github_output(path: str, outputs: Dict[str, str]) -> None:
    """Append ``key=value`` lines to the GitHub Actions output file.

    Args:
        path: Path from the GITHUB_OUTPUT environment variable
        outputs: Output names and values
    """
    with Path(path).open("a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(f"{key}={value}\n")
    logger.debug("Wrote %d output(s) to %s", len(outputs), path)
