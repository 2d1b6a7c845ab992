"""GitHub Actions workflow commands."""

import sys
from typing import TextIO


def error_command(message: str) -> str:
    """Format an ``::error::`` workflow command; newlines are escaped."""
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"::error::{escaped}"


def set_failed(message: str, stream: TextIO | None = None) -> int:
    """Annotate the step as failed and return the process exit code."""
    print(error_command(message), file=stream or sys.stderr)
    return 1
