"""Small helpers around running commands and counting calls."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_LISTING = ("ls", "-sail")


@dataclass
class CallCounter:
    """Counts how many times it has been called."""

    count: int = 0

    def call(self) -> int:
        """Record one more call and return the running total."""
        self.count += 1
        return self.count


def list_directory(command: Sequence[str] = DEFAULT_LISTING) -> str:
    """Run a listing command and return everything it printed.

    Raises OSError when the command cannot be started.
    """
    completed = subprocess.run(
        list(command),
        stdout=subprocess.PIPE,
        text=True,
        check=False,
    )
    return completed.stdout


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the given command, or of a long directory listing."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args or list(DEFAULT_LISTING)
    try:
        output = list_directory(command)
    except OSError as exc:
        print(f"cannot run {command[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0