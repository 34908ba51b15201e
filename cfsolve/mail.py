"""Compose a message and hand it to a sendmail-compatible command."""

from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
from collections.abc import Sequence

DEFAULT_COMMAND = "/usr/lib/sendmail -t"
PROG = "cfsolve-mail"


def compose_message(to: str, sender: str, subject: str, message: str) -> str:
    """Return the text that is written to the mail command's input."""
    return (
        f"To: {to}\n"
        f"From: {sender}\n"
        f"Subject: {subject}\n\n"
        f"{message}"
        ".\n"
    )


def send_mail(
    to: str,
    sender: str,
    subject: str,
    message: str,
    command: str | Sequence[str] = DEFAULT_COMMAND,
) -> int:
    """Pipe the composed message into command and return its exit status.

    Raises OSError when the command cannot be started.
    """
    args = shlex.split(command) if isinstance(command, str) else list(command)
    completed = subprocess.run(
        args,
        input=compose_message(to, sender, subject, message),
        text=True,
        check=False,
    )
    return completed.returncode


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Send one e-mail.")
    parser.add_argument("to")
    parser.add_argument("sender")
    parser.add_argument("subject")
    parser.add_argument("message")
    parser.add_argument(
        "--command",
        default=DEFAULT_COMMAND,
        help="mail command that reads the message on its input",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Echo the arguments, then send the mail they describe."""
    args = list(sys.argv[1:] if argv is None else argv)
    shown = [PROG, *args]
    print(f"argc = {len(shown)}")
    for index, value in enumerate(shown):
        print(f'argv[{index}] = "{value}"')

    options = _parser().parse_args(args)
    try:
        send_mail(
            options.to,
            options.sender,
            options.subject,
            options.message,
            options.command,
        )
    except OSError as exc:
        print(f"Failure: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0