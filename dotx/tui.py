"""Interactive prompts."""

from __future__ import annotations

import sys

_YES = {"y", "yes"}
_NO = {"n", "no", ""}


def confirm(title: str, description: str) -> bool:
    """Ask a yes/no question on the terminal; the default answer is no.

    Raises EOFError when input ends before an answer is given.
    """
    sys.stderr.write(title + "\n")
    if description:
        sys.stderr.write(description + "\n")
    while True:
        sys.stderr.write("[y/N] ")
        sys.stderr.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no answer given")
        answer = line.strip().lower()
        if answer in _YES:
            return True
        if answer in _NO:
            return False