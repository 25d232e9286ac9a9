"""Running helper scripts with an external interpreter."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class ScriptRunner:
    """A script run by ``interpreter`` with extra command-line arguments."""

    script_path: str
    interpreter: str = "python3"

    def run(self, *args: str) -> str:
        """Run the script and return its combined stdout and stderr.

        Raises subprocess.CalledProcessError, carrying the output, when the
        script exits with a non-zero status, and OSError when it cannot start.
        """
        completed = subprocess.run(
            [self.interpreter, self.script_path, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
        )
        if completed.returncode != 0:
            raise subprocess.CalledProcessError(
                completed.returncode, completed.args, output=completed.stdout
            )
        return completed.stdout

    def absolute_path(self) -> str:
        """The script path made absolute and normalised."""
        return os.path.abspath(self.script_path)