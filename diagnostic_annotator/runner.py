"""
Invocation of prusti-rustc / cargo-prusti with JSON message output.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import AnnotatorConfig
from .errors import VerifierError
from .utils import split_lines

RUST_EDITION = "2018"
CARGO_FEATURES = "prusti-contracts/prusti"


@dataclass(frozen=True)
class RunResult:
    """Captured output of one verifier run."""
    stdout: str
    stderr: str
    exit_code: int

    @property
    def failed(self) -> bool:
        return self.exit_code != 0

    @property
    def lines(self) -> List[str]:
        return split_lines(self.stdout)


def build_command(config: AnnotatorConfig) -> Tuple[List[str], Optional[str]]:
    """Return (argv, cwd) for the configured target."""
    if config.verify_crate:
        argv = [
            config.cargo_prusti,
            "--message-format=json",
            "--features", CARGO_FEATURES,
        ]
        return argv, config.path
    argv = [
        config.prusti_rustc,
        f"--edition={RUST_EDITION}",
        "--error-format=json",
        config.path,
    ]
    return argv, None


class VerifierRunner:
    """Runs the verifier once and captures its output.

    A non-zero exit code is part of the result, not an error: the diagnostics
    still have to be reported. Only a process that cannot be started raises.
    """

    def __init__(self, config: AnnotatorConfig):
        self.config = config

    def run(self) -> RunResult:
        argv, cwd = build_command(self.config)
        try:
            completed = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise VerifierError(f"Could not run {argv[0]}: {e}") from e
        return RunResult(
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
            exit_code=completed.returncode,
        )
