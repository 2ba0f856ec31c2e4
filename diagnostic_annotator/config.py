"""
Configuration for the annotator, read from the action inputs in the environment.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .errors import ConfigError

PRUSTI_RUSTC = "prusti-rustc"
CARGO_PRUSTI = "cargo-prusti"

_TRUE_VALUES = ("true", "True", "TRUE")
_FALSE_VALUES = ("false", "False", "FALSE")


@dataclass(frozen=True)
class AnnotatorConfig:
    """Settings consumed by the decoder, projector and verifier runner.

    ``verify_crate`` selects the target mode: True for a whole cargo project
    (wrapped messages, re-rooted file names), False for a single file.
    """
    path: str
    verify_crate: bool = False
    annotation_path: str = ""
    extra_noise_patterns: Tuple[re.Pattern, ...] = field(default_factory=tuple)
    prusti_rustc: str = PRUSTI_RUSTC
    cargo_prusti: str = CARGO_PRUSTI

    @property
    def envelope_mode(self) -> bool:
        return self.verify_crate


def compile_noise_patterns(patterns) -> Tuple[re.Pattern, ...]:
    """Compile user-supplied noise regexes. Raises ConfigError on a bad pattern."""
    compiled = []
    for pattern in patterns or ():
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise ConfigError(f"Invalid noise pattern {pattern!r}: {e}") from e
    return tuple(compiled)


def get_input(environ: Mapping[str, str], name: str, required: bool = False) -> str:
    """Read an action input the way @actions/core does (INPUT_<NAME>, trimmed)."""
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = environ.get(key, "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(environ: Mapping[str, str], name: str) -> bool:
    """Boolean action input. Empty means False; anything unrecognized is an error."""
    value = get_input(environ, name)
    if not value or value in _FALSE_VALUES:
        return False
    if value in _TRUE_VALUES:
        return True
    raise ConfigError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def from_env(environ: Optional[Mapping[str, str]] = None) -> AnnotatorConfig:
    """Build the configuration from action inputs."""
    if environ is None:
        environ = os.environ
    return AnnotatorConfig(
        path=get_input(environ, "path", required=True),
        verify_crate=get_boolean_input(environ, "verify-crate"),
        annotation_path=get_input(environ, "annotationPath"),
        prusti_rustc=environ.get("PRUSTI_RUSTC", "").strip() or PRUSTI_RUSTC,
        cargo_prusti=environ.get("CARGO_PRUSTI", "").strip() or CARGO_PRUSTI,
    )
