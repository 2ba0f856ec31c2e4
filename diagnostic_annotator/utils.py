"""
Utility functions for the Prusti diagnostic annotator.
"""

import posixpath
import re
from typing import Iterable, List

# Compiler-wide summaries emitted once compilation fails. They repeat what the
# individual diagnostics already say and carry no location.
NOISE_MESSAGES = (
    "aborting due to previous error",
)
NOISE_AFFIXES = (
    ("aborting due to ", " previous errors"),
)

# Marker prepended to the title of a diagnostic without any span.
NO_SPAN_MARKER = "(No span found for message:) "


def is_noise_message(message: str, extra_patterns: Iterable[re.Pattern] = ()) -> bool:
    """True if the message is a count-only summary that should not be annotated."""
    if message in NOISE_MESSAGES:
        return True
    for prefix, suffix in NOISE_AFFIXES:
        if message.startswith(prefix) and message.endswith(suffix):
            return True
    return any(p.fullmatch(message) for p in extra_patterns)


def rerooted_path(annotation_path: str, target_path: str, file_name: str) -> str:
    """Join annotation root, crate directory and a crate-relative file name.

    The result is normalized and uses forward slashes, so it can be resolved
    from the reporting surface's working directory.
    """
    parts = [p.replace("\\", "/") for p in (annotation_path, target_path, file_name) if p]
    if not parts:
        return "."
    return posixpath.normpath(posixpath.join(*parts))


def split_lines(output: str) -> List[str]:
    """Split captured process output into lines."""
    return output.split("\n")
