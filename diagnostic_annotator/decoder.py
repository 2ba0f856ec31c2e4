"""
Decoders for the JSON message stream of prusti-rustc and cargo-prusti.
"""

import json
from typing import Any, Optional

from .diagnostic import Diagnostic

COMPILER_MESSAGE_REASON = "compiler-message"


def is_diagnostic_shape(value: Any) -> bool:
    """True if value looks like a rustc diagnostic: an object with string level and message."""
    return (
        isinstance(value, dict)
        and isinstance(value.get("level"), str)
        and isinstance(value.get("message"), str)
    )


class BaseDecoder:
    """Base class for line decoders.

    A line that is not JSON, or whose JSON is empty or not shaped like a
    message, decodes to None; such lines are expected in a mixed stream.
    """

    def decode(self, line: str) -> Optional[Diagnostic]:
        """Decode one output line into a diagnostic, or None to skip it."""
        try:
            value = json.loads(line)
        except (TypeError, ValueError):
            return None
        if not value:
            return None
        payload = self._unwrap(value)
        if not is_diagnostic_shape(payload):
            return None
        return Diagnostic.from_dict(payload)

    def _unwrap(self, value: Any) -> Any:
        """Override in subclasses to strip an outer envelope."""
        return value


class DirectDecoder(BaseDecoder):
    """Each line is a rustc diagnostic (``--error-format=json``)."""


class EnvelopeDecoder(BaseDecoder):
    """Each line is a cargo message (``--message-format=json``).

    Only ``compiler-message`` records carry a diagnostic; every other reason
    (``compiler-artifact``, ``build-finished``, ...) is dropped.
    """

    def _unwrap(self, value: Any) -> Any:
        if not isinstance(value, dict):
            return None
        if value.get("reason") != COMPILER_MESSAGE_REASON:
            return None
        return value.get("message")


_DIRECT = DirectDecoder()
_ENVELOPE = EnvelopeDecoder()


def get_decoder(envelope_mode: bool) -> BaseDecoder:
    """Pick the decoder for a run. The mode is fixed for the whole stream."""
    return _ENVELOPE if envelope_mode else _DIRECT


def decode(line: str, envelope_mode: bool) -> Optional[Diagnostic]:
    """Decode one line; see BaseDecoder.decode."""
    return get_decoder(envelope_mode).decode(line)
