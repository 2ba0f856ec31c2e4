"""
Errors raised by the annotator. Per-line decode/projection problems are never
errors; only conditions that stop the whole run are.
"""


class AnnotatorError(Exception):
    """Base class for fatal annotator errors."""


class ConfigError(AnnotatorError):
    """Action inputs are missing or invalid."""


class VerifierError(AnnotatorError):
    """The verifier process could not be started."""
