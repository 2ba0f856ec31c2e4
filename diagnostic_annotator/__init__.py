"""
Prusti diagnostic annotator: rustc / cargo JSON diagnostics to CI annotations.
"""

from .config import AnnotatorConfig
from .decoder import decode, get_decoder
from .diagnostic import Annotation, Diagnostic, Severity, Span
from .errors import AnnotatorError, ConfigError, VerifierError
from .main_annotator import DiagnosticAnnotator
from .projector import AnnotationProjector

__all__ = [
    'AnnotatorConfig',
    'decode',
    'get_decoder',
    'Annotation',
    'Diagnostic',
    'Severity',
    'Span',
    'AnnotatorError',
    'ConfigError',
    'VerifierError',
    'DiagnosticAnnotator',
    'AnnotationProjector',
]
