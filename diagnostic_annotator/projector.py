"""
Projection of decoded diagnostics onto annotations.
"""

from typing import Iterator, Optional

from .config import AnnotatorConfig
from .diagnostic import Annotation, Diagnostic, Severity, Span
from .utils import NO_SPAN_MARKER, is_noise_message, rerooted_path

ERROR_LEVELS = ("error", "error: internal compiler error", "internal-compiler-error")
WARNING_LEVELS = ("warning",)


def classify_level(level: str) -> Severity:
    """Map a rustc level to a severity. Unknown levels become notices."""
    if level in ERROR_LEVELS:
        return Severity.ERROR
    if level in WARNING_LEVELS:
        return Severity.WARNING
    return Severity.NOTICE


def iter_spans(diagnostic: Diagnostic) -> Iterator[Span]:
    """Yield every span of the tree in pre-order: own spans, then each child's."""
    yield from diagnostic.spans
    for child in diagnostic.children:
        yield from iter_spans(child)


def select_display_span(diagnostic: Diagnostic) -> Optional[Span]:
    """First primary span in traversal order, else the first span, else None."""
    first_span: Optional[Span] = None
    for span in iter_spans(diagnostic):
        if span.is_primary:
            return span
        if first_span is None:
            first_span = span
    return first_span


class AnnotationProjector:
    """Turns one diagnostic into at most one annotation."""

    def __init__(self, config: AnnotatorConfig):
        self.config = config

    def project(self, diagnostic: Diagnostic) -> Optional[Annotation]:
        """Return the annotation for a diagnostic, or None for noise."""
        if is_noise_message(diagnostic.message, self.config.extra_noise_patterns):
            return None

        severity = classify_level(diagnostic.level)
        title = diagnostic.message
        body = diagnostic.rendered if diagnostic.rendered is not None else diagnostic.message

        span = select_display_span(diagnostic)
        if span is None:
            return Annotation(severity=severity, title=NO_SPAN_MARKER + title, body=body)

        single_line = span.line_start == span.line_end
        return Annotation(
            severity=severity,
            title=title,
            body=body,
            file=self._file_path(span),
            start_line=span.line_start,
            end_line=span.line_end,
            start_column=span.column_start if single_line else None,
            end_column=span.column_end if single_line else None,
        )

    def _file_path(self, span: Span) -> str:
        # cargo reports file names relative to the crate; rustc as given on the command line
        if not self.config.verify_crate:
            return span.file_name
        return rerooted_path(self.config.annotation_path, self.config.path, span.file_name)
