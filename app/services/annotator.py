"""Annotator service: wraps diagnostic_annotator and maps to API models."""

from deps import Dict, List, Optional, Sequence, Tuple

from diagnostic_annotator.config import AnnotatorConfig, compile_noise_patterns
from diagnostic_annotator.diagnostic import Annotation
from diagnostic_annotator.main_annotator import DiagnosticAnnotator
from diagnostic_annotator.reporter import ReportGenerator, format_annotation
from diagnostic_annotator.runner import RunResult, VerifierRunner

from ..config import get_annotation_path, get_cargo_prusti, get_prusti_rustc
from ..schemas import AnnotationOut


def _annotation_to_out(a: Annotation) -> AnnotationOut:
    return AnnotationOut(
        severity=a.severity.value,
        title=a.title,
        body=a.body,
        file=a.file,
        start_line=a.start_line,
        end_line=a.end_line,
        start_column=a.start_column,
        end_column=a.end_column,
    )


class AnnotatorService:
    """Wraps DiagnosticAnnotator and VerifierRunner for use by the API."""

    def build_config(
        self,
        path: str,
        verify_crate: bool,
        annotation_path: Optional[str] = None,
        extra_noise_patterns: Sequence[str] = (),
    ) -> AnnotatorConfig:
        """Config for one request. Raises ConfigError on a bad noise pattern."""
        return AnnotatorConfig(
            path=path,
            verify_crate=verify_crate,
            annotation_path=get_annotation_path() if annotation_path is None else annotation_path,
            extra_noise_patterns=compile_noise_patterns(extra_noise_patterns),
            prusti_rustc=get_prusti_rustc(),
            cargo_prusti=get_cargo_prusti(),
        )

    def annotate_output(self, output: str, config: AnnotatorConfig) -> Tuple[List[AnnotationOut], Dict[str, int], str]:
        """Project captured output. Returns (annotations, summary, workflow commands)."""
        annotations = DiagnosticAnnotator(config).process_output(output)
        commands = "\n".join(format_annotation(a) for a in annotations)
        return (
            [_annotation_to_out(a) for a in annotations],
            ReportGenerator.generate_summary(annotations),
            commands,
        )

    def verify(self, config: AnnotatorConfig) -> Tuple[List[AnnotationOut], Dict[str, int], RunResult]:
        """Run the verifier and project its output. Raises VerifierError if it cannot start."""
        result = VerifierRunner(config).run()
        annotations = DiagnosticAnnotator(config).process_lines(result.lines)
        return (
            [_annotation_to_out(a) for a in annotations],
            ReportGenerator.generate_summary(annotations),
            result,
        )
