"""
GitHub Actions entry point: verify with Prusti and annotate the diagnostics.

    python -m diagnostic_annotator

Inputs are read from INPUT_PATH, INPUT_VERIFY-CRATE and INPUT_ANNOTATIONPATH.
"""

import os
import sys
from typing import Mapping, Optional, TextIO

from .config import from_env
from .errors import AnnotatorError
from .main_annotator import DiagnosticAnnotator
from .reporter import ReportGenerator, WorkflowCommandReporter
from .runner import VerifierRunner

NON_ZERO_EXIT_MESSAGE = "Prusti exited with a non-zero exit code"


def main(environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None) -> int:
    """Run the action once and return the process exit code."""
    reporter = WorkflowCommandReporter(stream)
    try:
        config = from_env(os.environ if environ is None else environ)
        with reporter.group("verify with Prusti"):
            result = VerifierRunner(config).run()
            if result.stderr:
                reporter.info(result.stderr.rstrip("\n"))
    except AnnotatorError as e:
        reporter.set_failed(str(e))
        return reporter.exit_code

    annotations = DiagnosticAnnotator(config).process_lines(result.lines)
    reporter.report_all(annotations)

    summary = ReportGenerator.generate_summary(annotations)
    reporter.info(
        f"Reported {len(annotations)} annotation(s): {summary['error']} error(s), "
        f"{summary['warning']} warning(s), {summary['notice']} notice(s)."
    )
    reporter.info(ReportGenerator.generate_text_report(annotations, config.path))
    if result.failed:
        reporter.set_failed(NON_ZERO_EXIT_MESSAGE)
    return reporter.exit_code


if __name__ == "__main__":
    sys.exit(main())
