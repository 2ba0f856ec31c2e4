"""
Report generation for the Prusti diagnostic annotator.
"""

from deps import Any, Dict, Iterable, Iterator, List, Optional, TextIO, contextmanager, sys

from .diagnostic import Annotation, Severity

# @actions/core names startLine/startColumn "line"/"col" on the wire.
_COMMAND_PROPERTIES = (
    ("title", "title"),
    ("file", "file"),
    ("startLine", "line"),
    ("endLine", "endLine"),
    ("startColumn", "col"),
    ("endColumn", "endColumn"),
)


def escape_data(value: Any) -> str:
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: Any) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, properties: Dict[str, Any], message: str) -> str:
    """Render a workflow command. Empty property values are left out."""
    text = f"::{command}"
    props = [
        f"{key}={escape_property(value)}"
        for key, value in properties.items()
        if value is not None and value != ""
    ]
    if props:
        text += " " + ",".join(props)
    return f"{text}::{escape_data(message)}"


def format_annotation(annotation: Annotation) -> str:
    """One annotation as an ::error / ::warning / ::notice command."""
    source = annotation.properties()
    properties = {
        wire: source[name] for name, wire in _COMMAND_PROPERTIES if name in source
    }
    return format_command(annotation.severity.value, properties, annotation.body)


class WorkflowCommandReporter:
    """Writes annotations and log commands for GitHub Actions to a stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.exit_code = 0
        self.reported = 0

    def _write(self, text: str) -> None:
        self.stream.write(text + "\n")

    def info(self, message: str) -> None:
        self._write(message)

    def report(self, annotation: Annotation) -> None:
        self._write(format_annotation(annotation))
        self.reported += 1

    def report_all(self, annotations: Iterable[Annotation]) -> None:
        for annotation in annotations:
            self.report(annotation)

    @contextmanager
    def group(self, name: str) -> Iterator[None]:
        """Fold everything written inside the block under a collapsible group."""
        self._write(f"::group::{escape_data(name)}")
        try:
            yield
        finally:
            self._write("::endgroup::")

    def set_failed(self, message: str) -> None:
        """Mark the run as failed. The run keeps going; only the exit code changes."""
        self.exit_code = 1
        self._write(format_command("error", {}, message))


class ReportGenerator:
    """Generate plain-text reports from annotations."""

    @staticmethod
    def generate_summary(annotations: List[Annotation]) -> Dict[str, int]:
        """Count annotations per severity (every severity present, possibly 0)."""
        summary = {severity.value: 0 for severity in Severity}
        for annotation in annotations:
            summary[annotation.severity.value] += 1
        return summary

    @staticmethod
    def generate_text_report(annotations: List[Annotation], target: str) -> str:
        """Generate a text report."""
        if not annotations:
            return f"\n✓ No diagnostics reported for {target}\n"

        report = [f"\n{'='*80}"]
        report.append(f"Prusti Diagnostics Report: {target}")
        report.append(f"{'='*80}\n")

        for severity, heading in (
            (Severity.ERROR, "ERRORS"),
            (Severity.WARNING, "WARNINGS"),
            (Severity.NOTICE, "NOTICES"),
        ):
            group = [a for a in annotations if a.severity == severity]
            if not group:
                continue
            report.append(f"{heading} ({len(group)}):")
            report.append("-" * 80)
            for annotation in group:
                if annotation.has_location:
                    report.append(
                        f"  {annotation.file}:{annotation.start_line}: {annotation.title}"
                    )
                else:
                    report.append(f"  {annotation.title}")
            report.append("")

        summary = ReportGenerator.generate_summary(annotations)
        report.append(
            f"Summary: {summary['error']} errors, {summary['warning']} warnings, "
            f"{summary['notice']} notices"
        )
        report.append("="*80)

        return "\n".join(report)
