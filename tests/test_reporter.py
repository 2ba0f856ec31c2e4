import io

from diagnostic_annotator.diagnostic import Annotation, Severity
from diagnostic_annotator.reporter import (
    ReportGenerator,
    WorkflowCommandReporter,
    escape_data,
    escape_property,
    format_annotation,
)


def test_escaping_matches_actions_core() -> None:
    assert escape_data("50%\r\nnext") == "50%25%0D%0Anext"
    assert escape_property("a:b,c%\n") == "a%3Ab%2Cc%25%0A"


def test_format_annotation_with_full_location() -> None:
    annotation = Annotation(
        Severity.ERROR, "mismatched types", "error: mismatched types\n  --> src/lib.rs:3:5",
        file="src/lib.rs", start_line=3, end_line=3, start_column=5, end_column=10,
    )

    assert format_annotation(annotation) == (
        "::error title=mismatched types,file=src/lib.rs,line=3,endLine=3,col=5,endColumn=10"
        "::error: mismatched types%0A  --> src/lib.rs:3:5"
    )


def test_format_annotation_without_location() -> None:
    annotation = Annotation(Severity.NOTICE, "(No span found for message:) a, b", "body")

    assert format_annotation(annotation) == "::notice title=(No span found for message%3A) a%2C b::body"


def test_empty_title_is_left_out() -> None:
    assert format_annotation(Annotation(Severity.WARNING, "", "w")) == "::warning::w"


def test_reporter_groups_and_failure() -> None:
    stream = io.StringIO()
    reporter = WorkflowCommandReporter(stream)

    with reporter.group("verify with Prusti"):
        reporter.info("running")
    reporter.report_all([Annotation(Severity.WARNING, "t", "b")])
    reporter.set_failed("Prusti exited with a non-zero exit code")

    assert stream.getvalue().splitlines() == [
        "::group::verify with Prusti",
        "running",
        "::endgroup::",
        "::warning title=t::b",
        "::error::Prusti exited with a non-zero exit code",
    ]
    assert reporter.exit_code == 1
    assert reporter.reported == 1


def test_summary_counts_every_severity() -> None:
    annotations = [
        Annotation(Severity.ERROR, "a", "a"),
        Annotation(Severity.ERROR, "b", "b"),
        Annotation(Severity.NOTICE, "c", "c"),
    ]

    assert ReportGenerator.generate_summary(annotations) == {"error": 2, "warning": 0, "notice": 1}
    assert ReportGenerator.generate_summary([]) == {"error": 0, "warning": 0, "notice": 0}


def test_text_report_lists_locations() -> None:
    annotations = [
        Annotation(Severity.WARNING, "unused", "w", file="src/a.rs", start_line=4, end_line=4),
        Annotation(Severity.ERROR, "(No span found for message:) boom", "e"),
    ]

    report = ReportGenerator.generate_text_report(annotations, "demo")

    assert "ERRORS (1):" in report
    assert "  src/a.rs:4: unused" in report
    assert "  (No span found for message:) boom" in report
    assert "Summary: 1 errors, 1 warnings, 0 notices" in report
    assert report.index("ERRORS") < report.index("WARNINGS")


def test_text_report_for_clean_run() -> None:
    assert "No diagnostics reported for demo" in ReportGenerator.generate_text_report([], "demo")
