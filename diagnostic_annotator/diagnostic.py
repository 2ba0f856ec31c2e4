"""
Diagnostic and annotation data models for the Prusti diagnostic annotator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class Severity(Enum):
    """Annotation severity levels (names of the workflow commands)."""
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; a span position is never a bool
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@dataclass(frozen=True)
class Span:
    """A source location reference reported by the compiler."""
    file_name: str
    line_start: int
    line_end: int
    column_start: Optional[int] = None
    column_end: Optional[int] = None
    is_primary: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Span"]:
        """Build a span from rustc JSON. Returns None if the location is unusable."""
        file_name = data.get("file_name")
        line_start = _as_int(data.get("line_start"))
        line_end = _as_int(data.get("line_end"))
        column_start = _as_int(data.get("column_start"))
        column_end = _as_int(data.get("column_end"))
        if not isinstance(file_name, str) or None in (line_start, line_end, column_start, column_end):
            return None
        return cls(
            file_name=file_name,
            line_start=line_start,
            line_end=line_end,
            column_start=column_start,
            column_end=column_end,
            is_primary=data.get("is_primary") is True,
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single rustc diagnostic with its spans and nested children."""
    level: str = ""
    message: str = ""
    rendered: Optional[str] = None
    spans: Tuple[Span, ...] = ()
    children: Tuple["Diagnostic", ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Diagnostic":
        """Build a diagnostic tree from rustc JSON, skipping malformed entries."""
        spans = []
        raw_spans = data.get("spans")
        if isinstance(raw_spans, list):
            for raw in raw_spans:
                if not isinstance(raw, dict):
                    continue
                span = Span.from_dict(raw)
                if span is not None:
                    spans.append(span)

        children = []
        raw_children = data.get("children")
        if isinstance(raw_children, list):
            for raw in raw_children:
                if isinstance(raw, dict):
                    children.append(cls.from_dict(raw))

        level = data.get("level")
        message = data.get("message")
        rendered = data.get("rendered")
        return cls(
            level=level if isinstance(level, str) else "",
            message=message if isinstance(message, str) else "",
            rendered=rendered if isinstance(rendered, str) else None,
            spans=tuple(spans),
            children=tuple(children),
        )


@dataclass(frozen=True)
class Annotation:
    """A location-aware message for the reporting surface."""
    severity: Severity
    title: str
    body: str
    file: Optional[str] = None
    start_line: Optional[int] = None
    end_line: Optional[int] = None
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    @property
    def has_location(self) -> bool:
        return self.file is not None

    def properties(self) -> Dict[str, Any]:
        """Annotation properties as named by @actions/core, absent fields omitted."""
        props: Dict[str, Any] = {"title": self.title}
        if self.file is not None:
            props["file"] = self.file
        if self.start_line is not None:
            props["startLine"] = self.start_line
        if self.end_line is not None:
            props["endLine"] = self.end_line
        if self.start_column is not None:
            props["startColumn"] = self.start_column
        if self.end_column is not None:
            props["endColumn"] = self.end_column
        return props
