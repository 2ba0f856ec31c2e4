"""Builders for rustc / cargo JSON messages used across the tests."""

import json


def span(file_name="src/lib.rs", line_start=1, line_end=None, column_start=1, column_end=2, is_primary=False):
    return {
        "file_name": file_name,
        "line_start": line_start,
        "line_end": line_start if line_end is None else line_end,
        "column_start": column_start,
        "column_end": column_end,
        "is_primary": is_primary,
        "text": [],
        "label": None,
    }


def diagnostic(message="msg", level="error", spans=(), children=(), rendered=None):
    return {
        "message": message,
        "code": None,
        "level": level,
        "spans": list(spans),
        "children": list(children),
        "rendered": f"{level}: {message}\n" if rendered is None else rendered,
    }


def line(value) -> str:
    return json.dumps(value)


def cargo_line(message, reason="compiler-message") -> str:
    return json.dumps({
        "reason": reason,
        "package_id": "demo 0.1.0 (path+file:///work/demo)",
        "target": {"kind": ["lib"], "name": "demo"},
        "message": message,
    })


MISMATCHED_TYPES_LINE = (
    '{"level":"error","message":"mismatched types","rendered":"error: mismatched types\\n...",'
    '"spans":[{"file_name":"src/lib.rs","line_start":3,"line_end":3,"column_start":5,'
    '"column_end":10,"is_primary":true}],"children":[]}'
)
