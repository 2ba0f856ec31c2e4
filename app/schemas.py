"""Pydantic request/response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnnotateRequest(BaseModel):
    """Request body for annotating already captured verifier output."""

    output: str = Field(..., description="stdout of prusti-rustc or cargo-prusti, one JSON message per line")
    verify_crate: bool = Field(default=False, description="True if the output comes from cargo-prusti")
    path: str = Field(default="", description="Crate directory (crate mode) or source file that was verified")
    annotation_path: Optional[str] = Field(default=None, description="Prefix for crate-relative file names")
    extra_noise_patterns: List[str] = Field(
        default_factory=list,
        description="Additional regexes; messages fully matching one are not annotated",
    )


class VerifyRequest(BaseModel):
    """Request body for running the verifier on a server-side path."""

    path: str = Field(..., description="Absolute path to a .rs file or crate directory on the server")
    verify_crate: bool = Field(default=False, description="Run cargo-prusti on a crate instead of prusti-rustc on a file")
    annotation_path: Optional[str] = Field(default=None, description="Prefix for crate-relative file names")


# --- Annotation (response) ---


class AnnotationOut(BaseModel):
    """Single annotation, with @actions/core property names."""

    severity: str = Field(..., description="error, warning, or notice")
    title: str
    body: str
    file: Optional[str] = None
    start_line: Optional[int] = Field(default=None, alias="startLine")
    end_line: Optional[int] = Field(default=None, alias="endLine")
    start_column: Optional[int] = Field(default=None, alias="startColumn")
    end_column: Optional[int] = Field(default=None, alias="endColumn")

    model_config = {"populate_by_name": True}


# --- Responses ---


class AnnotateResponse(BaseModel):
    """Response for POST /annotate."""

    annotations: List[AnnotationOut] = Field(default_factory=list)
    summary: Dict[str, int] = Field(default_factory=dict, description="Annotation count per severity")
    commands: str = Field(default="", description="Workflow commands, one per annotation")


class VerifyResponse(BaseModel):
    """Response for POST /verify."""

    annotations: List[AnnotationOut] = Field(default_factory=list)
    summary: Dict[str, int] = Field(default_factory=dict, description="Annotation count per severity")
    exit_code: int = Field(..., description="Exit code of the verifier")
    failed: bool = Field(..., description="True if the verifier exited with a non-zero code")
