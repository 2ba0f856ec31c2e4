"""Utility functions for the API."""

from deps import HTTPException, Optional, Path, Sequence

from diagnostic_annotator.config import AnnotatorConfig
from diagnostic_annotator.errors import ConfigError

from .services import AnnotatorService

annotator_svc = AnnotatorService()


def request_config(
    path: str,
    verify_crate: bool,
    annotation_path: Optional[str] = None,
    extra_noise_patterns: Sequence[str] = (),
) -> AnnotatorConfig:
    """Build a config from request fields, mapping bad input to HTTP 400."""
    try:
        return annotator_svc.build_config(path, verify_crate, annotation_path, extra_noise_patterns)
    except ConfigError as e:
        raise HTTPException(400, str(e)) from e


def check_target_path(path: str, verify_crate: bool) -> Path:
    """Validate a server-side verification target."""
    p = Path(path)
    if not p.is_absolute():
        raise HTTPException(400, "path must be absolute")
    if not p.exists():
        raise HTTPException(404, f"Path not found: {path}")
    if verify_crate and not p.is_dir():
        raise HTTPException(400, "verify_crate requires a crate directory")
    if not verify_crate and not p.is_file():
        raise HTTPException(400, "path must be a Rust source file")
    return p
