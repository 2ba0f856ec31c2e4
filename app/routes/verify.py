"""Verify route (run Prusti on a server-side path)."""

from deps import APIRouter, HTTPException

from diagnostic_annotator.errors import VerifierError

from ..schemas import VerifyRequest, VerifyResponse
from ..utils import annotator_svc, check_target_path, request_config

router = APIRouter()


@router.post("/verify", response_model=VerifyResponse, response_model_exclude_none=True)
def verify(req: VerifyRequest) -> VerifyResponse:
    """Run prusti-rustc or cargo-prusti and annotate its diagnostics."""
    check_target_path(req.path, req.verify_crate)
    config = request_config(req.path, req.verify_crate, req.annotation_path)
    try:
        annotations, summary, result = annotator_svc.verify(config)
    except VerifierError as e:
        raise HTTPException(502, str(e)) from e
    return VerifyResponse(
        annotations=annotations,
        summary=summary,
        exit_code=result.exit_code,
        failed=result.failed,
    )
