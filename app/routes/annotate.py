"""Annotate route (captured output to annotations)."""

from deps import APIRouter

from ..schemas import AnnotateRequest, AnnotateResponse
from ..utils import annotator_svc, request_config

router = APIRouter()


@router.post("/annotate", response_model=AnnotateResponse, response_model_exclude_none=True)
def annotate(req: AnnotateRequest) -> AnnotateResponse:
    """Project captured verifier output onto annotations. Runs nothing."""
    config = request_config(req.path, req.verify_crate, req.annotation_path, req.extra_noise_patterns)
    annotations, summary, commands = annotator_svc.annotate_output(req.output, config)
    return AnnotateResponse(annotations=annotations, summary=summary, commands=commands)
