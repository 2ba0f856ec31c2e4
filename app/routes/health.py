"""Health check route."""

from deps import APIRouter, shutil

from ..config import get_cargo_prusti, get_prusti_rustc

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, plus whether each verifier executable is on PATH."""
    return {
        "status": "ok",
        "prusti_rustc": shutil.which(get_prusti_rustc()) is not None,
        "cargo_prusti": shutil.which(get_cargo_prusti()) is not None,
    }
