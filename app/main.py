"""FastAPI app: /health, /annotate, /verify."""

from deps import FastAPI

from .routes import annotate_router, health_router, verify_router
from .startup import validate_config

app = FastAPI(
    title="Prusti Diagnostic Annotator API",
    description="Turns prusti-rustc / cargo-prusti JSON diagnostics into CI annotations.",
    version="0.1.0",
)
app.include_router(health_router)
app.include_router(annotate_router)
app.include_router(verify_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Warn at startup if .env or the Prusti executables are missing."""
    validate_config()
