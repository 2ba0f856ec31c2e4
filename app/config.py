"""Configuration from environment."""

from deps import load_dotenv, os

load_dotenv()


def get_prusti_rustc() -> str:
    """prusti-rustc executable. Default: prusti-rustc on PATH."""
    return os.environ.get("PRUSTI_RUSTC", "").strip() or "prusti-rustc"


def get_cargo_prusti() -> str:
    """cargo-prusti executable. Default: cargo-prusti on PATH."""
    return os.environ.get("CARGO_PRUSTI", "").strip() or "cargo-prusti"


def get_annotation_path() -> str:
    """Default annotation root for crate targets when a request gives none."""
    return os.environ.get("ANNOTATION_PATH", "").strip()
