"""Startup validation and configuration checks."""

from deps import Path, shutil

from .config import get_cargo_prusti, get_prusti_rustc


def validate_config() -> None:
    """Warn if .env is missing or the Prusti executables cannot be found."""
    if not Path(".env").exists():
        print("⚠️  WARNING: .env file not found. Using default executables from PATH.")
    for exe in (get_prusti_rustc(), get_cargo_prusti()):
        if shutil.which(exe) is None:
            print(f"⚠️  WARNING: {exe} not found. POST /verify will fail for this target mode.")
            print("   Install Prusti or set PRUSTI_RUSTC / CARGO_PRUSTI in .env.")
