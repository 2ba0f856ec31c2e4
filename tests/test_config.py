import pytest

from diagnostic_annotator.config import (
    CARGO_PRUSTI,
    PRUSTI_RUSTC,
    compile_noise_patterns,
    from_env,
    get_boolean_input,
    get_input,
)
from diagnostic_annotator.errors import ConfigError


def test_from_env_reads_action_inputs() -> None:
    config = from_env({
        "INPUT_PATH": "  crates/demo ",
        "INPUT_VERIFY-CRATE": "true",
        "INPUT_ANNOTATIONPATH": "checkout",
    })

    assert config.path == "crates/demo"
    assert config.verify_crate is True
    assert config.envelope_mode is True
    assert config.annotation_path == "checkout"
    assert config.prusti_rustc == PRUSTI_RUSTC
    assert config.cargo_prusti == CARGO_PRUSTI


def test_from_env_defaults() -> None:
    config = from_env({"INPUT_PATH": "src/main.rs"})

    assert config.verify_crate is False
    assert config.annotation_path == ""
    assert config.extra_noise_patterns == ()


def test_from_env_executable_overrides() -> None:
    config = from_env({"INPUT_PATH": "a.rs", "PRUSTI_RUSTC": "/opt/prusti/prusti-rustc"})

    assert config.prusti_rustc == "/opt/prusti/prusti-rustc"


def test_path_is_required() -> None:
    with pytest.raises(ConfigError, match="path"):
        from_env({"INPUT_PATH": "   "})


def test_input_names_are_upper_cased_with_underscores() -> None:
    assert get_input({"INPUT_SOME_NAME": "x"}, "some name") == "x"


@pytest.mark.parametrize("value, expected", [
    ("true", True), ("True", True), ("TRUE", True),
    ("false", False), ("False", False), ("FALSE", False), ("", False),
])
def test_boolean_input_values(value: str, expected: bool) -> None:
    assert get_boolean_input({"INPUT_VERIFY-CRATE": value}, "verify-crate") is expected


@pytest.mark.parametrize("value", ["yes", "1", "tRue"])
def test_boolean_input_rejects_other_values(value: str) -> None:
    with pytest.raises(ConfigError):
        get_boolean_input({"INPUT_VERIFY-CRATE": value}, "verify-crate")


def test_compile_noise_patterns() -> None:
    patterns = compile_noise_patterns([r"\d+ warnings? emitted"])

    assert patterns[0].fullmatch("2 warnings emitted")
    with pytest.raises(ConfigError, match="Invalid noise pattern"):
        compile_noise_patterns(["("])
