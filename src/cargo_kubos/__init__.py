"""cargo-kubos: run Cargo commands with a Kubos target attached."""

from .errors import CargoKubosError, CargoNotFoundError, UnsupportedTargetError
from .invoke import (
    Invocation,
    build_invocation,
    run_cargo,
    run_invocation,
)
from .linker import cargo_linker
from .targets import (
    DEFAULT_TARGET,
    KUBOS_TARGETS,
    resolve_target,
    supported_targets,
)

__all__ = [
    "DEFAULT_TARGET",
    "KUBOS_TARGETS",
    "CargoKubosError",
    "CargoNotFoundError",
    "Invocation",
    "UnsupportedTargetError",
    "build_invocation",
    "cargo_linker",
    "resolve_target",
    "run_cargo",
    "run_invocation",
    "supported_targets",
]
