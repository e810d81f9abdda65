"""Error types raised by cargo_kubos library code and mapped to exit codes by the CLI."""

from __future__ import annotations


class CargoKubosError(Exception):
    """Base class for errors the cargo-kubos entry point reports to the user."""


class UnsupportedTargetError(CargoKubosError, ValueError):
    """Raised when a Kubos target has no known Rust/Clang triplet."""

    target: str
    supported: tuple[str, ...]

    def __init__(self, target: str, supported: tuple[str, ...]) -> None:
        self.target = target
        self.supported = supported
        lines = [
            f"Target '{target}' not supported for cargo/yotta builds",
            "Currently supported targets are:",
            *supported,
        ]
        super().__init__("\n".join(lines))


class CargoNotFoundError(CargoKubosError):
    """Raised when the cargo executable cannot be launched."""

    program: str

    def __init__(self, program: str) -> None:
        self.program = program
        super().__init__(f"{program} not found in PATH")
