"""Kubos target -> Rust/Clang target triplet mapping."""

from __future__ import annotations

from cargo_kubos.errors import UnsupportedTargetError

X86_TARGET = "x86-linux-native"
DEFAULT_TARGET = X86_TARGET

# Kubos target name -> rustc --target triplet
KUBOS_TARGETS: dict[str, str] = {
    X86_TARGET: "x86_64-unknown-linux-gnu",
    "kubos-linux-beaglebone-gcc": "arm-unknown-linux-gnueabihf",
    "kubos-linux-pumpkin-mbm2-gcc": "arm-unknown-linux-gnueabihf",
    "kubos-linux-isis-gcc": "armv5te-unknown-linux-gnueabi",
}


def supported_targets() -> tuple[str, ...]:
    """Kubos target names in table order."""
    return tuple(KUBOS_TARGETS)


def resolve_target(kubos_target: str) -> str:
    """Return the Rust/Clang triplet for kubos_target. Raises UnsupportedTargetError if unknown."""
    try:
        return KUBOS_TARGETS[kubos_target]
    except KeyError:
        raise UnsupportedTargetError(kubos_target, supported_targets()) from None
