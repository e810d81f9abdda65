"""Run `cargo <command> --target <triplet>` for a Kubos target.

The child's environment changes (CARGO_KUBOS_TARGET, and CC/CXX/PKG_CONFIG_ALLOW_CROSS when a
cross-linker is configured) are carried on the Invocation value; os.environ is never modified.
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from cargo_kubos.errors import CargoNotFoundError
from cargo_kubos.linker import cargo_linker
from cargo_kubos.targets import resolve_target

log = logging.getLogger(__name__)

CARGO = "cargo"
KUBOS_TARGET_ENV = "CARGO_KUBOS_TARGET"
# Exit status when the child ends without a code (killed by a signal).
GENERIC_FAILURE = 1


@dataclass(frozen=True)
class Invocation:
    program: str
    args: tuple[str, ...]
    env: Mapping[str, str] = field(default_factory=dict)

    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def child_env(self, environ: Mapping[str, str] | None = None) -> dict[str, str]:
        """Parent environment (os.environ by default) with this invocation's overrides applied."""
        base = os.environ if environ is None else environ
        return {**base, **self.env}


def linker_env(linker: str) -> dict[str, str]:
    """Env for cross builds: C/C++ drivers point at linker, pkg-config may run cross."""
    return {
        "CC": linker,
        "CXX": linker,
        "PKG_CONFIG_ALLOW_CROSS": "1",
    }


def build_invocation(
    triplet: str,
    command: str,
    extra_args: Sequence[str] = (),
    *,
    kubos_target: str | None = None,
    environ: Mapping[str, str] | None = None,
    program: str = CARGO,
) -> Invocation:
    """Describe `cargo <command> --target <triplet> [extra_args...]`, adding a linker if configured."""
    env: dict[str, str] = {}
    if kubos_target is not None:
        env[KUBOS_TARGET_ENV] = kubos_target
    linker = cargo_linker(triplet, environ)
    if linker is not None:
        log.debug("Using linker %s for %s", linker, triplet)
        env.update(linker_env(linker))
    return Invocation(
        program=program,
        args=(command, "--target", triplet, *extra_args),
        env=env,
    )


def run_invocation(invocation: Invocation, environ: Mapping[str, str] | None = None) -> int:
    """Run invocation with inherited stdio and wait for it. Returns the exit code to forward.

    Raises CargoNotFoundError if the program cannot be executed.
    """
    cmd = invocation.argv()
    log.info("Running command: %s", " ".join(cmd))
    try:
        r = subprocess.run(cmd, env=invocation.child_env(environ))
    except FileNotFoundError:
        raise CargoNotFoundError(invocation.program) from None
    if r.returncode < 0:
        log.debug("%s terminated by signal %d", invocation.program, -r.returncode)
        return GENERIC_FAILURE
    return r.returncode


def run_cargo(
    kubos_target: str,
    command: str,
    extra_args: Sequence[str] = (),
    environ: Mapping[str, str] | None = None,
) -> int:
    """Resolve kubos_target and run cargo for it. Raises UnsupportedTargetError before any subprocess."""
    triplet = resolve_target(kubos_target)
    invocation = build_invocation(
        triplet,
        command,
        extra_args,
        kubos_target=kubos_target,
        environ=environ,
    )
    return run_invocation(invocation, environ)
