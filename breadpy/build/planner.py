"""Compile/run planning for `.bread` files through the `breadlang` compiler.

Three strategies, tried in order:

1. a compiler already built at `build/breadlang` is invoked directly;
2. a `CMakeLists.txt` without a built compiler builds it first, then invokes it;
3. otherwise a `breadlang` found on `PATH` is used.

When none applies the build fails before any process is started.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
import logging
from pathlib import Path
import shlex
import shutil
import subprocess
from typing import Final

from breadpy.document import FILE_EXTENSION

logger = logging.getLogger(__name__)

COMPILER_NAME: Final[str] = "breadlang"
LOCAL_COMPILER: Final[Path] = Path("build") / COMPILER_NAME
BUILD_MANIFEST: Final[str] = "CMakeLists.txt"


class BuildError(RuntimeError):
    """A build precondition failed; the message is meant for the user."""


class BuildStrategy(StrEnum):
    EXISTING_COMPILER = "existing-compiler"
    BUILD_SYSTEM = "build-system"
    GLOBAL_COMPILER = "global-compiler"


@dataclass(frozen=True, slots=True)
class BuildPlan:
    strategy: BuildStrategy
    command: str
    output_name: str
    relative_path: str
    run: bool = False

    @property
    def description(self) -> str:
        action = "Building and running" if self.run else "Building"
        return f"{action} {self.relative_path}..."


def plan_build(
    source_path: str | Path,
    workspace_root: str | Path,
    *,
    run: bool = False,
    which: Callable[[str], str | None] = shutil.which,
) -> BuildPlan:
    """Choose a strategy from the workspace state and render the shell pipeline."""
    source = Path(source_path)
    root = Path(workspace_root).resolve()
    if source.suffix != FILE_EXTENSION:
        raise BuildError(f"Selected file is not a Bread file: {source}")
    resolved_source = (source if source.is_absolute() else root / source).resolve()
    try:
        relative = resolved_source.relative_to(root).as_posix()
    except ValueError:
        raise BuildError(f"File must be in the workspace to build: {source}") from None

    output_name = resolved_source.stem
    compile_step = f"./{LOCAL_COMPILER.as_posix()} -o {shlex.quote(output_name)} {shlex.quote(relative)}"

    if (root / LOCAL_COMPILER).is_file():
        strategy = BuildStrategy.EXISTING_COMPILER
        command = compile_step
    elif (root / BUILD_MANIFEST).is_file():
        strategy = BuildStrategy.BUILD_SYSTEM
        command = f"mkdir -p build && cd build && cmake .. && make {COMPILER_NAME} && cd .. && {compile_step}"
    elif which(COMPILER_NAME) is not None:
        strategy = BuildStrategy.GLOBAL_COMPILER
        command = f"{COMPILER_NAME} -o {shlex.quote(output_name)} {shlex.quote(relative)}"
    else:
        raise BuildError(
            f"No {COMPILER_NAME} compiler found: expected {LOCAL_COMPILER.as_posix()}, "
            f"a {BUILD_MANIFEST} to build it from, or `{COMPILER_NAME}` on PATH"
        )

    if run:
        command += f" && ./{shlex.quote(output_name)}"

    plan = BuildPlan(
        strategy=strategy,
        command=command,
        output_name=output_name,
        relative_path=relative,
        run=run,
    )
    logger.info("%s (strategy: %s)", plan.description, plan.strategy)
    return plan


def execute_build(plan: BuildPlan, workspace_root: str | Path) -> int:
    """Run the planned pipeline through the shell and return its exit status."""
    logger.info("Executing: %s", plan.command)
    completed = subprocess.run(plan.command, shell=True, cwd=str(workspace_root), check=False)
    if completed.returncode != 0:
        logger.error("Build of %s exited with status %d", plan.relative_path, completed.returncode)
    else:
        logger.info("Build of %s finished", plan.relative_path)
    return completed.returncode
