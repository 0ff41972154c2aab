"""Build orchestration boundary."""

from breadpy.build.planner import (
    BuildError,
    BuildPlan,
    BuildStrategy,
    execute_build,
    plan_build,
)

__all__ = [
    "BuildError",
    "BuildPlan",
    "BuildStrategy",
    "execute_build",
    "plan_build",
]
