"""Execution policy and executor selection utilities."""

from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import TypeAlias

ExecutorClass: TypeAlias = type[ThreadPoolExecutor] | type[ProcessPoolExecutor] | None

EXECUTOR_POLICIES = ("threads", "processes", "serial")

DEFAULT_POLICY = "threads"


def get_executor_class(policy: str | None = None) -> ExecutorClass:
    """
    Select the executor class for a policy name.

    Policies: "threads" (default), "processes" or "serial". Sorting is
    dominated by file I/O, which releases the GIL, so threads are the default.

    "serial" mode runs in the calling thread - useful for debugging with breakpoints.
    """
    name = (policy or DEFAULT_POLICY).lower()

    if name == "threads":
        return ThreadPoolExecutor
    if name == "processes":
        return ProcessPoolExecutor
    if name == "serial":
        return None

    raise ValueError(
        f"Unknown executor policy {policy!r}, expected one of: {', '.join(EXECUTOR_POLICIES)}"
    )


def describe_executor(executor_class: ExecutorClass) -> str:
    """Convert an executor class into a readable policy name."""
    if executor_class is None:
        return "serial"
    if executor_class is ThreadPoolExecutor:
        return "threads"
    return "processes"
