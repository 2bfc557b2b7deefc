"""Parser executor implementations and the by-name registry."""

from .base import BaseExecutor
from .python_ast import PythonAstExecutor
from .treesitter import TreeSitterExecutor

# The closed set of executors selectable by name.
EXECUTORS: dict[str, type[BaseExecutor]] = {
    "python-ast": PythonAstExecutor,
    "tree-sitter": TreeSitterExecutor,
}


def get_executor(name: str) -> BaseExecutor:
    """Instantiate the executor registered under *name*.

    Args:
        name: Executor identifier, e.g. ``"python-ast"``.

    Returns:
        A new executor instance.

    Raises:
        KeyError: If *name* is not registered.
    """
    if name not in EXECUTORS:
        available = list(EXECUTORS.keys())
        raise KeyError(f"Unknown executor '{name}'. Available: {available}")
    return EXECUTORS[name]()


def list_executors() -> list[str]:
    """Return the names of all registered executors."""
    return list(EXECUTORS.keys())


__all__ = [
    "BaseExecutor",
    "PythonAstExecutor",
    "TreeSitterExecutor",
    "EXECUTORS",
    "get_executor",
    "list_executors",
]
