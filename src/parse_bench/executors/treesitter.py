"""Executor wrapping the tree-sitter Python grammar."""

from functools import lru_cache

from parse_bench.errors import ExecutorUnavailableError
from parse_bench.executors.base import BaseExecutor
from parse_bench.models import Buffer, ExecuteOptions

try:
    import tree_sitter_python as tspython
    from tree_sitter import Language, Parser

    TREE_SITTER_AVAILABLE = True

except ImportError:
    TREE_SITTER_AVAILABLE = False


@lru_cache(maxsize=1)
def get_language() -> "Language":
    """Load the Python grammar once.

    Raises:
        ExecutorUnavailableError: If the packages are missing or the grammar
            was built for an incompatible tree-sitter version.
    """
    if not TREE_SITTER_AVAILABLE:
        raise ExecutorUnavailableError(
            "tree-sitter", "install tree-sitter and tree-sitter-python"
        )
    try:
        return Language(tspython.language())
    except ValueError as e:
        raise ExecutorUnavailableError("tree-sitter", f"incompatible grammar: {e}") from e


class TreeSitterExecutor(BaseExecutor):
    """Parse buffers into a concrete syntax tree with tree-sitter.

    tree-sitter is an optional install (``parse-bench[tree-sitter]``). When
    it is missing, or the grammar does not match the installed binding, every
    call fails with an "is not supported" message, so a run selecting this
    executor aborts on its first file.

    tree-sitter recovers from syntax errors by inserting error nodes, so
    malformed input is not a failure. It has no body-skipping mode.
    """

    @property
    def name(self) -> str:
        """Return the executor identifier."""
        return "tree-sitter"

    def _perform_parse(self, buffer: Buffer, options: ExecuteOptions) -> None:
        # a fresh parser per call keeps no state across buffers
        parser = Parser(get_language())
        tree = parser.parse(buffer.content)
        del tree
