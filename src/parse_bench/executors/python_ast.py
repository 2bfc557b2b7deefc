"""Executor wrapping CPython's built-in compiler parser."""

import ast

from parse_bench.executors.base import BaseExecutor
from parse_bench.models import Buffer, ExecuteOptions


class PythonAstExecutor(BaseExecutor):
    """Parse buffers with the interpreter's own parser into an ``ast`` tree.

    Uses ``compile(..., ast.PyCF_ONLY_AST)``, which runs the compiler's
    tokenizer and parser and stops before code generation. The compiler has
    no body-skipping mode, so ``skip_bodies`` is ignored.

    A ``SyntaxError`` is a parse failure and aborts the run.
    """

    @property
    def name(self) -> str:
        """Return the executor identifier."""
        return "python-ast"

    def _perform_parse(self, buffer: Buffer, options: ExecuteOptions) -> None:
        try:
            compile(
                buffer.content,
                buffer.label,
                "exec",
                flags=ast.PyCF_ONLY_AST,
                dont_inherit=True,
            )
        except SyntaxError as e:
            location = buffer.label if e.lineno is None else f"{buffer.label}:{e.lineno}"
            raise SyntaxError(f"{location}: {e.msg}") from e
        except ValueError as e:
            # null bytes on interpreters that do not report them as SyntaxError
            raise ValueError(f"{buffer.label}: {e}") from e
