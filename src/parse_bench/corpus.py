"""Load source files from disk into an in-memory corpus."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from parse_bench.models import Buffer, Corpus

logger = structlog.get_logger()

DEFAULT_SUFFIXES = (".py",)


def _iter_source_files(path: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    """Yield eligible files under ``path`` in a deterministic order.

    Directories are walked recursively with sorted entries; symlinked
    directories are not followed.
    """
    if path.is_dir():
        for root, dirs, files in os.walk(path, onerror=_log_walk_error):
            dirs.sort()
            for filename in sorted(files):
                if filename.endswith(suffixes):
                    yield Path(root) / filename
    elif path.name.endswith(suffixes):
        yield path


def _log_walk_error(error: OSError) -> None:
    logger.debug("corpus_path_skipped", path=error.filename, reason=str(error))


def load_sources(
    paths: Iterable[str | Path],
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
) -> Corpus:
    """Load all eligible files in ``paths`` into a corpus.

    A directory path is searched recursively. Paths that do not exist or
    cannot be read are skipped without failing the load.

    Args:
        paths: Files and directories, in the order they should be loaded.
        suffixes: File name suffixes to include.

    Returns:
        Corpus of the loaded buffers in load order.
    """
    suffixes = tuple(suffixes)
    buffers: list[Buffer] = []

    for raw_path in paths:
        for file_path in _iter_source_files(Path(raw_path), suffixes):
            try:
                content = file_path.read_bytes()
            except OSError as e:
                logger.debug("corpus_path_skipped", path=str(file_path), reason=str(e))
                continue
            buffers.append(Buffer(label=str(file_path), content=content))

    corpus = Corpus(buffers=tuple(buffers))
    logger.info(
        "corpus_loaded",
        files=corpus.stats.file_count,
        bytes=corpus.stats.total_bytes,
        lines=corpus.stats.total_lines,
    )
    return corpus
