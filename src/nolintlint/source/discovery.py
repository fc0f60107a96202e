"""
Source discovery.

Expands command line patterns into source files:
- a file is taken as is
- a directory contributes its own matching files
- "dir/..." walks dir recursively, skipping vendor, testdata and
  directories starting with "." or "_"
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from nolintlint.directives.models import CommentGroup
from nolintlint.shared.domain.exceptions import SourceLoadError
from nolintlint.shared.infrastructure.logging import get_logger
from nolintlint.source.comments import extract_comment_groups

logger = get_logger(__name__)

RECURSIVE_SUFFIX = "..."
SKIPPED_DIRECTORIES = frozenset({"vendor", "testdata"})


def _is_skipped_dir(path: Path) -> bool:
    name = path.name
    return name in SKIPPED_DIRECTORIES or name.startswith((".", "_"))


def _matches(path: Path, extensions: tuple[str, ...]) -> bool:
    return path.is_file() and path.suffix in extensions


def _walk(root: Path, extensions: tuple[str, ...]) -> Iterator[Path]:
    for child in sorted(root.iterdir()):
        if child.is_dir():
            if not _is_skipped_dir(child):
                yield from _walk(child, extensions)
        elif _matches(child, extensions):
            yield child


def _expand(pattern: str, extensions: tuple[str, ...]) -> Iterator[Path]:
    recursive = pattern.endswith(RECURSIVE_SUFFIX)
    if recursive:
        pattern = pattern[: -len(RECURSIVE_SUFFIX)].rstrip("/") or "."

    path = Path(pattern)
    if not path.exists():
        raise SourceLoadError(f"no such file or directory: {pattern}", context={"pattern": pattern})

    if path.is_file():
        if recursive:
            raise SourceLoadError(f"{pattern} is not a directory", context={"pattern": pattern})
        yield path
    elif recursive:
        yield from _walk(path, extensions)
    else:
        yield from (child for child in sorted(path.iterdir()) if _matches(child, extensions))


def iter_source_files(
    patterns: Iterable[str],
    extensions: Iterable[str] = (".go",),
) -> Iterator[Path]:
    """
    Expand patterns into source files.

    Args:
        patterns: Files, directories or "dir/..." patterns (empty means ".")
        extensions: Suffixes of files picked up from directories

    Yields:
        Source file paths in pattern order, sorted within a directory,
        each at most once

    Raises:
        SourceLoadError: If a pattern names a path that does not exist
    """
    patterns = list(patterns) or ["."]
    extensions = tuple(extensions)
    seen: set[Path] = set()
    for pattern in patterns:
        for path in _expand(pattern, extensions):
            key = path.resolve()
            if key in seen:
                continue
            seen.add(key)
            yield path


def load_comment_groups(path: Path) -> list[CommentGroup]:
    """
    Read a source file and extract its comment groups.

    Args:
        path: Source file

    Returns:
        Comment groups with positions naming the file

    Raises:
        SourceLoadError: If the file cannot be read or decoded
        SourceParseError: If the file is not lexically valid
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(f"cannot read {path}: {e}", context={"path": str(path)}) from e

    groups = extract_comment_groups(source, filename=str(path))
    logger.debug("source_loaded", path=str(path), comment_groups=len(groups))
    return groups
