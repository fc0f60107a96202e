"""
Source front end: finds files and turns them into comment groups.

Exports:
    - extract_comment_groups: Comment groups from source text
    - normalize_comment_text: Comment text with markers stripped
    - iter_source_files: Expand paths and "dir/..." patterns
    - load_comment_groups: Comment groups from a file
"""

from nolintlint.directives.models import normalize_comment_text
from nolintlint.source.comments import CommentScanner, extract_comment_groups
from nolintlint.source.discovery import iter_source_files, load_comment_groups

__all__ = [
    "CommentScanner",
    "extract_comment_groups",
    "normalize_comment_text",
    "iter_source_files",
    "load_comment_groups",
]
