"""Issue rendering for the command line."""

import json
from collections.abc import Iterable, Iterator

from nolintlint.directives.models import Issue


def render_text(issues: Iterable[Issue]) -> Iterator[str]:
    """Yield one "<explanation> at <position>" line per issue."""
    for issue in issues:
        yield str(issue)


def render_json(issues: Iterable[Issue]) -> str:
    """
    Render issues as a JSON document.

    Returns:
        {"issues": [...], "count": n} with camelCase issue fields
    """
    data = [issue.to_json() for issue in issues]
    return json.dumps({"issues": data, "count": len(data)}, indent=2)
