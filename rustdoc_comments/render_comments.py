"""Plain-text rendering of collected doc comments."""

from collections.abc import Sequence

from rustdoc_comments.comment_collector import CollectedComment


def render_comments(
    comments: Sequence[CollectedComment], *, with_names: bool = False
) -> str:
    """Join comments with blank lines, optionally heading each with its name."""
    blocks = []
    for c in comments:
        if with_names:
            blocks.append(f"# {c.name}\n\n{c.doc}")
        else:
            blocks.append(c.doc)
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
