"""Extract doc comments of selected items from a Rust crate's rustdoc JSON.

The index is either given with --index or generated by running rustdoc on the
package through cargo. Items are selected by module path and kind; their raw
doc comments are printed to stdout.
"""

import argparse
import logging
from collections.abc import Sequence

from rustdoc_comments.item_kind import SELECTABLE_KINDS
from rustdoc_comments.load_index import FORMAT_TOOLCHAIN, FORMAT_VERSION
from rustdoc_comments.run_extraction import run_extraction


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    ap = argparse.ArgumentParser(
        description="Print the doc comments of items selected from rustdoc JSON.",
    )
    ap.add_argument(
        "--index",
        help="Existing rustdoc JSON file to read (skips running cargo)",
    )
    ap.add_argument(
        "--manifest-path",
        help="Path to Cargo.toml (default: Cargo.toml)",
    )
    ap.add_argument("--package", help="Package to extract")
    ap.add_argument(
        "--toolchain",
        help=(
            f"Toolchain used to run rustdoc (default: {FORMAT_TOOLCHAIN}, which "
            f"writes rustdoc JSON format_version {FORMAT_VERSION}; another "
            "toolchain needs a matching index.format_version)"
        ),
    )
    ap.add_argument(
        "--module-path",
        help="Filter by module path, e.g. datafusion_expr::expr_fn",
    )
    ap.add_argument(
        "--kind",
        help=(
            "Filter by item kind: "
            + ", ".join(k.value for k in SELECTABLE_KINDS)
            + " or any (default: function)"
        ),
    )
    ap.add_argument(
        "--recursive",
        action="store_true",
        help="Also include items of nested modules",
    )
    ap.add_argument(
        "--include-methods",
        action="store_true",
        help="Include inherent methods of selected structs and enums",
    )
    ap.add_argument(
        "--include-private",
        action="store_true",
        help="Keep items that are not public",
    )
    ap.add_argument(
        "--with-names",
        action="store_true",
        help="Head each comment with '# <item name>'",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the extraction."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_extraction(args)


if __name__ == "__main__":
    raise SystemExit(main())
