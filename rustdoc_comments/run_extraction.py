"""Orchestration logic for extracting doc comments from a rustdoc index."""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rustdoc_comments.build_rustdoc_json import build_rustdoc_json
from rustdoc_comments.comment_collector import CollectedComment, collect
from rustdoc_comments.errors import (
    IndexLoadError,
    InvalidQueryError,
    PathNotFoundError,
    SchemaMismatchError,
)
from rustdoc_comments.item_descriptor import ItemId
from rustdoc_comments.item_graph import ItemGraph
from rustdoc_comments.item_kind import ItemKind, parse_kind_filter
from rustdoc_comments.load_config import load_config
from rustdoc_comments.load_index import load_index
from rustdoc_comments.path_resolver import resolve, resolve_all
from rustdoc_comments.render_comments import render_comments

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PATH_NOT_FOUND = 1
EXIT_ERROR = 2

DEFAULT_KIND = "function"


@dataclass(frozen=True)
class Query:
    """One (package, module path, kind) selection to extract."""

    package: str | None
    module_path: str | None
    kind: ItemKind | None
    recursive: bool = False
    include_methods: bool = False


def run_extraction(args: argparse.Namespace) -> int:
    """Execute every query and print the collected comments.

    Returns 0 on success, 1 when some query named a path that does not exist
    and 2 when the index could not be loaded or a query is invalid.
    """
    config = load_config(args.config)
    _apply_overrides(config, args)

    try:
        queries = build_queries(args, config)
    except InvalidQueryError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    graphs: dict[str | None, ItemGraph] = {}
    status = EXIT_OK
    printed = False
    for query in queries:
        try:
            graph = _graph_for(query.package, args, config, graphs)
        except (IndexLoadError, SchemaMismatchError) as exc:
            logger.error("%s", exc)
            return EXIT_ERROR
        try:
            comments = run_query(
                graph, query, public_only=config["output"]["public_only"]
            )
        except PathNotFoundError as exc:
            logger.error("%s", exc)
            status = max(status, EXIT_PATH_NOT_FOUND)
            continue
        except InvalidQueryError as exc:
            logger.error("%s", exc)
            status = max(status, EXIT_ERROR)
            continue

        text = render_comments(comments, with_names=config["output"]["with_names"])
        if text:
            if printed:
                sys.stdout.write("\n")
            sys.stdout.write(text)
            printed = True
        logger.info(
            "%s: %d documented item(s)", query.module_path or "<all>", len(comments)
        )
    return status


def run_query(
    graph: ItemGraph, query: Query, *, public_only: bool = True
) -> list[CollectedComment]:
    """Resolve one query against a loaded graph and collect its comments."""
    if query.module_path is not None:
        ids = resolve(graph, query.module_path, query.kind, recursive=query.recursive)
    else:
        ids = resolve_all(graph, query.kind)
    if query.include_methods:
        ids = _with_methods(graph, ids)
    if public_only:
        ids = [i for i in ids if graph.get(i).is_public]
    return collect(graph, ids)


def build_queries(args: argparse.Namespace, config: dict[str, Any]) -> list[Query]:
    """Build the queries from the command line, or from config when it has none."""
    configured = config.get("queries") or []
    if args.module_path is not None or args.kind is not None or not configured:
        return [
            Query(
                package=args.package,
                module_path=args.module_path,
                kind=parse_kind_filter(args.kind or DEFAULT_KIND),
                recursive=args.recursive,
                include_methods=args.include_methods,
            )
        ]
    return [
        Query(
            package=q.get("package", args.package),
            module_path=q.get("module_path"),
            kind=parse_kind_filter(q.get("kind", DEFAULT_KIND)),
            recursive=bool(q.get("recursive", args.recursive)),
            include_methods=bool(q.get("include_methods", args.include_methods)),
        )
        for q in configured
    ]


def _apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> None:
    """Let command line flags take precedence over configuration values."""
    if args.manifest_path:
        config["build"]["manifest_path"] = args.manifest_path
    if args.toolchain:
        config["build"]["toolchain"] = args.toolchain
    if args.with_names:
        config["output"]["with_names"] = True
    if args.include_private:
        config["output"]["public_only"] = False


def _graph_for(
    package: str | None,
    args: argparse.Namespace,
    config: dict[str, Any],
    graphs: dict[str | None, ItemGraph],
) -> ItemGraph:
    """Load (building first if needed) the index of a package once per run."""
    key = None if args.index else package
    if key in graphs:
        return graphs[key]
    if args.index:
        json_path = Path(args.index)
    else:
        build = config["build"]
        json_path = build_rustdoc_json(
            build["manifest_path"],
            package,
            build["toolchain"],
            all_features=build["all_features"],
        )
    graph = load_index(json_path, config["index"]["format_version"])
    graphs[key] = graph
    return graph


def _with_methods(graph: ItemGraph, ids: list[ItemId]) -> list[ItemId]:
    """Insert the inherent methods of each type right after the type."""
    out: dict[ItemId, None] = {}
    for item_id in ids:
        out.setdefault(item_id, None)
        for method_id in graph.associated_methods(item_id):
            out.setdefault(method_id, None)
    return list(out)
