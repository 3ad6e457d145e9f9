"""Exceptions raised while loading an index and resolving queries against it."""


class DocExtractError(Exception):
    """Base class for every error the extractor reports."""


class IndexLoadError(DocExtractError):
    """The documentation index could not be read or deserialized."""

    def __init__(self, source: object, reason: str) -> None:
        """Record the offending source alongside the reason."""
        super().__init__(f"Cannot load documentation index {source}: {reason}")
        self.source = source
        self.reason = reason


class IndexBuildError(IndexLoadError):
    """Generating the documentation index with cargo failed."""


class SchemaMismatchError(DocExtractError):
    """The index was parsed but uses an unexpected schema version or shape."""

    def __init__(self, found: object, expected: object, detail: str = "") -> None:
        """Record the detected and expected schema markers."""
        msg = (
            f"Unsupported rustdoc JSON format_version {found!r} "
            f"(expected {expected!r}); regenerate the index with a matching "
            "toolchain or set index.format_version in the configuration"
        )
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)
        self.found = found
        self.expected = expected


class PathNotFoundError(DocExtractError):
    """A module path dead-ends at some segment."""

    def __init__(self, segment: str, prefix: str, path: str) -> None:
        """Record the failing segment and the prefix resolved before it."""
        where = f"'{prefix}'" if prefix else "the crate root"
        super().__init__(f"No item named '{segment}' under {where} (path: {path})")
        self.segment = segment
        self.prefix = prefix
        self.path = path


class InvalidQueryError(DocExtractError, ValueError):
    """A query carries a malformed module path or an unknown kind."""
