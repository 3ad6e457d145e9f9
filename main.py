"""Entry point for extracting doc comments from a Rust crate."""

from rustdoc_comments.extract_doc_comments import main

if __name__ == "__main__":
    raise SystemExit(main())
