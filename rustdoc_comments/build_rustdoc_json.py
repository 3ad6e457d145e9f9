"""Generation of the rustdoc JSON index by invoking cargo."""

import json
import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rustdoc_comments.errors import IndexBuildError
from rustdoc_comments.load_index import FORMAT_TOOLCHAIN

logger = logging.getLogger(__name__)

LIB_TARGET_KINDS = {"lib", "rlib", "dylib", "cdylib", "staticlib", "proc-macro"}


def run_command(cmd: Sequence[str], *, capture: bool = False) -> str:
    """Run a command, raising IndexBuildError if it cannot run or fails."""
    cmd_str = " ".join(cmd)
    logger.info("Running: %s", cmd_str)
    try:
        proc = subprocess.run(
            list(cmd), check=True, capture_output=capture, text=True
        )
    except FileNotFoundError as exc:
        raise IndexBuildError(cmd_str, f"command not found ({exc})") from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() if capture else ""
        reason = f"exited with status {exc.returncode}"
        if detail:
            reason = f"{reason}: {detail}"
        raise IndexBuildError(cmd_str, reason) from exc
    return proc.stdout or ""


def cargo_metadata(manifest_path: Path) -> dict[str, Any]:
    """Return `cargo metadata` for the workspace of a manifest."""
    out = run_command(
        [
            "cargo",
            "metadata",
            "--format-version",
            "1",
            "--no-deps",
            "--manifest-path",
            str(manifest_path),
        ],
        capture=True,
    )
    try:
        return json.loads(out)
    except json.JSONDecodeError as exc:
        raise IndexBuildError(manifest_path, "unreadable cargo metadata") from exc


def lib_crate_name(metadata: dict[str, Any], package: str | None) -> str:
    """Find the library crate name of the selected package."""
    packages = metadata.get("packages") or []
    if package:
        matches = [p for p in packages if p.get("name") == package]
    else:
        matches = packages
    if len(matches) != 1:
        names = ", ".join(sorted(str(p.get("name")) for p in packages))
        reason = (
            f"package '{package}' not found (available: {names})"
            if package
            else f"several packages in workspace, pick one with --package ({names})"
        )
        raise IndexBuildError("cargo metadata", reason)
    pkg = matches[0]
    for target in pkg.get("targets") or []:
        if LIB_TARGET_KINDS.intersection(target.get("kind") or []):
            return str(target["name"]).replace("-", "_")
    msg = f"package '{pkg.get('name')}' has no library"
    raise IndexBuildError("cargo metadata", msg)


def build_rustdoc_json(
    manifest_path: Path | str,
    package: str | None = None,
    toolchain: str | None = FORMAT_TOOLCHAIN,
    *,
    all_features: bool = True,
) -> Path:
    """Run rustdoc with JSON output and return the path of the generated index."""
    manifest = Path(manifest_path)
    metadata = cargo_metadata(manifest)
    crate_name = lib_crate_name(metadata, package)

    cmd = ["cargo"]
    if toolchain:
        cmd.append(f"+{toolchain}")
    cmd += ["rustdoc", "--manifest-path", str(manifest), "--lib"]
    if package:
        cmd += ["-p", package]
    if all_features:
        cmd.append("--all-features")
    cmd += ["--", "-Z", "unstable-options", "--output-format", "json"]
    run_command(cmd)

    target_dir = Path(metadata.get("target_directory") or manifest.parent / "target")
    json_path = target_dir / "doc" / f"{crate_name}.json"
    if not json_path.exists():
        raise IndexBuildError(json_path, "rustdoc did not produce the expected file")
    return json_path
