"""Tests for generating the rustdoc JSON index through cargo."""

import json
import subprocess
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from rustdoc_comments.build_rustdoc_json import build_rustdoc_json, lib_crate_name
from rustdoc_comments.errors import IndexBuildError, IndexLoadError
from rustdoc_comments.load_index import FORMAT_TOOLCHAIN


def _metadata(target_dir: Path) -> dict[str, Any]:
    return {
        "target_directory": str(target_dir),
        "packages": [
            {
                "name": "datafusion-expr",
                "targets": [
                    {"name": "datafusion-expr", "kind": ["lib"]},
                    {"name": "bench", "kind": ["bench"]},
                ],
            },
            {"name": "cli", "targets": [{"name": "cli", "kind": ["bin"]}]},
        ],
    }


def test_lib_crate_name(tmp_path: Path) -> None:
    """Verify the library target name is found and normalized."""
    metadata = _metadata(tmp_path)
    assert lib_crate_name(metadata, "datafusion-expr") == "datafusion_expr"


def test_lib_crate_name_errors(tmp_path: Path) -> None:
    """Verify missing packages, ambiguity and binaries are reported."""
    metadata = _metadata(tmp_path)
    with pytest.raises(IndexBuildError, match="not found"):
        lib_crate_name(metadata, "nope")
    with pytest.raises(IndexBuildError, match="--package"):
        lib_crate_name(metadata, None)
    with pytest.raises(IndexBuildError, match="no library"):
        lib_crate_name(metadata, "cli")


def test_build_rustdoc_json(tmp_path: Path) -> None:
    """Verify cargo is invoked with JSON output and the file path is returned."""
    target = tmp_path / "target"
    calls: list[list[str]] = []

    def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        calls.append(cmd)
        if "metadata" in cmd:
            return subprocess.CompletedProcess(cmd, 0, json.dumps(_metadata(target)))
        out = target / "doc" / "datafusion_expr.json"
        out.parent.mkdir(parents=True)
        out.write_text("{}", encoding="utf-8")
        return subprocess.CompletedProcess(cmd, 0, None)

    with patch("rustdoc_comments.build_rustdoc_json.subprocess.run", fake_run):
        path = build_rustdoc_json(tmp_path / "Cargo.toml", "datafusion-expr")

    assert path == target / "doc" / "datafusion_expr.json"
    rustdoc_cmd = calls[1]
    assert rustdoc_cmd[:3] == ["cargo", f"+{FORMAT_TOOLCHAIN}", "rustdoc"]
    assert ["-p", "datafusion-expr"] == rustdoc_cmd[6:8]
    assert "--all-features" in rustdoc_cmd
    assert rustdoc_cmd[-4:] == ["-Z", "unstable-options", "--output-format", "json"]


def test_build_failure_is_index_build_error(tmp_path: Path) -> None:
    """Verify a failing cargo command surfaces as an IndexLoadError subclass."""

    def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        raise subprocess.CalledProcessError(101, cmd, stderr="error: no manifest")

    with patch("rustdoc_comments.build_rustdoc_json.subprocess.run", fake_run):
        with pytest.raises(IndexLoadError, match="no manifest"):
            build_rustdoc_json(tmp_path / "Cargo.toml")


def test_cargo_missing(tmp_path: Path) -> None:
    """Verify a missing cargo binary is reported."""

    def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        raise FileNotFoundError("cargo")

    with patch("rustdoc_comments.build_rustdoc_json.subprocess.run", fake_run):
        with pytest.raises(IndexBuildError, match="command not found"):
            build_rustdoc_json(tmp_path / "Cargo.toml")


def test_missing_output_file(tmp_path: Path) -> None:
    """Verify a run that produces no JSON file is an error."""
    target = tmp_path / "target"

    def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
        if "metadata" in cmd:
            return subprocess.CompletedProcess(cmd, 0, json.dumps(_metadata(target)))
        return subprocess.CompletedProcess(cmd, 0, None)

    with patch("rustdoc_comments.build_rustdoc_json.subprocess.run", fake_run):
        with pytest.raises(IndexBuildError, match="did not produce"):
            build_rustdoc_json(
                tmp_path / "Cargo.toml", "datafusion-expr", toolchain=None
            )
