# driftpatch/commit/core.py
import contextlib
import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..errors.grammar import DiffError
from ..errors.path import PathViolation
from ..models.blocks import ApplyResult
from .patch import DiffEngine


log = logging.getLogger(__name__)


@dataclass
class FilePatch:
    """A SEARCH/REPLACE diff aimed at one repository-relative file."""
    path: str
    diff: str


@dataclass
class PatchSummary:
    """
    Outcome of patch_files.

    ``success`` and ``failed`` hold one entry per patch, in order. A path with
    several patches can appear in both when an earlier one applied and a later
    one did not; in best_effort mode the content from the patches that applied
    is still written.
    """

    success: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False
    # Map relative path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)
    # Map relative path -> result of the last diff run against it
    results: Dict[str, ApplyResult] = field(default_factory=dict)


def _normalized_path(base_real: str, rel_path: str) -> str:
    """
    Join a repository-relative path onto base_real and make sure it stays inside.
    Raises PathViolation if the resolved path escapes base_real.
    """
    resolved = os.path.realpath(os.path.join(base_real, *rel_path.replace("\\", "/").split("/")))
    if os.path.commonpath([base_real, resolved]) != base_real:
        raise PathViolation(f"Path traversal attempt detected for '{rel_path}'")
    return resolved


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def _read_text(path: str) -> str:
    # newline="" keeps CRLF/CR intact so the engine can restore the file's EOL style.
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def _write_atomic(dest: str, text: str) -> None:
    """Stage to a temp file beside dest, then promote with os.replace()."""
    fd, tmp = tempfile.mkstemp(prefix=".dp-", suffix=".tmp", dir=os.path.dirname(dest))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp, dest)
    except BaseException:
        with contextlib.suppress(OSError):
            os.remove(tmp)
        raise


def _failure_message(result: ApplyResult) -> str:
    reasons = "; ".join(
        f"block {o.block_index + 1}: {o.error}" for o in result.failed_outcomes
    )
    return f"No block applied ({reasons})" if reasons else "Diff contains no blocks"


def patch_file(
    base_path: str,
    path: str,
    diff: str,
    *,
    engine: Optional[DiffEngine] = None,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
) -> ApplyResult:
    """
    Read ``path`` under ``base_path``, apply ``diff`` and write the result back.

    The file is only written when at least one block applied and ``dry_run``
    is off.

    Raises:
        PathViolation: ``path`` escapes ``base_path``.
        FileNotFoundError: the file does not exist.
        GrammarError: the diff markers are malformed.
    """
    engine = engine or DiffEngine()
    base_real = os.path.realpath(base_path)
    resolved = _normalized_path(base_real, path)
    original = _read_text(resolved)
    result = engine.apply_diff(original, diff)
    if result.success and not dry_run:
        if backup_ext:
            _write_text(_backup_path(resolved, backup_ext), original)
        _write_atomic(resolved, result.content)
        log.debug("patched %s (%d block(s) applied)", path, result.applied_count)
    return result


def patch_files(
    base_path: str,
    patches: List[FilePatch],
    *,
    engine: Optional[DiffEngine] = None,
    mode: str = "best_effort",
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
) -> PatchSummary:
    """
    Apply a batch of diffs to files under ``base_path``.

    Several patches may target the same file; they are applied in order, each
    to the content left by the previous one. All diffs are applied in memory
    before anything is written.

    Args:
        base_path: Root directory that every patch path must stay inside.
        patches: FilePatch entries, applied in order.
        engine: DiffEngine to use; a default-configured one otherwise.
        mode: "best_effort" (default) writes every file whose diffs applied and
              records the rest; "fail_fast" stops at the first failing patch and
              writes nothing.
        dry_run: Apply in memory and report, but never touch the filesystem.
        backup_ext: Optional extension for a copy of each file's original
                    content (e.g. ".orig" or "orig").

    Returns:
        PatchSummary with per-path results and errors.
    """
    if mode not in {"best_effort", "fail_fast"}:
        raise ValueError("mode must be one of {'best_effort','fail_fast'}")

    engine = engine or DiffEngine()
    summary = PatchSummary(dry_run=dry_run)
    base_real = os.path.realpath(base_path)

    originals: Dict[str, str] = {}
    current: Dict[str, str] = {}
    rel_for: Dict[str, str] = {}

    for fp in patches:
        try:
            resolved = _normalized_path(base_real, fp.path)
            if resolved not in current:
                originals[resolved] = current[resolved] = _read_text(resolved)
            result = engine.apply_diff(current[resolved], fp.diff)
            summary.results[fp.path] = result
            if not result.success:
                raise DiffError(_failure_message(result))
            current[resolved] = result.content
            rel_for[resolved] = fp.path
            summary.success.append(
                f"DRY RUN: Would patch {fp.path} ({result.applied_count} block(s))"
                if dry_run else fp.path
            )
        except (DiffError, OSError, UnicodeDecodeError) as e:
            log.debug("patch for %s failed: %s", fp.path, e)
            summary.failed.append(fp.path)
            summary.errors[fp.path] = str(e)
            if mode == "fail_fast":
                summary.success.clear()
                return summary

    if dry_run:
        return summary

    for resolved, rel in rel_for.items():
        try:
            if backup_ext:
                _write_text(_backup_path(resolved, backup_ext), originals[resolved])
            _write_atomic(resolved, current[resolved])
        except OSError as e:
            summary.failed.append(rel)
            summary.errors[rel] = str(e)
            summary.success = [p for p in summary.success if p != rel]
            if mode == "fail_fast":
                return summary
    return summary
