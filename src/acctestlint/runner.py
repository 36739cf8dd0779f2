"""Runs analyzers over files and directories."""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .analysis import Analyzer, Finding, run_analyzer
from .config import LintConfig
from .errors import SourceNotFoundError, UnsupportedLanguageError
from .goast.parser import GoParser
from .goast.protocol import TreeProvider
from .goast.resolver import ImportResolver
from .registry import all_analyzers

GO_EXTENSIONS = [".go"]

# Directories the go tool never builds from
_SKIPPED_DIR_NAMES = {"testdata"}

_parser_cache: dict[str, TreeProvider] = {}


def get_tree_provider(path: str) -> TreeProvider:
    """Get the front end for a file path.

    Raises:
        UnsupportedLanguageError: If the extension has no front end.
    """
    ext = Path(path).suffix.lower()
    if ext not in GO_EXTENSIONS:
        raise UnsupportedLanguageError(path, GO_EXTENSIONS)
    if ext not in _parser_cache:
        _parser_cache[ext] = GoParser()
    return _parser_cache[ext]


@dataclass
class FileResult:
    """Findings for one file."""

    path: str
    findings: list[Finding] = field(default_factory=list)
    has_parse_error: bool = False


@dataclass
class RunResult:
    """Findings for a whole run, in file then source order."""

    files: list[FileResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def findings(self) -> list[Finding]:
        return [f for file_result in self.files for f in file_result.findings]

    def to_dict(self) -> dict[str, Any]:
        findings = self.findings
        return {
            "findings": [f.to_dict() for f in findings],
            "count": len(findings),
        }


def check_source(
    source: str,
    path: str,
    analyzers: list[Analyzer] | None = None,
    provider: TreeProvider | None = None,
) -> FileResult:
    """Run analyzers over one file's source text.

    Args:
        source: File content.
        path: File path, used for positions and to pick the front end.
        analyzers: Analyzers to run (default: all registered).
        provider: Front end override; defaults to the one for `path`.
    """
    if provider is None:
        provider = get_tree_provider(path)
    if analyzers is None:
        analyzers = all_analyzers()

    source_file = provider.parse(source, path)
    resolver = ImportResolver.for_file(source_file)

    result = FileResult(path=path, has_parse_error=source_file.has_parse_error)
    for analyzer in analyzers:
        result.findings.extend(run_analyzer(analyzer, source_file, resolver))
    return result


def _is_excluded(rel_path: str, patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in patterns)


def discover_files(
    paths: list[str], config: LintConfig
) -> tuple[list[str], list[str]]:
    """Expand files and directories into the Go files to check.

    Explicit file arguments are always checked. Directories are walked
    in sorted order, skipping hidden directories, testdata/, vendor/
    (unless config.include_vendor) and files matching config.exclude.
    A file reached through more than one argument is listed once.

    Returns:
        Tuple of (files to check, skipped files).

    Raises:
        SourceNotFoundError: If a path doesn't exist.
        UnsupportedLanguageError: If an explicit file isn't a Go file.
    """
    files: list[str] = []
    skipped: list[str] = []
    seen: set[Path] = set()

    def add(file_path: Path) -> None:
        key = file_path.resolve()
        if key not in seen:
            seen.add(key)
            files.append(file_path.as_posix())

    for raw in paths:
        root = Path(raw)
        if not root.exists():
            raise SourceNotFoundError(raw)

        if root.is_file():
            get_tree_provider(raw)
            add(root)
            continue

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                d
                for d in dirnames
                if not d.startswith(".")
                and d not in _SKIPPED_DIR_NAMES
                and (config.include_vendor or d != "vendor")
            )
            for name in sorted(filenames):
                if Path(name).suffix.lower() not in GO_EXTENSIONS:
                    continue
                file_path = Path(dirpath) / name
                rel_path = file_path.relative_to(root).as_posix()
                if _is_excluded(rel_path, config.exclude):
                    skipped.append(file_path.as_posix())
                    continue
                add(file_path)

    return files, skipped


def check_paths(
    paths: list[str],
    config: LintConfig | None = None,
    analyzers: list[Analyzer] | None = None,
) -> RunResult:
    """Check every Go file under `paths`.

    Raises:
        SourceNotFoundError: If a path doesn't exist.
        UnsupportedLanguageError: If an explicit file isn't a Go file.
    """
    config = config or LintConfig()
    files, skipped = discover_files(paths, config)

    result = RunResult(skipped=skipped)
    for file_path in files:
        source = Path(file_path).read_text(encoding="utf-8", errors="replace")
        result.files.append(check_source(source, file_path, analyzers=analyzers))
    return result
