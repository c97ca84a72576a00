"""Shared pytest fixtures for skill sync tests."""

from pathlib import Path

import pytest


@pytest.fixture
def repo_root(tmp_path):
    """Create a repository checkout with a populated skills directory."""
    root = tmp_path / "repo"
    skills = root / "skills"
    (root / "src" / "skill_sync").mkdir(parents=True)

    review = skills / "code-review"
    (review / "references").mkdir(parents=True)
    (review / "SKILL.md").write_text(
        """---
name: code-review
description: Review a diff before merging
---

# Code Review

Read the diff twice.
"""
    )
    (review / "references" / "checklist.md").write_text("- tests pass\n")

    tdd = skills / "tdd"
    tdd.mkdir()
    (tdd / "SKILL.md").write_text(
        """---
name: tdd
description: Write the failing test first
---

# TDD
"""
    )
    (tdd / "run.sh").write_text("#!/bin/sh\necho red green refactor\n")

    # OS metadata that must never reach the target
    (skills / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")
    (tdd / ".DS_Store").write_bytes(b"\x00\x00\x00\x01Bud1")

    return root


@pytest.fixture
def source_dir(repo_root):
    """Provide the skills directory inside the repository fixture."""
    return repo_root / "skills"


@pytest.fixture
def target_dir(tmp_path):
    """Provide a not-yet-created target directory under a fake Codex home."""
    return tmp_path / "codex-home" / "skills"


@pytest.fixture
def snapshot():
    """Return a function mapping every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            str(path.relative_to(root)): path.read_bytes()
            for path in sorted(root.rglob("*"))
            if path.is_file()
        }

    return _snapshot
