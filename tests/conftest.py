import pytest
import tempfile
import shutil
from pathlib import Path


@pytest.fixture
def temp_workspace():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def output_dir(temp_workspace):
    """Directory receiving the generated reports, outside the scanned tree."""
    out = temp_workspace / "output"
    out.mkdir()
    return out


@pytest.fixture
def sample_repo(temp_workspace):
    """Create a sample repository structure for testing."""
    repo_root = temp_workspace / "sample_repo"
    repo_root.mkdir()

    # Create directory structure
    (repo_root / "core").mkdir()
    (repo_root / "docs").mkdir()
    (repo_root / "docs" / "api").mkdir()
    (repo_root / "pkg").mkdir()
    (repo_root / "pkg" / "util").mkdir()
    (repo_root / "web").mkdir()

    # Create files
    (repo_root / "README.md").write_text("# Sample Repository\n\nTest repository for packfiles")
    (repo_root / "LICENSE.MD").write_text("MIT License")
    (repo_root / "main.go").write_text("package main\n\nfunc main() {}")
    (repo_root / "notes.txt").write_text("plain notes")
    (repo_root / "Makefile").write_text("all:\n\tgo build")
    (repo_root / "core" / "lib.mbt").write_text("fn main { println(1) }")
    (repo_root / "docs" / "guide.md").write_text("Guide text")
    (repo_root / "docs" / "api" / "index.html").write_text("<html></html>")
    (repo_root / "pkg" / "util" / "util.go").write_text("package util")
    (repo_root / "pkg" / "util" / "util_test.go").write_text("package util")
    (repo_root / "web" / "style.css").write_text("body { margin: 0 }")

    return repo_root


@pytest.fixture
def go_md_repo(temp_workspace):
    """Two-file repository: a.go and b.md."""
    repo_root = temp_workspace / "project"
    repo_root.mkdir()
    (repo_root / "a.go").write_bytes(b"package main")
    (repo_root / "b.md").write_bytes(b"# Title\ntext")
    return repo_root
