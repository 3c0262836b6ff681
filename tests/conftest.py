"""Pytest fixtures for kalle tests"""
import io
import tempfile
from pathlib import Path

import git
import pytest
from rich.console import Console


@pytest.fixture
def console():
    """A rich Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_global_config(temp_dir, monkeypatch):
    """Point git's global config at a throwaway file."""
    home = temp_dir / "home"
    home.mkdir()
    gitconfig = home / ".gitconfig"
    gitconfig.write_text("")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(gitconfig))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    return gitconfig


@pytest.fixture
def git_repo(temp_dir, isolated_global_config):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository on main with an unmerged and a merged feature branch."""
    repo = git_repo
    repo_path = Path(repo.working_dir)

    repo.git.checkout('-b', 'feature/a')
    (repo_path / "a.txt").write_text("A\n")
    repo.index.add(["a.txt"])
    repo.index.commit("Add a")

    repo.git.checkout('main')
    repo.git.checkout('-b', 'feature/b')

    repo.git.checkout('main')

    yield repo
