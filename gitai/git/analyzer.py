"""Git Analyzer - Read staged changes and hand off to git commit."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitAnalyzer:
    """Thin wrapper over the git binary for the current working directory."""

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        logger.debug("Running git %s", ' '.join(args))
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr}") from e
        except FileNotFoundError as e:
            raise GitError("Git is not installed or not in PATH") from e

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            self._run_git('--version')
        except GitError as e:
            raise GitError("Git is not installed or not in PATH") from e

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError as e:
            raise GitError("Not inside a git repository") from e

    def get_staged_diff(self) -> str:
        """Unified diff of everything in the index."""
        return self._run_git('diff', '--staged')

    def commit_with_template(self, template: Path) -> int:
        """Run an interactive `git commit` seeded with ``template``. Returns git's exit code."""
        logger.debug("Running git commit --template %s", template)
        try:
            result = subprocess.run(['git', 'commit', '--template', str(template)])
        except FileNotFoundError as e:
            raise GitError("Git is not installed or not in PATH") from e
        return result.returncode
