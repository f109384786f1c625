"""CLI Commands"""

import getpass
import logging
import sys
import time

from gitai.cli.utils import remove_commit_template, write_commit_template
from gitai.config import load_api_key, load_config, save_api_key
from gitai.generator import generate_commit_message
from gitai.git import GitAnalyzer, GitError
from gitai.llm import LLMError
from gitai.output import Spinner, bold, dim, print_error, print_success

logger = logging.getLogger(__name__)


def run_init() -> int:
    """Prompt for the Anthropic API key and store it."""
    print(f"\n{bold('gitai setup')}\n")
    print(dim("Create a key at https://console.anthropic.com/settings/keys\n"))

    try:
        api_key = getpass.getpass("Anthropic API key: ")
    except (KeyboardInterrupt, EOFError):
        print()
        print_error("Cancelled.")
        return 1

    try:
        path = save_api_key(api_key)
    except ValueError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Could not save API key: {e}")
        return 1

    print_success(f"Saved to {path}")
    return 0


def run_commit(conventional: bool = False, print_only: bool = False) -> int:
    """Generate a message for the staged diff and open it in `git commit`.

    Returns:
        int: Exit code (git's own exit code when a commit is attempted)
    """
    try:
        api_key = load_api_key()
    except (OSError, ValueError) as e:
        print_error(f"Could not read API key: {e}")
        return 1
    if not api_key:
        print_error("No API key found. Run 'gitai init' or set ANTHROPIC_API_KEY.")
        return 1

    config = load_config()
    conventional = conventional or config.conventional

    try:
        git = GitAnalyzer()
        diff = git.get_staged_diff()
    except GitError as e:
        print_error(str(e))
        return 1

    if not diff.strip():
        print_error("No staged changes. Run 'git add' first.")
        return 1

    t0 = time.time()
    try:
        with Spinner("Generating commit message..."):
            message = generate_commit_message(
                api_key,
                diff,
                conventional,
                base_url=config.base_url,
                timeout=config.timeout,
            )
    except LLMError as e:
        logger.debug("Generation failed (%s)", e.kind.value)
        print_error(str(e))
        return 1
    logger.debug("Generated %d chars in %.2fs", len(message), time.time() - t0)

    if print_only or not sys.stdout.isatty():
        print(message)
        return 0

    try:
        template = write_commit_template(message)
    except OSError as e:
        print_error(f"Could not write commit template: {e}")
        return 1

    try:
        return git.commit_with_template(template)
    except GitError as e:
        print_error(str(e))
        return 1
    finally:
        remove_commit_template(template)
