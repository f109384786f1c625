"""
gitai

AI-written git commit messages from staged changes.
"""

__version__ = "0.1.0"

# Conventional commit types offered to the model in structured mode
COMMIT_TYPES = {
    'feat': 'A new feature',
    'fix': 'A bug fix',
    'docs': 'Documentation only changes',
    'style': 'Formatting, whitespace, missing semicolons; no code change',
    'refactor': 'Code change that neither fixes a bug nor adds a feature',
    'perf': 'Code change that improves performance',
    'test': 'Adding missing tests or correcting existing tests',
    'build': 'Build system or external dependency changes',
    'ci': 'CI configuration files and scripts',
    'chore': 'Other changes that do not modify source or test files',
    'revert': 'Reverts a previous commit',
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
