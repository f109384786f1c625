"""Prompt Builder - Construct LLM prompts for commit message generation."""

from gitai import COMMIT_TYPES

# From https://tbaggery.com/2008/04/19/a-note-about-git-commit-messages.html
BASE_RULES = """\
Capitalized, short (50 chars or less) summary

More detailed explanatory text, if necessary.  Wrap it to about 72
characters or so.  In some contexts, the first line is treated as the
subject of an email and the rest of the text as the body.  The blank
line separating the summary from the body is critical (unless you omit
the body entirely); tools like rebase can get confused if you run the
two together.

Write your commit message in the imperative: "Fix bug" and not "Fixed bug"
or "Fixes bug."  This convention matches up with commit messages generated
by commands like git merge and git revert.

Further paragraphs come after blank lines.

- Bullet points are okay, too

- Typically a hyphen or asterisk is used for the bullet, followed by a
  single space, with blank lines in between, but conventions vary here

- Use a hanging indent"""

_TYPE_LINES = "\n".join(f"  - {name}: {desc}" for name, desc in COMMIT_TYPES.items())

# Conventional Commits 1.0.0
CONVENTIONAL_RULES = f"""\
The summary line MUST follow the Conventional Commits format:

type(scope): description

The type MUST be exactly one of:
{_TYPE_LINES}

The scope is optional: a single word naming the affected area, e.g. fix(parser):
The description starts lowercase, uses the imperative mood and has no trailing period.

Breaking changes MUST be marked with "!" before the colon, e.g. feat(api)!: drop v1 routes,
and explained in a footer starting with "BREAKING CHANGE: ".

Footers go after the body, separated by one blank line, one per line in
"Token: value" form (e.g. "Refs: #123", "Reviewed-by: Name")."""


class PromptBuilder:
    """Constructs prompts for commit message generation.

    Output is a pure function of the diff and the style flag; the diff is
    embedded verbatim and never truncated here.
    """

    def build(self, diff: str, conventional: bool = False) -> str:
        sections = [
            self._build_role_section(),
            self._build_rules_section(conventional),
            self._build_diff_section(diff),
            self._build_final_instructions(),
        ]
        return "\n\n".join(sections)

    def _build_role_section(self) -> str:
        return """You are a helpful assistant that generates git commit messages based on code changes.

Please analyze the following git diff and generate a commit message that follows these conventions:"""

    def _build_rules_section(self, conventional: bool) -> str:
        return f"""<commit_message_rules>
{self.rules(conventional)}
</commit_message_rules>"""

    @staticmethod
    def rules(conventional: bool) -> str:
        if conventional:
            return f"{BASE_RULES}\n\n{CONVENTIONAL_RULES}"
        return BASE_RULES

    def _build_diff_section(self, diff: str) -> str:
        return f"""Here are the staged changes to analyze:

<git_diff>
{diff}
</git_diff>"""

    def _build_final_instructions(self) -> str:
        return """Generate a clear, concise commit message for these changes.
Focus on the "why" and "what" of the changes, not just the "how".
If the changes are simple and self-explanatory, a single line summary is sufficient.
Output only the commit message itself: no preamble, no markdown fences, no commentary."""


def build_prompt(diff: str, use_structured_style: bool = False) -> str:
    """Render the full prompt for ``diff``."""
    return PromptBuilder().build(diff, conventional=use_structured_style)
