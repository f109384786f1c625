"""Prompt Construction Package"""

from gitai.prompts.builder import PromptBuilder, build_prompt, BASE_RULES, CONVENTIONAL_RULES

__all__ = [
    "PromptBuilder",
    "build_prompt",
    "BASE_RULES",
    "CONVENTIONAL_RULES",
]
