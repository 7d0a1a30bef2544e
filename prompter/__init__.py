# prompter/__init__.py

from prompter.prompter import Prompter, ensure_ends_with_space

__all__ = ["Prompter", "ensure_ends_with_space"]
