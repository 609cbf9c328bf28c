"""Editor side-panel logic: file tree, git status parsing, command palette and terminal keys."""

__version__ = "0.1.0"