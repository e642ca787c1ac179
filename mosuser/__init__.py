"""User-space pieces of a small teaching operating system: address arithmetic, option scanning, path resolution, and the shell's history, tokenizer, line editor and built-in commands."""

__version__ = "0.1.0"