"""Modal terminal text editor with per-line C syntax highlighting."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "cli",
    "config",
    "keymaps",
    "modes",
    "render",
    "runtime",
    "session",
    "syntax",
]

__version__ = "0.1.0"
