"""Command-line surface: bootstrap (composition root), commands, main."""
