"""todo_list: a command-line task tracker backed by a single JSON document."""

__version__ = "0.8.0"
