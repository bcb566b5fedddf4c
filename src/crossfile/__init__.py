"""crossfile: resumable multi-file search and query-replace."""

__version__ = "0.1.0"
