"""Civic issue tracker: report, upvote and triage local issues over key-value storage."""

__version__ = "0.1.0"
