from __future__ import annotations


class SnippetSearchError(Exception):
    """
    Base class for errors surfaced to the command line.
    """


class InvalidInput(SnippetSearchError, ValueError):
    """
    Input that cannot be embedded or ranked (non-text, negative top-k).
    """


class StoreUnavailable(SnippetSearchError):
    """
    Store file missing, unreadable, or not a valid document collection.
    """


class IOFailure(SnippetSearchError):
    """
    Writing the store failed.
    """
