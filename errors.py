"""
Error taxonomy for the analysis pipeline.

Each error's message is the text shown to the caller; status_code is the
HTTP-style status the request boundary responds with.
"""


class AnalyzerError(Exception):
    status_code = 500


class ValidationError(AnalyzerError):
    """Caller error — no network call has been made."""
    status_code = 400


class FetchError(AnalyzerError):
    """Page unreachable, timed out, or returned a non-success status."""
    status_code = 502


class CompletionError(AnalyzerError):
    """Completion service unreachable, rejected the request, or replied without text."""
    status_code = 502


class UnexpectedError(AnalyzerError):
    status_code = 500
