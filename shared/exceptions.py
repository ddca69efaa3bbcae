"""
Error types shared by the CommitMoji pipeline.

Extraction errors are terminal for a run; fetch errors are handled by the
chart renderer, which falls back to an empty chart.
"""

from typing import Optional


class CommitChartError(Exception):
    """Base class for pipeline errors."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion or ""


class RepositoryNotFoundError(CommitChartError):
    """The target path is not a git working copy."""

    def __init__(self, path: str):
        super().__init__(
            f"Not a Git repository: {path}",
            "Run the extractor from a Git working copy or pass --repo-path",
        )
        self.path = path


class HistoryReadError(CommitChartError):
    """Reading the commit history failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Error in analyzing repository {path}: {reason}",
            "Check that the repository has commits and is readable",
        )
        self.path = path
        self.reason = reason


class FetchError(CommitChartError):
    """The commit messages document could not be retrieved."""

    def __init__(self, source: str, reason: str, status_code: Optional[int] = None):
        super().__init__(f"Failed to fetch commit messages from {source}: {reason}")
        self.source = source
        self.reason = reason
        self.status_code = status_code
