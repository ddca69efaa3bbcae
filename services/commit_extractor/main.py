"""
Commit message extraction service for CommitMoji.

Reads the history of a local Git working copy with GitPython and writes the
commit messages, most recent first, to the serialized messages document
consumed by the chart renderer.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Union

from git import Repo, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from config.settings import settings
from shared.exceptions import HistoryReadError, RepositoryNotFoundError
from shared.message_store import write_messages

logger = logging.getLogger(__name__)


class CommitExtractorService:
    """Extracts commit messages from a Git repository."""

    def __init__(self, indent: Optional[int] = None):
        self.indent = settings.extractor.indent if indent is None else indent

    def open_repository(self, repo_path: Union[str, Path]) -> Repo:
        """Open the Git working copy containing ``repo_path``."""
        path = Path(repo_path).resolve()
        try:
            return Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise RepositoryNotFoundError(str(path))

    def collect_messages(self, repo: Repo) -> List[str]:
        """Return the summary line of every commit reachable from HEAD."""
        messages = []
        for commit in repo.iter_commits():
            summary = commit.summary
            if isinstance(summary, bytes):
                summary = summary.decode("utf-8", errors="replace")
            messages.append(summary)
        return messages

    async def read_history(self, repo_path: Union[str, Path]) -> List[str]:
        """Read the commit history of ``repo_path``, most recent commit first."""
        repo = self.open_repository(repo_path)
        try:
            messages = await asyncio.to_thread(self.collect_messages, repo)
        except (GitCommandError, ValueError, OSError) as e:
            raise HistoryReadError(str(repo_path), str(e))
        finally:
            repo.close()

        logger.info(f"Read {len(messages)} commit messages from {repo_path}")
        return messages

    async def extract(
        self,
        repo_path: Union[str, Path],
        output_file: Union[str, Path],
    ) -> List[str]:
        """
        Read the history of ``repo_path`` and write it to ``output_file``.

        The document is only written once the whole history has been read;
        an existing document is replaced, never appended to.
        """
        try:
            messages = await self.read_history(repo_path)
            write_messages(output_file, messages, indent=self.indent)
        except RepositoryNotFoundError as e:
            logger.error(f"Local repository does not exist: {e.path}")
            raise
        except HistoryReadError as e:
            logger.error(f"Error in analyzing repository: {e.reason}")
            raise

        logger.info(f"Commit messages have been written to {output_file}")
        return messages


# Service instance
commit_extractor_service = CommitExtractorService()
