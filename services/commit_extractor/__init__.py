"""
Commit Message Extractor for CommitMoji.

This service is responsible for:
- Opening a local Git working copy
- Reading the commit history into an ordered list of messages
- Writing the serialized messages document for the chart renderer
"""

__version__ = "1.0.0"
__author__ = "CommitMoji Team"
__description__ = "Git commit message extraction"
