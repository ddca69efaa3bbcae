"""
Commit Classifier for CommitMoji.

This package is responsible for:
- Mapping commit messages to a category using ordered marker rules
- Tallying classified messages into per-category counts
- Building the chart dataset from the counts
"""

__version__ = "1.0.0"
__author__ = "CommitMoji Team"
__description__ = "Convention-based commit message classification"
