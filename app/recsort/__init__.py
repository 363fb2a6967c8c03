"""recsort - tidy a directory tree after a file-recovery run.

Deletes tiny fragments, sorts the remaining files into extension
folders at the root, and prunes the directories left empty.
"""

__version__ = "0.1.0"
