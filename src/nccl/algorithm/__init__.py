"""Algorithm subpackage for combining nccl trees.

Public API:
- TreeMerger: structural union of a base and an overlay tree by name matching
"""

from nccl.algorithm.merger import TreeMerger

__all__ = ["TreeMerger"]
