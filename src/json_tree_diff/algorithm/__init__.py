"""Comparison algorithm subpackage.

Re-exports:
- TreeComparator: first-difference structural comparison
- ComparisonMode: EQUIVALENCE / SUBTREE
- DiffConfig: frozen comparator and renderer settings
"""

from json_tree_diff.algorithm.config import ComparisonMode, DiffConfig
from json_tree_diff.algorithm.differ import TreeComparator, describe_node_type

__all__ = ["ComparisonMode", "DiffConfig", "TreeComparator", "describe_node_type"]
