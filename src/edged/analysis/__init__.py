"""
Control-flow analyses over directed graphs.

Currently dominance: immediate dominators, dominance frontiers and the
dominator tree. These are the building blocks for SSA construction and
control dependence.
"""

from .dominance import dominates, dominator_tree, frontiers, immediate_dominators

__all__ = ["immediate_dominators", "frontiers", "dominator_tree", "dominates"]
