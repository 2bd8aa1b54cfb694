"""
Lazy graph traversals.

Every traversal is an iterator producing vertex indices one step at a time.
Each owns its own stack, queue or in-degree table and only reads the graph.
They cannot be restarted; build a new one to traverse again.

https://en.wikipedia.org/wiki/Graph_traversal
"""

from .levelorder import LevelOrder
from .postorder import PostOrder
from .preorder import PreOrder
from .topological import Topological

__all__ = ["PreOrder", "PostOrder", "LevelOrder", "Topological"]
