"""KeySearch: cycle-safe recursive search for nested objects by parent key.

Walks an arbitrary object graph (mappings, sequences and attribute-backed
objects, possibly self-referential) and collects the key names of every
composite value stored under a key equal to the requested name.

Traversal contract:
- The root is marked visited before the walk starts.
- For each ``(key, child)`` pair of a node, the child is descended into first
  (when composite and not yet visited), then the pair's own key is tested.
  A matched node's descendants therefore appear in the result before the
  node itself.
- Visited nodes are never redescended, but every edge leading to them is
  still tested against the target key.
- A failure inside one child's subtree is logged and skipped; the parent
  carries on with its next pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from object_inspector.config import SearchConfig
from object_inspector.kinds import entries, is_composite, key_names

__all__ = ["KeySearch"]

logger = logging.getLogger(__name__)


@dataclass
class KeySearch:
    """Collects the key sets of nested objects found under a given key.

    Each ``run()`` call owns its visited set and result list, so one instance
    may be reused and shared between callers.

    Example::

        search = KeySearch()
        doc = {"skill": {"id": 1, "cd": 2}, "list": [{"skill": {"id": 3}}]}
        search.run(doc, "skill")
        # [["id", "cd"], ["id"]]
    """

    config: SearchConfig = field(default_factory=SearchConfig)

    def run(self, root: Any, target_key: Any) -> list[list[Any]]:
        """Return the key names of every composite stored under ``target_key``.

        Args:
            root:       Any value.  Non-composite roots (including ``None``)
                        produce an empty result.
            target_key: The key to match against each parent-to-child edge.

        Returns:
            One list of key names per matched edge, in traversal order.
            Never raises.
        """
        results: list[list[Any]] = []
        if not is_composite(root, self.config.include_attributes):
            return results

        # id -> node; holding the node pins its id for the whole walk.
        visited: dict[int, Any] = {id(root): root}
        try:
            self._walk(root, target_key, visited, results)
        except Exception:
            logger.debug("Search aborted at root %r", type(root), exc_info=True)
        return results

    def _walk(
        self,
        node: Any,
        target_key: Any,
        visited: dict[int, Any],
        results: list[list[Any]],
    ) -> None:
        style = self.config.index_style
        include_attributes = self.config.include_attributes

        for key, child in entries(node, style, include_attributes):
            if not is_composite(child, include_attributes):
                continue

            if id(child) not in visited:
                visited[id(child)] = child
                try:
                    self._walk(child, target_key, visited, results)
                except Exception:
                    logger.debug(
                        "Skipping subtree under key %r after error", key, exc_info=True
                    )

            if key == target_key:
                results.append(key_names(child, style, include_attributes))
