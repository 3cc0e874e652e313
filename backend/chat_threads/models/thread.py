"""
Thread structure models.

WHAT: Reply tree nodes, the forest built from a collection, and message context
WHY: Give the thread builder and lookups typed, self-describing results
HOW: Dataclasses wrapping immutable Message records
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from .message import Message


@dataclass
class ThreadNode:
    """A message plus the replies that point at it."""
    message: Message
    children: List["ThreadNode"] = field(default_factory=list)
    
    def walk(self) -> Iterator["ThreadNode"]:
        """Yield this node and all descendants depth-first, pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so siblings come out in stored order
            stack.extend(reversed(node.children))
    
    def depth(self) -> int:
        """Number of levels in this subtree (a leaf has depth 1)."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children)
        return deepest


@dataclass
class ThreadForest:
    """Reply trees rooted at parentless messages, plus unresolvable orphans."""
    roots: List[ThreadNode] = field(default_factory=list)
    orphans: List[Message] = field(default_factory=list)
    
    def iter_threaded(self) -> Iterator[Message]:
        """Yield every message reachable from a root, tree by tree."""
        for root in self.roots:
            for node in root.walk():
                yield node.message
    
    @property
    def orphan_ids(self) -> Set[str]:
        return {msg.id for msg in self.orphans}
    
    @property
    def message_count(self) -> int:
        """Threaded messages plus orphans."""
        return sum(1 for _ in self.iter_threaded()) + len(self.orphans)


@dataclass
class MessageContext:
    """A message with its chronological neighbours; all None when not found."""
    prev: Optional[Message] = None
    current: Optional[Message] = None
    next: Optional[Message] = None
    
    @property
    def found(self) -> bool:
        return self.current is not None
