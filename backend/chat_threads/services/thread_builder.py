"""
Reply thread reconstruction.

WHAT: Turn a flat message collection into a forest of reply trees plus orphans
WHY: Chats arrive as flat lists where replies only carry their parent's id
HOW: Allocate one node per message, then link each node under its parent
"""

from typing import Dict, List, Sequence, Set

from ..models.message import Message
from ..models.thread import ThreadForest, ThreadNode
from ..utils.exceptions import DuplicateMessageIdException
from ..utils.logger import get_logger

logger = get_logger(__name__)


def _index_nodes(messages: Sequence[Message]) -> Dict[str, ThreadNode]:
    """Allocate one empty node per message, keyed by id."""
    nodes: Dict[str, ThreadNode] = {}
    for msg in messages:
        if msg.id in nodes:
            raise DuplicateMessageIdException(msg.id)
        nodes[msg.id] = ThreadNode(message=msg)
    return nodes


def _resolve_anchors(nodes: Dict[str, ThreadNode]) -> Set[str]:
    """
    Find the ids whose ancestor chain ends at a root.
    
    WHAT: Classify every message as anchored (reachable from a root) or not
    WHY: Replies to orphans and members of A->B->A cycles can never be reached
         from a root, so linking them would lose them from the output
    HOW: Iterative parent walk per message with a visited set; results are
         memoized so each id is walked at most once overall
    
    Args:
        nodes: id -> node lookup for the whole collection
    
    Returns:
        Set of anchored message ids
    """
    resolved: Dict[str, bool] = {}
    
    for start_id in nodes:
        path: List[str] = []
        seen: Set[str] = set()
        current = start_id
        
        while True:
            if current in resolved:
                anchored = resolved[current]
                break
            if current in seen:
                # Cycle
                anchored = False
                break
            
            seen.add(current)
            path.append(current)
            parent_id = nodes[current].message.parent_id
            
            if parent_id is None:
                anchored = True
                break
            if parent_id not in nodes or parent_id == current:
                anchored = False
                break
            current = parent_id
        
        for msg_id in path:
            resolved[msg_id] = anchored
    
    return {msg_id for msg_id, anchored in resolved.items() if anchored}


def build_threads(messages: Sequence[Message]) -> ThreadForest:
    """
    Build reply trees from a flat message collection.
    
    WHAT: Partition messages into root-reachable trees and orphans
    WHY: Every input message must show up exactly once in the result
    HOW: Node lookup decouples linking from input order, then one pass
         classifies each message as root, child, or orphan
    
    Classification (in input order):
    - No parent -> root
    - Parent unknown or equal to own id -> orphan
    - Parent chain never reaches a root (cycle, reply to an orphan) -> orphan
    - Otherwise -> child of its parent
    
    Roots, orphans, and each node's children keep the input order; nothing is
    sorted by timestamp.
    
    Args:
        messages: Messages in any order; parents may follow their replies
    
    Returns:
        ThreadForest with roots and orphans
    
    Raises:
        DuplicateMessageIdException: If two messages share an id
    """
    nodes = _index_nodes(messages)
    anchored_ids = _resolve_anchors(nodes)
    forest = ThreadForest()
    
    for msg in messages:
        node = nodes[msg.id]
        parent_id = msg.parent_id
        
        if parent_id is None:
            forest.roots.append(node)
        elif parent_id not in nodes:
            logger.debug(f"Message {msg.id} replies to unknown message {parent_id}")
            forest.orphans.append(msg)
        elif parent_id == msg.id:
            logger.debug(f"Message {msg.id} replies to itself")
            forest.orphans.append(msg)
        elif msg.id not in anchored_ids:
            logger.debug(f"Message {msg.id} has no root in its parent chain")
            forest.orphans.append(msg)
        else:
            nodes[parent_id].children.append(node)
    
    logger.info(
        f"Built threads from {len(messages)} messages: "
        f"{len(forest.roots)} roots, {len(forest.orphans)} orphans"
    )
    
    return forest
