from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

@dataclass(frozen=True)
class Node:
    freq: int
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

def build_tree(freqs: Sequence[int]) -> Node:
    """
    Huffman greedy merge over symbols with freq > 0.
    Heap entries are (freq, seq, node): leaves are numbered in symbol order,
    merged nodes take the next number, so equal weights pop deterministically.
    The first node popped becomes the left child.
    """
    pq = []
    for sym, f in enumerate(freqs):
        if f > 0:
            pq.append((int(f), len(pq), Node(freq=int(f), sym=sym)))
    if not pq:
        raise ValueError("cannot build a tree: every frequency is zero")
    heapq.heapify(pq)

    if len(pq) == 1:
        # Edge case: only one symbol -> wrap it so it still gets a 1-bit code "0".
        # The right child is a zero-weight placeholder that never occurs.
        only = pq[0][2]
        filler = next((s for s in range(len(freqs)) if freqs[s] <= 0), len(freqs))
        return Node(freq=only.freq, left=only, right=Node(freq=0, sym=filler))

    seq = len(pq)
    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, seq, Node(freq=fa + fb, left=a, right=b)))
        seq += 1
    return pq[0][2]

def build_codebook(node: Node, code: int = 0, length: int = 0,
                   book: Optional[Dict[int, Tuple[int, int]]] = None) -> Dict[int, Tuple[int, int]]:
    """Return mapping: sym -> (code_int, code_len); '0' on left descent, '1' on right."""
    if book is None:
        book = {}
    if node.is_leaf:
        book[node.sym] = (code, length)
    else:
        build_codebook(node.left, code << 1, length + 1, book)
        build_codebook(node.right, (code << 1) | 1, length + 1, book)
    return book

def code_str(code: int, length: int) -> str:
    return format(code, f"0{length}b") if length else ""
