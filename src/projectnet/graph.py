"""Addressable task graph built once per schedule computation."""
import logging
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Set, Tuple
from .model import Task

logger = logging.getLogger(__name__)

class TaskGraph:
    """id -> task lookup with raw and effective predecessors and a successor index.

    Raw predecessor lists are kept as given so callers can report missing ids; the
    effective lists drop dangling and repeated ids and are what the arithmetic uses.
    """
    def __init__(self, tasks: Dict[str, Task], effective: Dict[str, List[str]],
                 successors: Dict[str, List[str]], duplicates: List[str]):
        self.tasks = tasks
        self._effective = effective
        self._successors = successors
        self.duplicate_ids = duplicates
    @classmethod
    def build(cls, tasks: Iterable[Task]) -> 'TaskGraph':
        by_id: Dict[str, Task] = {}; duplicates = []
        for t in tasks:
            if t.id in by_id:
                duplicates.append(t.id); logger.debug("duplicate task id %s, keeping the last record", t.id)
            by_id[t.id] = t
        effective = {}
        for tid, t in by_id.items():
            seen = set(); eff = []
            for p in t.predecessors:
                if p not in by_id:
                    logger.debug("task %s: dropping dangling predecessor %s", tid, p); continue
                if p not in seen: seen.add(p); eff.append(p)
            effective[tid] = eff
        successors = {tid: [] for tid in by_id}
        for tid, preds in effective.items():
            for p in preds: successors[p].append(tid)
        return cls(by_id, effective, successors, duplicates)
    def __len__(self):
        return len(self.tasks)
    def __contains__(self, task_id):
        return task_id in self.tasks
    def ids(self) -> List[str]:
        return list(self.tasks)
    def predecessors(self, task_id) -> List[str]:
        return list(self.tasks[task_id].predecessors)
    def effective_predecessors(self, task_id) -> List[str]:
        return self._effective[task_id]
    def successors(self, task_id) -> List[str]:
        return self._successors[task_id]
    def is_root(self, task_id) -> bool:
        return not self._effective[task_id]
    def duration(self, task_id):
        return self.tasks[task_id].duration
    def dangling(self) -> Dict[str, List[str]]:
        out = {}
        for tid, t in self.tasks.items():
            missing = [p for p in t.predecessors if p not in self.tasks]
            if missing: out[tid] = missing
        return out
    def edges(self) -> List[Tuple[str, str]]:
        return [(p, tid) for tid, preds in self._effective.items() for p in preds]

def resolve(start: Hashable, neighbours: Callable[[Hashable], List[Hashable]],
            compute: Callable[[Hashable, list], object], memo: dict,
            broken: Optional[Set[Tuple[Hashable, Hashable]]] = None):
    """Memoized post-order evaluation of ``start`` over ``neighbours``.

    ``compute(node, values)`` receives the memoized values of the node's resolved
    neighbours. ``memo`` holds finished nodes only; a separate on-stack set marks nodes
    still being resolved, and an edge back into one of those is skipped (recorded in
    ``broken``) so cycles terminate without touching values reached via other paths.
    An explicit stack keeps long dependency chains clear of the recursion limit.
    """
    if start in memo: return memo[start]
    on_stack = {start}; stack = [(start, iter(neighbours(start)))]
    while stack:
        node, it = stack[-1]
        for nxt in it:
            if nxt in memo: continue
            if nxt in on_stack:
                logger.debug("cycle: ignoring edge %s -> %s", node, nxt)
                if broken is not None: broken.add((node, nxt))
                continue
            on_stack.add(nxt); stack.append((nxt, iter(neighbours(nxt)))); break
        else:
            stack.pop(); on_stack.discard(node)
            memo[node] = compute(node, [memo[n] for n in neighbours(node) if n in memo])
    return memo[start]
