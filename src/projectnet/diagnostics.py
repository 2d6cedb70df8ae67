"""Data-quality reporting for task snapshots.

The scheduler degrades gracefully on bad input; this module is where callers look
when they want to tell the user which predecessors are missing or which tasks form
a loop.
"""
from collections import deque
from typing import Iterable, List, Mapping, Union
import networkx as nx
from .errors import CycleError, MissingDependencyError
from .graph import TaskGraph
from .model import Diagnostics, Task

def to_digraph(graph: TaskGraph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(graph.ids()); g.add_edges_from(graph.edges())
    return g

def find_cycles(graph: TaskGraph) -> List[tuple]:
    """One entry per loop: the sorted ids of each strongly connected component that
    contains a cycle (components of two or more tasks, or a task listing itself)."""
    g = to_digraph(graph)
    out = [tuple(sorted(c)) for c in nx.strongly_connected_components(g)
           if len(c) > 1 or g.has_edge(next(iter(c)), next(iter(c)))]
    return sorted(out)

def collect(graph: TaskGraph) -> Diagnostics:
    return Diagnostics(
        dangling={tid: tuple(ps) for tid, ps in graph.dangling().items()},
        duplicate_ids=tuple(dict.fromkeys(graph.duplicate_ids)),
        self_references=tuple(tid for tid in graph.ids() if tid in graph.predecessors(tid)),
        cycles=tuple(find_cycles(graph)),
        negative_durations=tuple(tid for tid in graph.ids() if graph.duration(tid) < 0),
    )

def check_tasks(tasks: Iterable[Union[Task, Mapping]]) -> Diagnostics:
    tasks = [t if isinstance(t, Task) else Task.from_record(t) for t in tasks]
    return collect(TaskGraph.build(tasks))

def topo_order(graph: TaskGraph) -> List[str]:
    """Strict Kahn ordering for callers that refuse bad data instead of degrading."""
    indeg = {k: 0 for k in graph.ids()}
    for tid in graph.ids():
        for d in graph.predecessors(tid):
            if d not in graph: raise MissingDependencyError(f"Missing dependency {d} for {tid}")
        indeg[tid] = len(graph.effective_predecessors(tid))
    q = deque(k for k, v in indeg.items() if v == 0); order = []
    while q:
        n = q.popleft(); order.append(n)
        for s in graph.successors(n):
            indeg[s] -= 1
            if indeg[s] == 0: q.append(s)
    if len(order) != len(graph): raise CycleError('cycle detected')
    return order
