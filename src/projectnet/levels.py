from typing import Dict, List, Optional, Set, Tuple
from .graph import TaskGraph, resolve

def assign_levels(graph: TaskGraph, broken: Optional[Set[Tuple[str, str]]] = None) -> Dict[str, int]:
    """Longest predecessor chain from a root, per task (roots are level 0)."""
    memo: Dict[str, int] = {}
    def level(tid, pred_levels): return 1 + max(pred_levels) if pred_levels else 0
    for tid in graph.ids(): resolve(tid, graph.effective_predecessors, level, memo, broken)
    return {tid: memo[tid] for tid in graph.ids()}

def group_by_level(graph: TaskGraph, levels: Dict[str, int]) -> Dict[int, Tuple[str, ...]]:
    groups: Dict[int, List[str]] = {}
    for tid in graph.ids(): groups.setdefault(levels[tid], []).append(tid)
    return {lvl: tuple(groups[lvl]) for lvl in sorted(groups)}
