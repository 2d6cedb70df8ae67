import logging
from typing import Dict, Iterable, Mapping, Optional, Set, Tuple, Union
from .diagnostics import collect
from .graph import TaskGraph, resolve
from .levels import assign_levels, group_by_level
from .model import ScheduleAnnotation, ScheduleResult, Task

logger = logging.getLogger(__name__)

def forward_pass(graph: TaskGraph, broken: Optional[Set[Tuple[str, str]]] = None):
    """Early start/finish per task. Returns ``(es, ef)``."""
    es: Dict[str, float] = {}; ef: Dict[str, float] = {}
    def early_finish(tid, pred_finishes):
        es[tid] = max(0, max(pred_finishes, default=0)); return es[tid] + graph.duration(tid)
    for tid in graph.ids(): resolve(tid, graph.effective_predecessors, early_finish, ef, broken)
    return es, ef

def backward_pass(graph: TaskGraph, ef: Mapping[str, float], broken: Optional[Set[Tuple[str, str]]] = None):
    """Late start/finish per task, walking successors. Returns ``(ls, lf, project_finish)``."""
    project_finish = max(ef.values(), default=0)
    ls: Dict[str, float] = {}; lf: Dict[str, float] = {}
    def late_start(tid, succ_starts):
        lf[tid] = min(succ_starts, default=project_finish)
        lf[tid] = min(lf[tid], project_finish)
        return lf[tid] - graph.duration(tid)
    for tid in graph.ids(): resolve(tid, graph.successors, late_start, ls, broken)
    return ls, lf, project_finish

def free_float(graph: TaskGraph, es, ef, total_float) -> Dict[str, float]:
    out = {}
    for tid in graph.ids():
        succ = graph.successors(tid)
        out[tid] = min(es[s] for s in succ) - ef[tid] if succ else total_float[tid]
    return out

def critical_flags(graph: TaskGraph, es, ef, ls, lf) -> Dict[str, bool]:
    # both equalities are checked; with fractional durations they can drift apart
    return {tid: es[tid] == ls[tid] and ef[tid] == lf[tid] for tid in graph.ids()}

def critical_path(graph: TaskGraph, critical: Mapping[str, bool], es, ef) -> Tuple[str, ...]:
    """One ordered chain of critical tasks, starting from the lowest-id critical start.

    Parallel critical chains are not enumerated; ``critical`` stays the source of truth.
    """
    starts = sorted(tid for tid in graph.ids() if critical[tid]
                    and not any(critical[p] for p in graph.effective_predecessors(tid)))
    if not starts: return ()
    path = [starts[0]]; placed = {starts[0]}
    while True:
        cur = path[-1]
        nxt = sorted((s for s in graph.successors(cur) if critical[s]), key=lambda s: (es[s] != ef[cur], s))
        if not nxt or nxt[0] in placed: break
        path.append(nxt[0]); placed.add(nxt[0])
    return tuple(path)

def compute_schedule(tasks: Iterable[Union[Task, Mapping]], diagnostics: bool = False) -> ScheduleResult:
    """Level, CPM times, float and critical path for one task snapshot.

    Never raises for dangling predecessors, cycles or duplicate ids: dangling ids are
    ignored and cycle edges are dropped at the point of re-entry. Pass
    ``diagnostics=True`` to get a report of those conditions on the result.
    """
    tasks = [t if isinstance(t, Task) else Task.from_record(t) for t in tasks]
    graph = TaskGraph.build(tasks)
    levels = assign_levels(graph)
    es, ef = forward_pass(graph)
    ls, lf, finish = backward_pass(graph, ef)
    total = {tid: ls[tid] - es[tid] for tid in graph.ids()}
    free = free_float(graph, es, ef, total)
    critical = critical_flags(graph, es, ef, ls, lf)
    annotations = {tid: ScheduleAnnotation(level=levels[tid], early_start=es[tid], early_finish=ef[tid],
                                           late_start=ls[tid], late_finish=lf[tid], total_float=total[tid],
                                           free_float=free[tid], is_critical=critical[tid],
                                           is_milestone=graph.tasks[tid].is_milestone)
                   for tid in graph.ids()}
    path = critical_path(graph, critical, es, ef)
    report = collect(graph) if diagnostics else None
    logger.debug("scheduled %d tasks: finish=%s critical=%d path=%s",
                 len(graph), finish, sum(critical.values()), '->'.join(path))
    return ScheduleResult(annotations=annotations, critical_path=path, project_finish=finish,
                          levels=group_by_level(graph, levels), diagnostics=report)
