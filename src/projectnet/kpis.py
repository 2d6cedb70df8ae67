from .graph import TaskGraph
from .model import ScheduleResult

def task_sensitivity(graph: TaskGraph, result: ScheduleResult, task_id: str) -> int:
    """0-10 score of how strongly a slip in this task ripples through the project."""
    t = graph.tasks[task_id]; score = 0
    if result[task_id].is_critical: score += 3
    if graph.is_root(task_id): score += 1
    if not graph.successors(task_id): score += 1
    if len(t.resources) > 2: score += 2
    if t.duration > 10: score += 1
    score += sum(1 for p in graph.effective_predecessors(task_id) if len(graph.successors(p)) > 1)
    return min(10, score)

def compute_kpis(graph: TaskGraph, result: ScheduleResult):
    anns = result.annotations.values()
    critical = result.critical_tasks()
    floats = [a.total_float for a in anns]
    return {
        'project_finish': round(result.project_finish, 2),
        'task_count': len(result),
        'milestone_count': sum(1 for a in anns if a.is_milestone),
        'critical_tasks': critical,
        'critical_task_count': len(critical),
        'critical_duration': round(sum(graph.duration(tid) for tid in critical), 2),
        'critical_path': list(result.critical_path),
        'average_float': round(sum(floats) / len(floats), 2) if floats else 0,
        'max_float': round(max(floats), 2) if floats else 0,
        'sensitivity': {tid: task_sensitivity(graph, result, tid) for tid in result.annotations},
    }
