from projectnet import Task

def tasks_from(plan):
    """{'A': (3, []), 'B': (2, ['A'])} -> [Task, ...] in the given order."""
    return [Task(id=tid, name=f'Task {tid}', duration=d, predecessors=list(p)) for tid, (d, p) in plan.items()]

FORK = {'A': (3, []), 'B': (2, ['A']), 'C': (4, ['A'])}
DIAMOND = {'A': (1, []), 'B': (2, ['A']), 'C': (3, ['A']), 'D': (1, ['B', 'C'])}
