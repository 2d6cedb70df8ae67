import itertools
from projectnet import Task, TaskGraph, compute_schedule
from projectnet.levels import assign_levels, group_by_level
from .helpers import DIAMOND, FORK, tasks_from

def test_fork_levels():
    result = compute_schedule(tasks_from(FORK))
    assert [result[t].level for t in 'ABC'] == [0, 1, 1]
    assert result.levels == {0: ('A',), 1: ('B', 'C')}

def test_uneven_diamond_uses_longest_chain_in_every_order():
    # A -> B -> C -> D and A -> D: D must sit below C whichever branch is reached first
    plan = {'A': (1, []), 'B': (1, ['A']), 'C': (1, ['B']), 'D': (1, ['A', 'C'])}
    for order in itertools.permutations(plan):
        levels = assign_levels(TaskGraph.build(tasks_from({k: plan[k] for k in order})))
        assert levels == {'A': 0, 'B': 1, 'C': 2, 'D': 3}

def test_level_exceeds_every_predecessor():
    g = TaskGraph.build(tasks_from(DIAMOND))
    levels = assign_levels(g)
    for p, t in g.edges():
        assert levels[t] > levels[p]

def test_dangling_only_predecessor_is_level_zero():
    assert compute_schedule([Task('X', predecessors=['ghost-99'])])['X'].level == 0

def test_self_cycle_terminates():
    assert compute_schedule([Task('Y', predecessors=['Y'])])['Y'].level == 0

def test_two_task_cycle_is_broken_at_reentry():
    g = TaskGraph.build([Task('A', predecessors=['B']), Task('B', predecessors=['A']), Task('C', predecessors=['A'])])
    levels = assign_levels(g)
    assert levels == {'A': 1, 'B': 0, 'C': 2}

def test_group_by_level_keeps_input_order_within_level():
    g = TaskGraph.build(tasks_from({'C': (1, []), 'A': (1, []), 'B': (1, ['C'])}))
    assert group_by_level(g, assign_levels(g)) == {0: ('C', 'A'), 1: ('B',)}
