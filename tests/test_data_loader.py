import json
import pandas as pd
import pytest
from projectnet import TaskDataError, compute_schedule
from projectnet.data_loader import frame_to_tasks, load_tasks

ROWS = [
    {'ID': 'T1', 'Name': 'Ship Design', 'Duration': 20, 'DependsOn': None},
    {'ID': 'T2A', 'Name': 'Steel Production', 'Duration': 15, 'DependsOn': 'T1'},
    {'ID': 'T2B', 'Name': 'Engine Manufacturing', 'Duration': 25, 'DependsOn': 'T1'},
    {'ID': 'T5', 'Name': 'Engine Installation', 'Duration': 8, 'DependsOn': 'T2A,T2B'},
]

def check(tasks):
    assert [t.id for t in tasks] == ['T1', 'T2A', 'T2B', 'T5']
    assert tasks[0].predecessors == [] and tasks[3].predecessors == ['T2A', 'T2B']
    r = compute_schedule(tasks)
    assert r.project_finish == 53 and r.critical_path == ('T1', 'T2B', 'T5')

def test_csv(tmp_path):
    path = tmp_path / 'tasks.csv'
    pd.DataFrame(ROWS).to_csv(path, index=False)
    check(load_tasks(path))

def test_excel(tmp_path):
    path = tmp_path / 'tasks.xlsx'
    with pd.ExcelWriter(path) as xw:
        pd.DataFrame(ROWS).to_excel(xw, sheet_name='Tasks', index=False)
    check(load_tasks(path))
    with pytest.raises(TaskDataError):
        load_tasks(path, sheet='Scenarios')

def test_json_records(tmp_path):
    path = tmp_path / 'tasks.json'
    path.write_text(json.dumps([
        {'id': 'T1', 'name': 'Ship Design', 'duration': 20},
        {'id': 'T2A', 'duration': 15, 'predecessors': ['T1']},
        {'id': 'T2B', 'duration': 25, 'predecessors': ['T1'], 'isMilestone': False},
        {'id': 'T5', 'duration': 8, 'predecessors': ['T2A', 'T2B'], 'status': 'planned'},
    ]))
    check(load_tasks(path))

def test_unsupported_suffix(tmp_path):
    with pytest.raises(TaskDataError):
        load_tasks(tmp_path / 'tasks.txt')

def test_missing_id_column():
    with pytest.raises(TaskDataError):
        frame_to_tasks(pd.DataFrame([{'Name': 'x'}]))

def test_blank_id_cell_reports_row():
    with pytest.raises(TaskDataError, match='row 2'):
        frame_to_tasks(pd.DataFrame([{'ID': 'A'}, {'ID': None}]))

def test_json_numeric_string_durations(tmp_path):
    path = tmp_path / 'tasks.json'
    path.write_text(json.dumps([
        {'id': 'T1', 'duration': '20'},
        {'id': 'T2A', 'duration': '15', 'predecessors': ['T1']},
        {'id': 'T2B', 'duration': '25', 'predecessors': ['T1']},
        {'id': 'T5', 'duration': '8', 'predecessors': ['T2A', 'T2B']},
    ]))
    check(load_tasks(path))
