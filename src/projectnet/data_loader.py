import logging
from pathlib import Path
from typing import List
import pandas as pd
from .errors import TaskDataError, TaskRecordError
from .model import Task

logger = logging.getLogger(__name__)
ID_COLUMNS = ('id', 'ID', 'Id')

def read_table(path, sheet: str = 'Tasks') -> pd.DataFrame:
    path = Path(path); suffix = path.suffix.lower()
    if suffix in ('.xlsx', '.xls'):
        xls = pd.read_excel(path, sheet_name=None)
        if sheet not in xls: raise TaskDataError(f"{path}: no sheet named {sheet!r} (found {', '.join(xls)})")
        return xls[sheet]
    if suffix == '.csv': return pd.read_csv(path)
    if suffix == '.json': return pd.read_json(path, orient='records', dtype=False)
    raise TaskDataError(f"{path}: unsupported task file type {suffix or '(none)'}")

def frame_to_tasks(df: pd.DataFrame) -> List[Task]:
    if not any(c in df.columns for c in ID_COLUMNS):
        raise TaskDataError(f"task table has no id column (columns: {', '.join(map(str, df.columns))})")
    tasks = []
    for i, row in enumerate(df.to_dict(orient='records')):
        try:
            tasks.append(Task.from_record(row))
        except TaskRecordError as e:
            raise TaskDataError(f"row {i + 1}: {e}") from e
    return tasks

def load_tasks(path, sheet: str = 'Tasks') -> List[Task]:
    tasks = frame_to_tasks(read_table(path, sheet))
    logger.info("loaded %d tasks from %s", len(tasks), path)
    return tasks
