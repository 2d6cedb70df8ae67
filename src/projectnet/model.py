import math
import numbers
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple
import pandas as pd
from .config import DEFAULT_DURATION
from .errors import TaskRecordError

_ALIASES = {
    'id': ('id', 'ID', 'Id'),
    'name': ('name', 'Name', 'Task'),
    'duration': ('duration', 'Duration'),
    'predecessors': ('predecessors', 'Predecessors', 'DependsOn', 'depends_on', 'Prereq'),
    'is_milestone': ('is_milestone', 'isMilestone', 'Milestone', 'milestone'),
    'status': ('status', 'Status'),
    'resources': ('resources', 'Resources', 'Resource'),
}
ANNOTATION_COLUMNS = ['id', 'level', 'early_start', 'early_finish', 'late_start', 'late_finish',
                      'total_float', 'free_float', 'is_critical', 'is_milestone']

def _missing(value):
    return value is None or (isinstance(value, float) and math.isnan(value))

def _as_id(value) -> str:
    if isinstance(value, numbers.Real) and not isinstance(value, bool) and float(value).is_integer():
        return str(int(value))
    return str(value).strip()

def _duration(value):
    if isinstance(value, str):
        try: value = float(value.strip())
        except ValueError: return DEFAULT_DURATION
    if isinstance(value, bool) or not isinstance(value, numbers.Real): return DEFAULT_DURATION
    if not math.isfinite(value): return DEFAULT_DURATION
    return value if isinstance(value, int) else float(value)

def _id_list(value) -> List[str]:
    if _missing(value): return []
    if isinstance(value, str): items = value.split(',')
    elif isinstance(value, (list, tuple)): items = [v for v in value if not _missing(v)]
    else: items = [value]
    return [i for i in (_as_id(v) for v in items) if i]

def _flag(value) -> bool:
    if isinstance(value, str): return value.strip().lower() in ('1', 'true', 'yes', 'y', 'x')
    return False if _missing(value) else bool(value)

@dataclass
class Task:
    """One task as the scheduler sees it.

    ``duration`` falls back to 1 when absent or non-numeric; numeric strings such as
    ``"3"`` (common in JSON exports) are parsed, other strings fall back.
    """
    id: str
    name: str = ""
    duration: float = DEFAULT_DURATION
    predecessors: List[str] = field(default_factory=list)
    is_milestone: bool = False
    status: str = ""
    resources: List[str] = field(default_factory=list)
    def __post_init__(self):
        self.id = _as_id(self.id)
        self.duration = _duration(self.duration)
        self.predecessors = _id_list(self.predecessors)
    @classmethod
    def from_record(cls, record) -> 'Task':
        """Normalize a loosely-typed record (camelCase, snake_case or spreadsheet headers)."""
        def pick(key):
            for k in _ALIASES[key]:
                if k in record and not _missing(record[k]): return record[k]
            return None
        tid = pick('id')
        if tid is None or not _as_id(tid): raise TaskRecordError(f"Task record has no id: {dict(record)!r}")
        name, status = pick('name'), pick('status')
        return cls(id=_as_id(tid), name='' if name is None else str(name), duration=pick('duration'),
                   predecessors=pick('predecessors'), is_milestone=_flag(pick('is_milestone')),
                   status='' if status is None else str(status), resources=_id_list(pick('resources')))

@dataclass(frozen=True)
class ScheduleAnnotation:
    level: int
    early_start: float
    early_finish: float
    late_start: float
    late_finish: float
    total_float: float
    free_float: float
    is_critical: bool
    is_milestone: bool = False

@dataclass(frozen=True)
class Diagnostics:
    dangling: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    duplicate_ids: Tuple[str, ...] = ()
    self_references: Tuple[str, ...] = ()
    cycles: Tuple[Tuple[str, ...], ...] = ()
    negative_durations: Tuple[str, ...] = ()
    @property
    def ok(self) -> bool:
        return not (self.dangling or self.duplicate_ids or self.self_references or self.cycles or self.negative_durations)
    def to_dict(self):
        d = asdict(self)
        d['dangling'] = {k: list(v) for k, v in self.dangling.items()}
        d['cycles'] = [list(c) for c in self.cycles]
        for k in ('duplicate_ids', 'self_references', 'negative_durations'): d[k] = list(d[k])
        return d

@dataclass(frozen=True)
class ScheduleResult:
    """Derived, read-only schedule for one task snapshot.

    ``critical_path`` is a single best-effort chain for highlighting; a project can have
    several parallel critical chains, so use ``is_critical`` on the annotations (or
    ``critical_tasks()``) to answer which tasks are critical.
    """
    annotations: Dict[str, ScheduleAnnotation] = field(default_factory=dict)
    critical_path: Tuple[str, ...] = ()
    project_finish: float = 0
    levels: Dict[int, Tuple[str, ...]] = field(default_factory=dict, compare=False)
    diagnostics: Optional[Diagnostics] = None
    def __getitem__(self, task_id) -> ScheduleAnnotation:
        return self.annotations[task_id]
    def __len__(self):
        return len(self.annotations)
    def critical_tasks(self) -> List[str]:
        return [tid for tid, a in self.annotations.items() if a.is_critical]
    def to_frame(self) -> pd.DataFrame:
        rows = [{'id': tid, **asdict(a)} for tid, a in self.annotations.items()]
        return pd.DataFrame(rows, columns=ANNOTATION_COLUMNS).set_index('id')
