"""Task-dependency scheduling: levels, critical path method and critical path extraction."""
from .errors import CycleError, MissingDependencyError, ProjectnetError, TaskDataError, TaskRecordError
from .graph import TaskGraph
from .model import Diagnostics, ScheduleAnnotation, ScheduleResult, Task
from .schedule import compute_schedule

__all__ = ['compute_schedule', 'Task', 'TaskGraph', 'ScheduleAnnotation', 'ScheduleResult', 'Diagnostics',
           'ProjectnetError', 'TaskRecordError', 'TaskDataError', 'CycleError', 'MissingDependencyError']
__version__ = '0.1.0'
