class ProjectnetError(Exception): pass
class TaskRecordError(ProjectnetError, ValueError): pass
class TaskDataError(ProjectnetError): pass
class CycleError(ProjectnetError): pass
class MissingDependencyError(ProjectnetError, KeyError): pass
