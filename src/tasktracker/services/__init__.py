from .task_service import TaskService, TaskStore

__all__ = ["TaskService", "TaskStore"]
