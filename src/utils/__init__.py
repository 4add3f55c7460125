from .time_utils import get_epoch_ms
from .task_utils import cancel_tasks_with_timeout, race_tasks, safe_close_connection

__all__ = [
    "get_epoch_ms",
    "cancel_tasks_with_timeout",
    "race_tasks",
    "safe_close_connection",
]
