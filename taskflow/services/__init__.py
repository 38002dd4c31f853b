from taskflow.services import seed_service, task_service, task_store


__all__ = [
    "seed_service",
    "task_service",
    "task_store",
]
