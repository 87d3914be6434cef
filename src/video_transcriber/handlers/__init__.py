from .job_status_controller import JobStatusController

__all__ = ["JobStatusController"]
