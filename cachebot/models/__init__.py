# Models - request, job and outcome data
from .pending import PendingRequest, QueuedJob
from .purge import PurgeOutcome, PurgeScope

__all__ = ["PendingRequest", "QueuedJob", "PurgeOutcome", "PurgeScope"]
