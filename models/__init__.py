from .contact_record import ContactRecord
from .job_record import JobRecord
from .profile_record import ProfileRecord
from .merge_result import MergeResult

__all__ = [
    "ContactRecord",
    "JobRecord",
    "ProfileRecord",
    "MergeResult",
]
