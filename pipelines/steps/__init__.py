# Namespace for pipeline steps
from .lookup_contact import LookupContact  # noqa: F401
from .merge_connections import MergeConnections  # noqa: F401
from .persist_connections import PersistConnections  # noqa: F401
