# Importing the site parsers registers them, in cascade order.
from . import linkedin_jobs  # noqa: F401
from . import indeed  # noqa: F401
from . import greenhouse  # noqa: F401
from . import lever  # noqa: F401
