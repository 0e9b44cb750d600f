"""Release request model and body file loading.

The creator lives in ``create_release.release.creator`` and is imported from
there, since it depends on the GitHub client which depends on this package.
"""

from .body import BodyFileError, read_body_file
from .model import ReleaseRequest, ReleaseResult

__all__ = [
    "BodyFileError",
    "ReleaseRequest",
    "ReleaseResult",
    "read_body_file",
]
