"""Warning categories raised by cachematrix.

Every category derives from :class:`CacheMatrixWarning`, so a single
``warnings.filterwarnings("ignore", category=CacheMatrixWarning)`` silences
the package without hiding unrelated ``UserWarning``s. No imports here;
``linalg`` and the package root both pull from this module.
"""


class CacheMatrixWarning(UserWarning):
    """Root of the cachematrix warning hierarchy."""


class IllConditionedWarning(CacheMatrixWarning):
    """The matrix inverted fine but is numerically close to singular."""
