"""Deprecation warnings for compatibility behaviour.

Compatibility paths (such as classifying a trial by the last four characters
of an exception message) keep working but announce their replacement and the
release that drops them.

Python 3.13+.
"""

import warnings

__all__ = ["warn_deprecated"]


def warn_deprecated(
    feature: str,
    *,
    removal_version: str,
    alternative: str | None = None,
    stacklevel: int = 2,
) -> None:
    """Emit a DeprecationWarning for feature.

    Args:
        feature: What is deprecated, phrased as a sentence subject
        removal_version: Release that removes it (e.g. "1.0.0")
        alternative: What to use instead (optional)
        stacklevel: Frame the warning is attributed to (default: the
            function that calls warn_deprecated)

    Example:
        >>> warn_deprecated(
        ...     "Classifying trials by exception message suffix",
        ...     removal_version="1.0.0",
        ...     alternative="raising TrialSkipped",
        ... )
        # DeprecationWarning: Classifying trials by exception message suffix is
        # deprecated and will be removed in version 1.0.0. Use raising
        # TrialSkipped instead.
    """
    parts = [f"{feature} is deprecated and will be removed in version {removal_version}."]
    if alternative:
        parts.append(f"Use {alternative} instead.")
    warnings.warn(" ".join(parts), DeprecationWarning, stacklevel=stacklevel)
