"""Tester configuration.

Provides a single frozen dataclass that holds every scalar runner option,
validated once at construction. Tester accepts either a TesterConfig or the
same options as keywords.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
import time
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace

from proptrial.constants import DEFAULT_COUNT, DEFAULT_PROGRESS, DEFAULT_SKIPS, ENV_PREFIX
from proptrial.diagnostics import ErrorTemplate, InvalidOptionError
from proptrial.enums import Verbosity

__all__ = ["TesterConfig", "normalize_verbosity"]


def _wall_clock_seed() -> int:
    return int(time.time())


def normalize_verbosity(value: object) -> Verbosity:
    """Map the accepted verbosity spellings onto Verbosity.

    Accepts Verbosity members, True (verbose), False/None (quiet), and the
    strings "verbose", "quiet", "error_only", "true", "false", "1", "0".

    Raises:
        InvalidOptionError: For any other value
    """
    if isinstance(value, Verbosity):
        return value
    if value is True:
        return Verbosity.VERBOSE
    if value is False or value is None:
        return Verbosity.QUIET
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes"):
            return Verbosity.VERBOSE
        if lowered in ("false", "0", "no", ""):
            return Verbosity.QUIET
        try:
            return Verbosity(lowered)
        except ValueError:
            pass
    raise InvalidOptionError(
        ErrorTemplate.option_invalid("verbose", value, "True, False or 'error_only'")
    )


@dataclass(frozen=True, slots=True)
class TesterConfig:
    """Immutable configuration for a Tester.

    All fields have defaults; ``TesterConfig()`` is a usable configuration
    seeded from the wall clock.

    Attributes:
        count: Trials per test() call (default: 100)
        seed: Initial seed (default: wall-clock time in seconds)
        skips: Skip budget; a run aborts once skips exceed it (default: 50)
        verbose: Per-trial output level (default: quiet). True, False and
            "error_only" are accepted and normalised to Verbosity.
        progress: Progress dot interval in quiet mode (default: 10)

    Example:
        >>> config = TesterConfig(count=500, seed=1234, verbose="error_only")
        >>> config.verbose
        <Verbosity.ERROR_ONLY: 'error_only'>
        >>> config.with_seed(99).seed
        99
    """

    count: int = DEFAULT_COUNT
    seed: int = field(default_factory=_wall_clock_seed)
    skips: int = DEFAULT_SKIPS
    verbose: Verbosity = Verbosity.QUIET
    progress: int = DEFAULT_PROGRESS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            InvalidOptionError: If count, seed or skips is negative or not an
                int, progress is not positive, or verbose is unrecognized.
        """
        object.__setattr__(self, "verbose", normalize_verbosity(self.verbose))
        for name in ("count", "seed", "skips"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidOptionError(
                    ErrorTemplate.option_invalid(name, value, "a non-negative integer")
                )
        if (
            isinstance(self.progress, bool)
            or not isinstance(self.progress, int)
            or self.progress <= 0
        ):
            raise InvalidOptionError(
                ErrorTemplate.option_invalid("progress", self.progress, "a positive integer")
            )

    def with_seed(self, seed: int) -> TesterConfig:
        """Return a copy with a different initial seed."""
        return replace(self, seed=seed)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> TesterConfig:
        """Build a configuration from PROPTRIAL_* environment variables.

        Recognized: PROPTRIAL_COUNT, PROPTRIAL_SEED, PROPTRIAL_SKIPS,
        PROPTRIAL_VERBOSE, PROPTRIAL_PROGRESS. Unset variables keep their
        defaults. Setting PROPTRIAL_SEED replays a logged run without
        editing the test.

        Args:
            environ: Mapping to read (default: os.environ)

        Raises:
            InvalidOptionError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        for option in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{option.name.upper()}")
            if raw is None:
                continue
            if option.name == "verbose":
                values[option.name] = raw
                continue
            try:
                values[option.name] = int(raw.strip())
            except ValueError:
                raise InvalidOptionError(
                    ErrorTemplate.option_invalid(option.name, raw, "an integer")
                ) from None
        return cls(**values)  # type: ignore[arg-type]
