"""Package exceptions.

Draws from the generator are total and never raise; these only cover the
bounded rejection sampler and name lookups coming from configuration or
HTTP requests.
"""


class SeedRandError(Exception):
    """Base class for py_seedrand errors."""


class SamplingExhaustedError(SeedRandError):
    """Rejection sampling hit its retry cap without an accepted draw."""

    def __init__(self, attempts: int, minimum: float, maximum: float):
        self.attempts = attempts
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"No sample accepted after {attempts} attempts "
            f"(min={minimum}, max={maximum})"
        )


class UnknownDistributionError(SeedRandError, ValueError):
    """A name did not match any known distribution, algorithm or rounding policy."""

    def __init__(self, kind: str, name: str, choices):
        self.kind = kind
        self.name = name
        self.choices = list(choices)
        super().__init__(
            f"Unknown {kind} '{name}', expected one of: {', '.join(self.choices)}"
        )
