"""depgraph exception hierarchy.

All public exceptions inherit from DepGraphError, giving callers a single
base class to catch when they want to handle any depgraph-specific failure
without swallowing unrelated errors.

Renderers and graph transformations never raise these for a structurally
valid graph; every failure is pushed out to the boundaries (report loading,
module lookup, settings, persisted blobs).
"""


class DepGraphError(Exception):
    """Base exception for all depgraph errors."""


class ReportError(DepGraphError):
    """Raised when a resolution report cannot be read or parsed.

    Report loaders catch this at the boundary and fall back to an empty
    graph, so downstream commands report "nothing to show" instead of
    aborting.
    """


class UnsupportedReportError(DepGraphError):
    """Raised when a report source is of a kind no backend understands.

    Unlike ``ReportError`` this is never downgraded to an empty graph: an
    unrecognized source is a configuration mistake and must fail loudly.
    """


class ModuleLookupError(DepGraphError):
    """Raised when module identity tokens do not resolve to exactly one module.

    Covers unknown organization/name/version tokens as well as ambiguous
    partial input that matches several known modules.
    """

    def __init__(self, tokens: tuple[str, ...] | list[str], reason: str = "no such module") -> None:
        self.tokens = tuple(tokens)
        self.reason = reason
        super().__init__(f"{reason}: {' '.join(self.tokens) or '<empty>'}")


class FilterRuleError(DepGraphError):
    """Raised when a filter rule token is malformed."""


class GraphStoreError(DepGraphError):
    """Raised when a persisted graph blob is corrupt or of an unknown version."""


class ConfigError(DepGraphError):
    """Raised when the settings file is unreadable or contains unknown keys."""
