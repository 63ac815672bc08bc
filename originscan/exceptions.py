"""Exception hierarchy for the scan resolution core.

Scanning itself has no fatal error class: classification misses and oracle
failures resolve to fallback values. The exceptions below signal misuse of
the library (bad registry data, out-of-order state transitions) or stay
internal to the inference adapters.
"""


class OriginScanError(Exception):
    """Base class for all OriginScan exceptions."""


class RegistryError(OriginScanError, ValueError):
    """The prefix table is malformed or ambiguous."""


class InvalidScanTransition(OriginScanError):
    """A scan record was moved through its lifecycle out of order."""

    def __init__(self, scan_id: object, current: str, target: str):
        self.scan_id = scan_id
        self.current = current
        self.target = target
        super().__init__(
            f"Scan {scan_id} cannot move from '{current}' to '{target}'",
        )


class InferenceError(OriginScanError):
    """The inference service could not produce a usable answer.

    Raised and caught inside the oracle adapters; callers never see it.
    """
