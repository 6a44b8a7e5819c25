"""Preflight Exception Hierarchy."""


class PreflightError(Exception):
    """Base exception for all preflight errors."""
    pass


class DetectionError(PreflightError):
    """Raised by a probe when a metric cannot be read from the host."""
    def __init__(self, metric: str, reason: str = ""):
        self.metric = metric
        self.reason = reason
        msg = f"Could not detect {metric}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class ReportWriteError(PreflightError):
    """Raised when the analysis report cannot be written."""
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Failed to write report: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
