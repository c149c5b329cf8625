# metrics.py
from typing import Optional

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
    "vcenter_requests_total",
    "Total vCenter requests by outcome",
    ["vcenter", "operation", "outcome"],
)
REQUEST_LATENCY = Histogram(
    "vcenter_request_latency_seconds",
    "Time for a full connect/query/logout cycle",
    ["vcenter", "operation"],
)
RESOLUTION_COUNTER = Counter(
    "vcenter_host_resolution_total",
    "Host resolutions by matching method",
    ["method"],
)
ERROR_COUNTER = Counter(
    "vcenter_errors_total", "Total vCenter errors", ["vcenter", "error"]
)


def record_request(vcenter: str, operation: str, error: Optional[Exception] = None) -> None:
    """
    Count one finished request.

    Args:
        vcenter: vCenter endpoint of the request.
        operation: Name of the public operation, e.g. "request_ticket".
        error: Exception that ended the request, None on success.
    """
    if error is None:
        REQUEST_COUNTER.labels(
            vcenter=vcenter, operation=operation, outcome="success"
        ).inc()
        return
    error_name = type(error).__name__
    REQUEST_COUNTER.labels(vcenter=vcenter, operation=operation, outcome=error_name).inc()
    ERROR_COUNTER.labels(vcenter=vcenter, error=error_name).inc()
