"""Application metrics using the Prometheus client library.

All metrics live here as one inventory of what the service measures.
Other modules import specific metrics and increment/observe them at the
point of action.  Prometheus scrapes them from GET /metrics.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

# ---------------------------------------------------------------------------
# HTTP metrics (populated by the MetricsMiddleware)
# ---------------------------------------------------------------------------

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests by method, endpoint, and status code",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# ---------------------------------------------------------------------------
# Registry metrics
# ---------------------------------------------------------------------------
# Incremented by the services that own the behavior.

RECORDS_ISSUED = Counter(
    "records_issued_total",
    "Records minted by committed issuances",
    ["kind"],  # degree|work_experience
)

ISSUANCE_REJECTIONS = Counter(
    "issuance_rejections_total",
    "Issuance attempts rejected before commit",
    ["kind", "reason"],  # reason: unauthorized|invalid_subject
)

AUTHORIZATION_CHANGES = Counter(
    "issuer_authorization_changes_total",
    "Issuer grants and revocations by role",
    ["role", "action"],  # action: grant|revoke
)

PROFILE_UPDATES = Counter(
    "profile_updates_total",
    "Committed profile replacements",
)

EVENT_PUBLISH_FAILURES = Counter(
    "event_publish_failures_total",
    "Committed events the publisher failed to fan out",
    ["event_type"],
)
