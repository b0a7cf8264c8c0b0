"""Application metrics using the Prometheus client library.

This module defines all metrics in one place — a single inventory of
everything the service measures.  Other modules import specific metrics
and increment/observe them at the point of action.

THE THREE METRIC TYPES USED HERE
----------------------------------

1. COUNTER — only goes up.  Total requests, certificates issued.
   Prometheus turns these into rates with rate().

2. GAUGE — goes up and down.  In-flight requests right now.

3. HISTOGRAM — observations grouped into buckets, so Prometheus can
   compute percentiles (p95 latency) instead of a misleading average.

Prometheus PULLS these from GET /metrics (see campus/api/metrics_endpoint.py).
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
    # Store operations are in-memory, so almost everything should land in
    # the first few buckets.  The tail is there to expose lock contention.
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

ACTIVE_REQUESTS = Gauge(
    "http_active_requests",
    "Number of HTTP requests currently being processed",
)

# ---------------------------------------------------------------------------
# Domain metrics
# ---------------------------------------------------------------------------
# Incremented by the services that own the behavior, only after the
# operation's transaction has committed.

CERTIFICATES_ISSUED = Counter(
    "campus_certificates_issued_total",
    "Course-completion certificates issued",
)

QUIZ_ATTEMPTS = Counter(
    "campus_quiz_attempts_total",
    "Graded quiz attempts by outcome",
    ["result"],  # "passed" or "failed"
)

LESSON_COMPLETIONS = Counter(
    "campus_lesson_completions_total",
    "Lessons newly marked completed (re-marks are not counted)",
)

OPERATION_FAILURES = Counter(
    "campus_operation_failures_total",
    "Operations rejected with a typed failure",
    ["kind"],  # not_found|already_exists|unauthorized|validation
)
