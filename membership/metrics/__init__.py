# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by middleware, the database layer and services.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "membership_requests_total",
    "Total HTTP requests",
    ["app", "method", "status"],
)
REQUEST_LATENCY = Histogram(
    "membership_request_duration_seconds",
    "Request latency in seconds",
    ["app", "method"],
)
HTTP_ERRORS = Counter(
    "membership_http_errors_total",
    "Total HTTP error responses",
    ["app", "method", "status"],
)

# ── Database ──
DB_STATEMENT_LATENCY = Histogram(
    "membership_db_statement_duration_seconds",
    "Database statement latency in seconds",
    ["operation"],
)

# ── Business Metrics (updated by service layer only) ──
ENTITY_MUTATIONS = Counter(
    "membership_entity_mutations_total",
    "Inserts, updates and deletes per entity",
    ["entity", "operation"],
)
AJAX_PASSTHROUGH = Counter(
    "membership_ajax_passthrough_total",
    "Admin ajax requests relayed to the API",
    ["method", "status"],
)
