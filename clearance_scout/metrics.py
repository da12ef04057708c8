"""Prometheus metrics for Clearance Scout."""

from prometheus_client import Counter, Histogram, Info

# Application info
app_info = Info("clearance_scout", "Clearance Scout application info")
app_info.info({"version": "0.1.0", "name": "clearance-scout"})

# Scan lifecycle metrics
scans_created_total = Counter(
    "scans_created_total",
    "Total number of scans accepted for execution",
    ["retailer", "plan"],
)

scans_rejected_total = Counter(
    "scans_rejected_total",
    "Total number of scan requests rejected before creation",
    ["reason"],
)

scans_finished_total = Counter(
    "scans_finished_total",
    "Total number of scans reaching a terminal state",
    ["retailer", "status"],
)

scan_duration_seconds = Histogram(
    "scan_duration_seconds",
    "Time spent executing a scan in the background",
    ["retailer"],
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
)

scan_stores_selected = Histogram(
    "scan_stores_selected",
    "Number of store locations resolved for a scan",
    ["retailer"],
    buckets=[0, 1, 2, 5, 10, 25, 50],
)

# Provider metrics
product_verifications_total = Counter(
    "product_verifications_total",
    "Total number of per-product verifications by browser-backed providers",
    ["retailer", "outcome"],
)

# Observation cache metrics
observation_cache_lookups_total = Counter(
    "observation_cache_lookups_total",
    "Observation cache lookups",
    ["result"],
)

# Retention metrics
retention_deleted_total = Counter(
    "retention_deleted_total",
    "Rows deleted by the data retention job",
    ["entity"],
)


def record_scan_created(retailer: str, plan: str):
    """Record a scan accepted for execution."""
    scans_created_total.labels(retailer=retailer, plan=plan).inc()


def record_scan_rejected(reason: str):
    """Record a scan request rejected before creation."""
    scans_rejected_total.labels(reason=reason).inc()


def record_scan_finished(retailer: str, status: str, duration: float):
    """Record a scan reaching a terminal state."""
    scans_finished_total.labels(retailer=retailer, status=status).inc()
    scan_duration_seconds.labels(retailer=retailer).observe(duration)


def record_stores_selected(retailer: str, count: int):
    scan_stores_selected.labels(retailer=retailer).observe(count)


def record_verification(retailer: str, outcome: str):
    """Record a product verification outcome (clearance, no_clearance, error, cached)."""
    product_verifications_total.labels(retailer=retailer, outcome=outcome).inc()


def record_cache_lookup(hit: bool):
    observation_cache_lookups_total.labels(result="hit" if hit else "miss").inc()


def record_retention_deleted(entity: str, count: int):
    if count:
        retention_deleted_total.labels(entity=entity).inc(count)
