"""Prometheus metrics for the note store.

All metric objects are defined here so they can be imported from any module.
"""

from prometheus_client import Counter, Gauge

# ---------------------------------------------------------------------------
# Store operation metrics
# ---------------------------------------------------------------------------

STORE_OPERATIONS = Counter(
    "quicknotes_store_operations_total",
    "Total number of note store operations",
    ["operation", "status"],  # status: success, invalid, not_found, persistence_error
)

# ---------------------------------------------------------------------------
# Collection metrics
# ---------------------------------------------------------------------------

NOTES_STORED = Gauge(
    "quicknotes_notes_stored",
    "Number of notes currently held by the store",
)
