"""
Prometheus metrics collection for message_ids.

Counts what the generator and codecs do so operators can spot counter
saturation, clock regressions, and peers sending malformed identifiers.
"""

from prometheus_client import Counter

# ============================================================================
# Generation Metrics
# ============================================================================

identifiers_generated_total = Counter(
    "message_ids_generated_total",
    "Total number of identifiers generated",
    ["flavor"],  # flavor: time_ordered, counter_based
)

counter_saturated_total = Counter(
    "message_ids_counter_saturated_total",
    "Total number of counter-based identifiers issued with a saturated counter",
)

clock_regressions_total = Counter(
    "message_ids_clock_regressions_total",
    "Total number of times the clock moved backward between generations",
)

# ============================================================================
# Codec & Validation Metrics
# ============================================================================

parse_failures_total = Counter(
    "message_ids_parse_failures_total",
    "Total number of identifier decodes that degraded to the nil identifier",
    ["format"],  # format: bytes, text
)

validation_failures_total = Counter(
    "message_ids_validation_failures_total",
    "Total number of identifiers that failed validation",
    ["flavor"],  # flavor: time_ordered, counter_based, unknown
)
