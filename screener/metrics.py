from prometheus_client import Counter, Histogram

EVALUATIONS_TOTAL = Counter(
    "screener_evaluations_total", "Number of breakout evaluations started"
)
CANDIDATES_TOTAL = Counter(
    "screener_candidates_total", "Number of instruments passing every gate"
)
REJECTIONS_TOTAL = Counter(
    "screener_rejections_total", "Rejected instruments by failing gate", ["gate"]
)
ERRORS_TOTAL = Counter(
    "screener_errors_total", "Instruments skipped on input errors", ["error"]
)
EVAL_SECONDS = Histogram(
    "screener_evaluation_seconds",
    "Time spent evaluating one eligible instrument",
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
)
