"""Prometheus metrics for customer intake and rewards calculations"""

from prometheus_client import Counter, Histogram

# Intake metrics
customers_created_counter = Counter(
    "rewards_customers_created_total",
    "Customers persisted with their transaction batch",
)

transactions_recorded_counter = Counter(
    "rewards_transactions_recorded_total",
    "Transactions persisted across all customers",
)

# Calculation metrics
calculation_counter = Counter(
    "rewards_calculation_total",
    "Rewards calculations by outcome",
    ["outcome"],  # success | not_found | invalid
)

points_awarded_histogram = Histogram(
    "rewards_points_awarded",
    "Total points returned per calculation",
    buckets=[0, 10, 50, 100, 250, 500, 1000, 5000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_customer_created(transaction_count: int) -> None:
    """Record a successful customer creation"""
    customers_created_counter.inc()
    transactions_recorded_counter.inc(transaction_count)


def record_calculation(outcome: str, total_points: int | None = None) -> None:
    """Record a rewards calculation outcome and, on success, its point total"""
    calculation_counter.labels(outcome=outcome).inc()
    if total_points is not None:
        points_awarded_histogram.observe(total_points)
