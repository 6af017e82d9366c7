"""Prometheus metrics for monitoring health grades, scenario usage, and LLM gateway performance"""

from prometheus_client import Counter, Histogram

# Engine metrics
health_grade_counter = Counter(
    "loanwise_health_grade_total",
    "Health scores computed by grade",
    ["grade"],  # Excellent | Good | Fair | Poor | Critical
)

scenario_counter = Counter(
    "loanwise_scenario_total",
    "What-if scenarios simulated",
    ["scenario"],
)

risk_alert_counter = Counter(
    "loanwise_risk_alert_total",
    "Risk alerts raised by severity",
    ["severity"],  # critical | warning | info
)

# LLM gateway metrics
llm_latency_histogram = Histogram(
    "llm_request_latency_seconds",
    "LLM gateway response time",
    ["operation"],  # chat | insights
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

llm_failure_counter = Counter(
    "llm_failures_total",
    "Failed LLM gateway calls",
    ["reason"],  # rate_limited | credits_exhausted | http_error | network | invalid_response
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(grade: str, alert_severities: list[str]) -> None:
    """Record the grade distribution and alert mix of a dashboard computation"""
    health_grade_counter.labels(grade=grade).inc()
    for severity in alert_severities:
        risk_alert_counter.labels(severity=severity).inc()
