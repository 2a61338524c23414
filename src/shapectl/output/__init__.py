"""Output layer — render CheckResult for humans (Rich) or machines (JSON)."""
