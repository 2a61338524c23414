"""Service layer — configuration checks built on the validator core.

Services catch ``ValidationError`` and turn it into :class:`CheckResult`,
so callers can degrade gracefully instead of crashing.
"""
