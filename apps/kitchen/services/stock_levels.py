"""
Stock level classification of free-text quantities.

Purely presentational: tells the admin which requested ingredients are
already out (critical) or running low. It never gates the workflow.
"""

CRITICAL = 'critical'
LOW = 'low'
OK = 'ok'

CRITICAL_QUANTITIES = frozenset({'0', 'no', 'nada'})
LOW_QUANTITIES = frozenset({'poco', 'bajo', '1', '2'})


def stock_level(quantity: str) -> str:
    normalized = (quantity or '').strip().lower()
    if normalized in CRITICAL_QUANTITIES:
        return CRITICAL
    if normalized in LOW_QUANTITIES:
        return LOW
    return OK
