"""Delimiter validation for delimark.

validation/
├── __init__.py          # Re-exports Validator
├── core.py              # Validator (per-line resolution, flattening)
├── flanking.py          # Context and open/close eligibility rules
└── pending.py           # Pending-open stack and match records

"""

from delimark.validation.core import Validator
from delimark.validation.pending import DelimiterMatch, PendingOpen, PendingStack

__all__ = ["DelimiterMatch", "PendingOpen", "PendingStack", "Validator"]
