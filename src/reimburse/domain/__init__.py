"""Domain layer for reimburse application.

Services that need a database (OwnershipService, ReimbursementService) are
imported from their own modules to avoid a circular import with
reimburse.database.
"""

from reimburse.domain.calculations import calculate_reimbursement
from reimburse.domain.snapshot import load_snapshot, parse_snapshot

__all__ = [
    "calculate_reimbursement",
    "load_snapshot",
    "parse_snapshot",
]
