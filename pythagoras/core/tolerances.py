"""Tolerance constants for right angle checks.

Centralizes the tolerance values used by the consistency checks so
callers and tests agree on what "close enough" means.
"""

# Relative tolerance for consistency checks
# rise² + run² must match diagonal² within this ratio, and the supplied
# angle must match atan2(rise, run) within the same ratio
CONSISTENCY_REL: float = 1e-5

# Absolute tolerance floor for consistency checks
# Keeps near-zero sides and angles from failing on rounding noise alone
CONSISTENCY_ABS: float = 1e-9
