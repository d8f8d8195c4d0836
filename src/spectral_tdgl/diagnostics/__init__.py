from .checks import boundary_residuals, l2_norm, max_modulus, snapshot_increments
from .tables import summary_table

__all__ = [
    "boundary_residuals",
    "snapshot_increments",
    "max_modulus",
    "l2_norm",
    "summary_table",
]
