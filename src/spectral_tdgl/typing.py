from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# grid samples and Chebyshev coefficients
FloatArray: TypeAlias = NDArray[np.floating]
ComplexArray: TypeAlias = NDArray[np.complexfloating]

# psi0(x) on the physical grid; may be scalar-only
ProfileFn: TypeAlias = Callable[[FloatArray], NDArray[np.number]]
# polled before each step with the 1-based iteration index
StopFn: TypeAlias = Callable[[int], bool]

# Runtime dtype of the stepping state
ComplexDType = np.complex128
