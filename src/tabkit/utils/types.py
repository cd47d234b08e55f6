"""Shared typing aliases for tabkit."""

from __future__ import annotations

from typing import Any, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Coefficients: TypeAlias = Sequence[Any] | NDArray[np.generic]
