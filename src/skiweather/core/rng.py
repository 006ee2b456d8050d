from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class RNG:
  # None draws fresh entropy from the OS
  seed: Optional[int] = None

  def __post_init__(self):
    self.np = np.random.default_rng(self.seed)

  def uniform(self, low, high, size=None):
    if size is None:
      return float(self.np.uniform(low, high))
    return self.np.uniform(low, high, size)

  def chance(self, p: float) -> bool:
    return self.uniform(0, 1) < p
