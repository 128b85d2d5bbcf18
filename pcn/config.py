# pcn/config.py
from dataclasses import dataclass
from typing import Optional

DEFAULT_ETA = 0.25
DEFAULT_EPOCHS = 10

# initial weights are drawn uniformly from [INIT_LOW, INIT_HIGH]
INIT_LOW = -0.05
INIT_HIGH = 0.05

# constant input paired with the bias row of the weight matrix
BIAS_INPUT = -1.0


@dataclass(frozen=True)
class TrainingConfig:
    """
    Hyper-parameters of one training run.
    seed=None means the process-wide, clock-seeded generator is used.
    """
    eta: float = DEFAULT_ETA
    epochs: int = DEFAULT_EPOCHS
    seed: Optional[int] = None

    def __post_init__(self):
        if not self.eta > 0:
            raise ValueError("eta must be positive, got %r" % (self.eta,))
        if int(self.epochs) != self.epochs or self.epochs < 0:
            raise ValueError("epochs must be a non-negative integer, got %r" % (self.epochs,))
