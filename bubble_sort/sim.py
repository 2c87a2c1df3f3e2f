from collections import namedtuple
from enum import Enum

import numpy as np

ITEM_COUNT = 32
MAX_VALUE = 255


class Step(Enum):
    MARK = "Mark"
    COMPARE = "Compare"
    SWAP_HAPPENED = "Swap happened"
    NEXT = "Next"
    FINISHED = "Finished"


Snapshot = namedtuple("Snapshot", ["items", "cursor", "step", "pass_index"])


class Sim:
    """Bubble sort split into micro-steps, one per advance() call."""

    def __init__(self, items):
        values = np.asarray(items)
        if values.ndim != 1 or len(values) < 2:
            raise ValueError("need at least two items to sort")
        if values.dtype.kind not in "iub":
            raise ValueError(f"items must be integers, got {values.dtype}")
        if values.min() < 0 or values.max() > MAX_VALUE:
            raise ValueError(f"item values must be within 0..{MAX_VALUE}")
        self.items = values.astype(np.uint8)
        self.cursor = 0
        self.step = Step.MARK
        self.swapped_any = False
        self.pass_index = 0

    @classmethod
    def new_randomized(cls, rng=None, count=ITEM_COUNT):
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.integers(0, MAX_VALUE, size=count, endpoint=True, dtype=np.uint8))

    @property
    def finished(self):
        return self.step is Step.FINISHED

    def advance(self):
        if self.step is Step.MARK:
            self.step = Step.COMPARE
        elif self.step is Step.COMPARE:
            i = self.cursor
            if self.items[i] > self.items[i + 1]:
                self.items[i], self.items[i + 1] = self.items[i + 1], self.items[i]
                self.swapped_any = True
                self.step = Step.SWAP_HAPPENED
            else:
                self.step = Step.NEXT
        elif self.step is Step.SWAP_HAPPENED:
            self.step = Step.NEXT
        elif self.step is Step.NEXT:
            # the last pass_index items are already in place
            if self.cursor + 1 < len(self.items) - 1 - self.pass_index:
                self.cursor += 1
                self.step = Step.MARK
            elif self.swapped_any:
                self.cursor = 0
                self.swapped_any = False
                self.pass_index += 1
                self.step = Step.MARK
            else:
                self.step = Step.FINISHED

    def snapshot(self):
        items = self.items.copy()
        items.flags.writeable = False
        return Snapshot(items, self.cursor, self.step, self.pass_index)
