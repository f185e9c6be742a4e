# metrics_tracker.py - in-memory sum/count per metric

from collections import defaultdict
from typing import Dict


class Metrics:
    def __init__(self):
        self.m = defaultdict(float)
        self.n = defaultdict(int)

    def record(self, key: str, val: float) -> None:
        self.m[key] += val
        self.n[key] += 1

    def avg(self, key: str) -> float:
        n = self.n.get(key, 0)
        if n == 0:
            return 0.0
        return self.m[key] / n

    def count(self, key: str) -> int:
        return self.n.get(key, 0)

    def snapshot(self) -> Dict[str, Dict[str, float]]:
        return {k: {"avg": self.avg(k), "count": self.n[k], "sum": self.m[k]} for k in self.m}

    def reset(self) -> None:
        self.m.clear()
        self.n.clear()
