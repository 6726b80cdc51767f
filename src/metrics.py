"""In-process checkout metrics using only the Python standard library.

Counters and gauges are registered globally when created and can be
exported together in the Prometheus text exposition format with
:func:`generate_metrics_text`.  Each metric guards its own values with a
lock so concurrently running sessions may share them.
"""

from collections import defaultdict
from threading import Lock
from typing import Dict, Iterable, List, Tuple


class Metric:
    """Base class for all metrics."""

    kind = "untyped"

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        self.name = name
        self.description = description
        self.label_names = list(label_names)
        self._lock = Lock()
        self._values: Dict[Tuple[str, ...], float] = {}
        _METRIC_REGISTRY.append(self)

    def _label_tuple(self, labels: Dict[str, str]) -> Tuple[str, ...]:
        unknown = set(labels) - set(self.label_names)
        if unknown:
            raise ValueError(f"Unknown labels for {self.name}: {sorted(unknown)}")
        return tuple(labels.get(k, "") for k in self.label_names)

    def _format_labels(self, label_values: Tuple[str, ...]) -> str:
        if not self.label_names:
            return ""
        pairs = [f'{name}="{value}"' for name, value in zip(self.label_names, label_values)]
        return "{" + ",".join(pairs) + "}"

    def value(self, **labels: str) -> float:
        """Current value for the given labels (0 when never touched)."""
        with self._lock:
            return self._values.get(self._label_tuple(labels), 0)

    def to_prometheus(self) -> List[str]:
        """Return a list of strings in Prometheus exposition format."""
        lines = [f"# HELP {self.name} {self.description}", f"# TYPE {self.name} {self.kind}"]
        with self._lock:
            for label_values, value in self._values.items():
                lines.append(f"{self.name}{self._format_labels(label_values)} {value}")
        return lines


class Counter(Metric):
    """Monotonic counter.  ``SCANS.inc(outcome="priced")``."""

    kind = "counter"

    def __init__(self, name: str, description: str, label_names: Iterable[str]):
        super().__init__(name, description, label_names)
        self._values = defaultdict(int)

    def inc(self, **labels: str) -> None:
        label_tuple = self._label_tuple(labels)
        with self._lock:
            self._values[label_tuple] += 1


class Gauge(Metric):
    """Gauge holding the last value ``set()`` for each label tuple."""

    kind = "gauge"

    def set(self, value: float, **labels: str) -> None:
        label_tuple = self._label_tuple(labels)
        with self._lock:
            self._values[label_tuple] = float(value)


_METRIC_REGISTRY: List[Metric] = []


def generate_metrics_text() -> bytes:
    """Generate the text representation of all registered metrics."""
    lines: List[str] = []
    for metric in _METRIC_REGISTRY:
        lines.extend(metric.to_prometheus())
    return "\n".join(lines).encode("utf-8")


# -----------------------------------------------------------------------------
# Metrics recorded by the point-of-sale controller.
# -----------------------------------------------------------------------------

# Barcode events, labelled by outcome: priced, not_found or empty_barcode
SCANS_TOTAL = Counter(
    name="pos_scans_total",
    description="Total number of barcode events, labelled by outcome",
    label_names=["outcome"],
)

# Number of total requests displayed
TOTALS_TOTAL = Counter(
    name="pos_totals_total",
    description="Total number of checkout totals displayed",
    label_names=[],
)

# Most recently displayed checkout total
LAST_TOTAL = Gauge(
    name="pos_last_total",
    description="Most recently displayed checkout total",
    label_names=[],
)
