"""Collection and reporting of unresolved comment references."""

import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnresolvedReference:
    """A comment reference that did not resolve to any entity."""

    origin: str  # uid of the entity whose comment holds the reference
    reference: str  # text between the brackets
    file: str  # symbol file the comment came from


class ReferenceReport:
    """Counts resolved references and records unresolved ones."""

    def __init__(self, config_hash: str, ignore: list[str] | None = None) -> None:
        """Initialize the report; references listed in ``ignore`` are never recorded."""
        self.config_hash = config_hash
        self.ignore = set(ignore or [])
        self.resolved = 0
        self.unresolved: list[UnresolvedReference] = []
        self.start_time = time.time()

    def add_resolved(self) -> None:
        self.resolved += 1

    def add_unresolved(self, origin: str, reference: str, file: str = "") -> None:
        """Record an unresolved reference and log it as a warning."""
        if reference in self.ignore:
            return
        item = UnresolvedReference(origin=origin, reference=reference, file=file)
        if item in self.unresolved:
            return
        self.unresolved.append(item)
        logger.warning("Unresolved reference [%s] in %s", reference, origin)

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
            },
            "stats": self._compute_stats(),
            "unresolved": [asdict(u) for u in self.unresolved],
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        by_reference: dict[str, int] = {}
        for u in self.unresolved:
            by_reference[u.reference] = by_reference.get(u.reference, 0) + 1
        total = self.resolved + len(self.unresolved)
        return {
            "resolved": self.resolved,
            "unresolved": len(self.unresolved),
            "resolution_rate": (self.resolved / total) if total else 1.0,
            "unresolved_by_reference": dict(
                sorted(by_reference.items(), key=lambda kv: (-kv[1], kv[0]))
            ),
        }
