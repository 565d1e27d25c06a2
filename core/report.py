"""
5e Reference: PHB ch.9 (grid movement); DMG ch.8 (variant diagonals).
Purpose: Measure every selected token against every target, rank and format the results.
Dependencies: core/grid/distance.py, core/log.py.
Ext Hooks: Sort by PHB/DMG, per-user unit preferences.
Client/Server: Shared; the client whispers the text, the server returns it as JSON.

Entities only need a `name` and a `position` (core.grid.models.Position).
"""

import math
from dataclasses import dataclass
from typing import Any, List, Tuple
from core.grid.distance import measure
from core.grid.models import DistanceResult, GridConfig
from core.log import setup_logger

logger = setup_logger("tabletop.report")

HEADER = "<p>Distances in PHB / Euclidian / DMG {units}.</p>"
LINE = "<p>{source} is {phb} / {euclid} / {dmg} from {target}</p>"


@dataclass(frozen=True)
class RankedPair:
    source: Any
    target: Any
    result: DistanceResult


def measure_pairs(source, targets, grid: GridConfig) -> List[RankedPair]:
    """One RankedPair per target, in target order."""
    pairs = []
    for target in targets:
        result = measure(source.position, target.position, grid)
        logger.debug("%s -> %s: euclid=%.3f phb=%s dmg=%s",
                     source.name, target.name, result.euclid, result.phb, result.dmg)
        pairs.append(RankedPair(source, target, result))
    return pairs


def rank_pairs(pairs: List[RankedPair]) -> List[RankedPair]:
    """Nearest first by Euclidean distance; ties keep their order."""
    return sorted(pairs, key=lambda pair: pair.result.euclid)


def build_reports(sources, targets, grid: GridConfig) -> List[Tuple[Any, List[RankedPair]]]:
    """Ranked pairs for each source. Empty sources or targets give an empty list."""
    sources, targets = list(sources), list(targets)
    if not sources or not targets:
        return []
    return [(source, rank_pairs(measure_pairs(source, targets, grid))) for source in sources]


def format_number(value):
    """Whole numbers print without a trailing .0 (25, not 25.0)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_report(pairs: List[RankedPair], grid: GridConfig) -> str:
    """Chat text: header line, then 'A is PHB / floor(Euclid) / DMG from B' per pair."""
    html = HEADER.format(units=grid.unit_label)
    for pair in pairs:
        html += LINE.format(
            source=pair.source.name,
            phb=format_number(pair.result.phb),
            euclid=math.floor(pair.result.euclid),
            dmg=format_number(pair.result.dmg),
            target=pair.target.name,
        )
    return html


def report_to_dict(source, pairs: List[RankedPair]):
    return {
        "source": source.name,
        "distances": [dict(target=pair.target.name, **pair.result.to_dict()) for pair in pairs],
    }
