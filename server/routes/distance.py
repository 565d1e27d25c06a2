"""
5e Reference: PHB ch.9; DMG ch.8 (variant diagonals).
Purpose: Server-side distance measurement for a scene snapshot.
Dependencies: flask, core/report.py, client/actors/token.py.
Ext Hooks: Line-of-sight checks.
Server Only: Rules enforcement.
"""

from flask import Blueprint, request, jsonify
from client.actors.token import Token
from core.errors import ConfigurationError
from core.grid.models import GridConfig
from core.log import setup_logger
from core.report import build_reports, format_report, report_to_dict

logger = setup_logger("tabletop.server")

bp = Blueprint('distance', __name__)


def _parse_grid(grid_data):
    return GridConfig(
        cell_size=grid_data['size'],
        unit_distance=grid_data['distance'],
        unit_label=str(grid_data.get('units', '')),
    )


@bp.route("/api/distances", methods=["POST"])
def handle_distances():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'grid' not in data or 'sources' not in data or 'targets' not in data:
        return jsonify({"error": "Invalid data"}), 400

    try:
        grid = _parse_grid(data['grid'])
        sources = [Token.from_dict(token) for token in data['sources']]
        targets = [Token.from_dict(token) for token in data['targets']]
    except ConfigurationError as e:
        logger.warning("Bad grid: %s", e)
        return jsonify({"error": str(e)}), 422
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        return jsonify({"error": f"Invalid data: {e}"}), 400

    warnings = []
    if not sources:
        warnings.append("No source tokens")
    if not targets:
        warnings.append("No targets")

    reports = build_reports(sources, targets, grid)
    return jsonify({
        "units": grid.unit_label,
        "reports": [report_to_dict(source, pairs) for source, pairs in reports],
        "messages": [format_report(pairs, grid) for _, pairs in reports],
        "warnings": warnings,
    })
