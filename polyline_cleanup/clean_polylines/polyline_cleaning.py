import json
import logging
from typing import Any, Dict, List

from tqdm import tqdm

from polyline_cleanup.geometry import remove_duplicates

from .types import CleaningStats, PolylineCleaningContext

logger = logging.getLogger(__name__)


def _load_polylines(ctx: PolylineCleaningContext) -> List[Dict[str, Any]]:
    """Load polylines from JSON and normalize them to dicts with id, closed and points."""
    logger.info(f"Loading polylines from: {ctx.input_path}")

    try:
        with open(ctx.input_path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON polylines file: {e}")
        raise

    if isinstance(data, dict):
        if "polylines" not in data:
            raise ValueError(f"Missing 'polylines' key in {ctx.input_path}")
        data = data["polylines"]

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of polylines in {ctx.input_path}")

    polylines = []
    for idx, entry in enumerate(data):
        if isinstance(entry, dict):
            polyline_id = entry.get("id", idx)
            closed = entry.get("closed", ctx.wrap_around)
            if not isinstance(closed, bool):
                raise ValueError(
                    f"Polyline {polyline_id} has a non-boolean 'closed' value: {closed!r}"
                )

            polylines.append(
                {"id": polyline_id, "closed": closed, "points": entry.get("points", [])}
            )
        else:
            polylines.append({"id": idx, "closed": ctx.wrap_around, "points": entry})

    logger.info(f"Loaded {len(polylines)} polylines")
    return polylines


def _to_points(ctx: PolylineCleaningContext, polyline: Dict[str, Any]) -> list:
    """Convert coordinate rows to Cartesian points."""
    points = []
    for row in polyline["points"]:
        if len(row) != ctx.dimension:
            raise ValueError(
                f"Polyline {polyline['id']} has a point with {len(row)} coordinates, "
                f"expected {ctx.dimension}"
            )
        points.append(ctx.point_type.from_array(row))

    return points


def _save_polylines(ctx: PolylineCleaningContext, polylines: List[Dict[str, Any]]) -> None:
    logger.info(f"Saving {len(polylines)} polylines to: {ctx.output_path}")

    with open(ctx.output_path, "w") as f:
        json.dump({"polylines": polylines}, f, indent=2)


def clean_polylines(ctx: PolylineCleaningContext) -> CleaningStats:
    """
    Remove adjacent duplicate points from every polyline in the input file.

    Args:
        ctx: PolylineCleaningContext containing all necessary parameters

    Returns:
        CleaningStats with polyline and point counts before and after cleaning
    """
    logger.info("Starting polyline cleaning process")

    polylines = _load_polylines(ctx)
    stats = CleaningStats()
    cleaned = []

    for polyline in tqdm(polylines, desc="Cleaning polylines"):
        points = _to_points(ctx, polyline)
        kept = remove_duplicates(points, ctx.point_type, wrap_around=polyline["closed"])

        removed = len(points) - len(kept)
        if removed:
            logger.debug(f"Polyline {polyline['id']}: removed {removed} of {len(points)} points")

        stats.polylines += 1
        stats.points_in += len(points)
        stats.points_out += len(kept)

        cleaned.append(
            {
                "id": polyline["id"],
                "closed": polyline["closed"],
                "points": [p.to_array().tolist() for p in kept],
            }
        )

    _save_polylines(ctx, cleaned)

    removed_pct = (stats.removed / stats.points_in * 100) if stats.points_in > 0 else 0
    logger.info(
        f"Cleaned {stats.polylines} polylines: {stats.points_in} → {stats.points_out} points "
        f"({stats.removed} removed, {removed_pct:.1f}%)"
    )

    logger.info("Polyline cleaning process completed")
    return stats
