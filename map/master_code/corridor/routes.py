# map/master_code/corridor/routes.py
# Leg table (straight + curved connections), per-leg styling, path + length helpers.

import logging
import math
from typing import Dict, List, Optional

import pandas as pd

from corridor.arcs import Direction, LatLon, generate_arc
from corridor.locations import load_locations

KINDS = ("straight", "curved")

LINE_STYLE = {"weight": 4, "opacity": 0.7, "line_join": "round"}

EARTH_RADIUS_KM = 6371.0

# start, end, kind, color, arc_height, direction
ROUTES = [
    ("bow_valley_college", "calgary_airport", "curved", "#3B82F6", 0.03, "down"),   # Blue
    ("calgary_airport", "airdrie", "straight", "#EF4444", None, None),              # Red
    ("airdrie", "crossfield", "straight", "#10B981", None, None),                   # Green
    ("crossfield", "carstairs", "straight", "#8B5CF6", None, None),                 # Purple
    ("carstairs", "didsbury", "straight", "#F59E0B", None, None),                   # Orange
    ("didsbury", "olds", "straight", "#EC4899", None, None),                        # Pink
    ("olds", "bowden", "straight", "#06B6D4", None, None),                          # Cyan
    ("bowden", "innisfail", "straight", "#84CC16", None, None),                     # Lime
    ("innisfail", "penhold", "straight", "#F97316", None, None),                    # Amber/Orange
    ("penhold", "red_deer_airport", "straight", "#A855F7", None, None),             # Violet
    ("red_deer_airport", "red_deer_polytechnic", "straight", "#DC2626", None, None),  # Dark red
    ("red_deer_polytechnic", "blackfalds", "straight", "#7C2D12", None, None),      # Brown
    ("blackfalds", "lacombe", "straight", "#1E40AF", None, None),                   # Dark blue
    ("lacombe", "ponoka", "straight", "#059669", None, None),                       # Emerald
    ("ponoka", "maskwacis", "straight", "#D97706", None, None),                     # Amber
    ("maskwacis", "wetaskiwin", "straight", "#6B7280", None, None),                 # Gray
    ("wetaskiwin", "millet", "straight", "#BE185D", None, None),                    # Pink
    ("millet", "leduc", "straight", "#0EA5E9", None, None),                         # Sky blue
    ("leduc", "ualberta", "straight", "#8B5CF6", None, None),                       # Purple
    ("ualberta", "west_edmonton_mall", "curved", "#F59E0B", 0.02, "up"),            # Orange
]

logger = logging.getLogger(__name__)


def load_routes(locations: Optional[pd.DataFrame] = None) -> pd.DataFrame:
    """Return dataframe with: start, end, kind, color, arc_height, direction.

    Every leg must reference a known location key; curved legs get a Direction.
    """
    locs = locations if locations is not None else load_locations()
    known = set(locs["key"])

    df = pd.DataFrame(ROUTES, columns=["start", "end", "kind", "color", "arc_height", "direction"])
    missing = sorted((set(df["start"]) | set(df["end"])) - known)
    if missing:
        raise ValueError(f"Routes reference unknown locations: {', '.join(missing)}")
    bad = sorted(set(df["kind"]) - set(KINDS))
    if bad:
        raise ValueError(f"Unknown route kind(s): {', '.join(bad)}")

    curved = df["kind"].eq("curved")
    df["direction"] = df["direction"].astype(object)
    df.loc[curved, "direction"] = df.loc[curved, "direction"].map(lambda d: Direction(d))
    logger.debug("Loaded %d legs (%d curved)", len(df), int(curved.sum()))
    return df


def route_path(row, coords: Dict[str, LatLon]) -> List[LatLon]:
    start, end = coords[row["start"]], coords[row["end"]]
    if row["kind"] == "curved":
        return generate_arc(start, end, float(row["arc_height"]), row["direction"])
    return [start, end]


def leg_length_km(start: LatLon, end: LatLon) -> float:
    """Great-circle chord length on a spherical earth."""
    lat1, lon1, lat2, lon2 = map(math.radians, (start[0], start[1], end[0], end[1]))
    h = (math.sin((lat2 - lat1) / 2) ** 2
         + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2)
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))
