# map/generate_map.py
# Builds docs/index.html with the Calgary → Edmonton corridor map (markers, popups, straight + arc legs).
# If the build fails, writes a fallback page so Pages still serves something.

import argparse
import os
import sys
from datetime import datetime, timezone

import folium
import pandas as pd

from corridor.locations import CENTER, ZOOM_START, coords_by_key, load_locations, popup_html
from corridor.routes import LINE_STYLE, load_routes, route_path

# ---------- config ----------
TILES_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
TILES_ATTR = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'

# Leaflet's stock marker images (the bundled relative paths break in a standalone page)
ICON_BASE = "https://cdnjs.cloudflare.com/ajax/libs/leaflet/1.7.1/images/"
ICON_URL = ICON_BASE + "marker-icon.png"
ICON_RETINA_URL = ICON_BASE + "marker-icon-2x.png"
ICON_SHADOW_URL = ICON_BASE + "marker-shadow.png"
ICON_SIZE = (25, 41)
ICON_ANCHOR = (12, 41)
POPUP_ANCHOR = (1, -34)
SHADOW_SIZE = (41, 41)

MAP_HEIGHT = "600px"
POPUP_MAX_WIDTH = 320

GROUP_NAMES = {"markers": "Locations", "straight": "Straight legs", "curved": "Curved legs"}

OUT_DIR = "docs"
OUT_FILE = os.path.join(OUT_DIR, "index.html")


# ---------- helpers ----------
def write_error_page(msg: str, out_file: str = OUT_FILE) -> None:
    os.makedirs(os.path.dirname(out_file) or ".", exist_ok=True)
    updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    html = """<!doctype html><meta charset="utf-8">
<title>Corridor map</title>
<meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate"/>
<meta http-equiv="Pragma" content="no-cache"/>
<meta http-equiv="Expires" content="0"/>
<style>body{font:16px/1.45 -apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,Arial,sans-serif;padding:24px;color:#233;max-width:900px;margin:auto;background:#f6f8fb}
.card{background:#fff;border-radius:12px;box-shadow:0 4px 20px rgba(0,0,0,.08);padding:20px}
h1{margin:0 0 10px 0}</style>
<div class="card">
  <h1>Corridor map</h1>
  <p><strong>Status:</strong> temporarily unavailable.</p>
  <p><strong>Reason:</strong> __MSG__</p>
  <p>Last attempt: __UPDATED__.</p>
</div>""".replace("__MSG__", msg).replace("__UPDATED__", updated)
    with open(out_file, "w", encoding="utf-8") as f:
        f.write(html)
    print("Wrote fallback page:", out_file)


def default_icon() -> folium.CustomIcon:
    # one instance per marker: folium attaches icons as children
    icon = folium.CustomIcon(
        ICON_URL,
        icon_size=ICON_SIZE,
        icon_anchor=ICON_ANCHOR,
        shadow_image=ICON_SHADOW_URL,
        shadow_size=SHADOW_SIZE,
        popup_anchor=POPUP_ANCHOR,
    )
    # CustomIcon has no retina argument; L.icon reads iconRetinaUrl from its options
    icon.options["iconRetinaUrl"] = ICON_RETINA_URL
    return icon


# ---------- main ----------
def build_map(locations: pd.DataFrame | None = None, routes: pd.DataFrame | None = None) -> folium.Map:
    locs = locations if locations is not None else load_locations()
    legs = routes if routes is not None else load_routes(locs)
    coords = coords_by_key(locs)

    m = folium.Map(location=list(CENTER), zoom_start=ZOOM_START, tiles=None, height=MAP_HEIGHT)
    folium.TileLayer(TILES_URL, attr=TILES_ATTR, name="OpenStreetMap").add_to(m)
    groups = {k: folium.FeatureGroup(name=v, show=True).add_to(m) for k, v in GROUP_NAMES.items()}

    updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    badge_html = r"""
<style>
.last-updated {
  position:absolute; right:12px; bottom:24px; z-index:9999;
  background:#fff; padding:6px 8px; border-radius:8px;
  box-shadow:0 2px 8px rgba(0,0,0,.12);
  font:12px "Open Sans","Helvetica Neue",Arial,sans-serif; color:#485260;
}
.leaflet-control-layers-expanded{ box-shadow:0 4px 14px rgba(0,0,0,.12); border-radius:10px; }
</style>
<div class="last-updated">Last updated: __UPDATED__ • __COUNTS__</div>
""".replace("__UPDATED__", updated).replace("__COUNTS__", f"{len(locs)} stops, {len(legs)} legs")
    m.get_root().html.add_child(folium.Element(badge_html))

    names = dict(zip(locs["key"], locs["name"]))
    for _, r in legs.iterrows():
        folium.PolyLine(
            route_path(r, coords),
            color=r["color"],
            tooltip="{a} → {b}".format(a=names[r["start"]], b=names[r["end"]]),
            **LINE_STYLE,
        ).add_to(groups[r["kind"]])

    for _, r in locs.iterrows():
        folium.Marker(
            [float(r.lat), float(r.lon)],
            icon=default_icon(),
            tooltip=r["name"],
            popup=folium.Popup(popup_html(r), max_width=POPUP_MAX_WIDTH, show=bool(r.open_popup)),
        ).add_to(groups["markers"])

    folium.LayerControl(collapsed=False).add_to(m)
    return m


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Render the corridor map to a standalone HTML page.")
    ap.add_argument("--out", default=OUT_FILE)
    args = ap.parse_args(argv)

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    try:
        fmap = build_map()
        fmap.save(args.out)
        print("Wrote", args.out)
    except Exception as e:
        print("ERROR building map:", e, file=sys.stderr)
        write_error_page(str(e), args.out)
        # Keep Pages live even if the build fails.
        sys.exit(0)


if __name__ == "__main__":
    main()
