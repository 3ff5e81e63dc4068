# map/generate_table.py
# Build docs/route_table.html: dropdown to pick a leg kind, then a table
# listing every corridor leg with its chord length and arc bow.

import argparse
import json
import os
import sys
from datetime import datetime, timezone

import pandas as pd

from corridor.arcs import max_bow
from corridor.locations import coords_by_key, load_locations
from corridor.routes import KINDS, leg_length_km, load_routes, route_path

# -------- config --------
OUT_DIR = "docs"
OUT_FILE = os.path.join(OUT_DIR, "route_table.html")

ALL = "All"

# -------- helpers --------
def make_payload(routes: pd.DataFrame, locations: pd.DataFrame) -> dict:
    coords = coords_by_key(locations)
    names = dict(zip(locations["key"], locations["name"]))
    legs = []
    for _, r in routes.iterrows():
        start, end = coords[r["start"]], coords[r["end"]]
        legs.append({
            "from": names[r["start"]],
            "to": names[r["end"]],
            "kind": r["kind"],
            "color": r["color"],
            "length_km": round(leg_length_km(start, end), 1),
            "bow_deg": round(max_bow(route_path(r, coords)), 4),
        })
    return {
        "kinds": [ALL] + [k.capitalize() for k in KINDS],
        "legs": legs,
    }

def build_html(payload: dict) -> str:
    updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    data_json = json.dumps(payload, separators=(",", ":"))
    html = """<!doctype html>
<meta charset="utf-8">
<title>Corridor legs</title>
<meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate"/>
<meta http-equiv="Pragma" content="no-cache"/>
<meta http-equiv="Expires" content="0"/>
<style>
  :root {
    --card-bg:#fff; --ink:#39424e; --muted:#6b7785; --border:#e6e8ec;
  }
  body {
    margin:0; padding:24px; font:16px/1.45 -apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,Arial,sans-serif;
    color:var(--ink); background:#f6f8fb;
  }
  .wrap { max-width:1100px; margin:0 auto; }
  .card {
    background:var(--card-bg); border-radius:12px; box-shadow:0 4px 20px rgba(0,0,0,.08);
    padding:20px 20px;
  }
  h1 { margin:0 0 12px 0; font-size:22px; }
  .row { display:flex; gap:16px; align-items:center; flex-wrap:wrap; }
  .muted { color:var(--muted); font-size:13px; }
  select {
    font:14px/1.2 inherit; padding:6px 10px; border-radius:8px; border:1px solid var(--border); background:#fff;
  }
  table {
    width:100%; border-collapse:separate; border-spacing:0; margin-top:14px; font-size:14px;
  }
  thead th {
    text-align:left; font-weight:600; padding:10px 12px; border-bottom:1px solid var(--border);
    background:#fafbfc; position:sticky; top:0;
  }
  tbody td { padding:10px 12px; border-bottom:1px solid var(--border); vertical-align:top; }
  td.num { text-align:right; width:90px; color:var(--muted); }
  .swatch {
    display:inline-block; width:22px; height:4px; border-radius:2px; margin-right:8px;
    vertical-align:middle; opacity:.7;
  }
  .footer { margin-top:10px; }
</style>

<div class="wrap">
  <div class="card">
    <div class="row">
      <h1>Corridor legs</h1>
      <div class="muted">Last updated: __UPDATED__</div>
    </div>
    <div class="row" style="margin-top:8px;">
      <label for="kindSelect" class="muted">Kind:</label>
      <select id="kindSelect" aria-label="Choose leg kind"></select>
    </div>

    <table id="legTable" aria-live="polite">
      <thead>
        <tr>
          <th>From</th>
          <th>To</th>
          <th>Kind</th>
          <th style="text-align:right">Chord (km)</th>
          <th style="text-align:right">Bow (°)</th>
        </tr>
      </thead>
      <tbody></tbody>
    </table>

    <div class="footer muted">Chord lengths are great-circle; bow is the arc's largest offset from the chord.</div>
  </div>
</div>

<script id="corridor-data" type="application/json">__DATA_JSON__</script>
<script>
(function(){
  const DATA = JSON.parse(document.getElementById('corridor-data').textContent);
  const sel = document.getElementById('kindSelect');
  const tbody = document.querySelector('#legTable tbody');

  function option(value, text) { const o = document.createElement('option'); o.value = value; o.textContent = text; return o; }
  function cell(text, cls) { const td = document.createElement('td'); if (cls) td.className = cls; td.textContent = text; return td; }

  function render(kind) {
    tbody.innerHTML = '';
    let total = 0, count = 0;

    DATA.legs.forEach(leg => {
      if (kind !== 'All' && leg.kind !== kind.toLowerCase()) return;
      total += leg.length_km; count += 1;
      const tr = document.createElement('tr');
      const from = cell(leg.from);
      const sw = document.createElement('span'); sw.className = 'swatch'; sw.style.background = leg.color;
      from.prepend(sw);
      tr.appendChild(from);
      tr.appendChild(cell(leg.to));
      tr.appendChild(cell(leg.kind));
      tr.appendChild(cell(leg.length_km.toFixed(1), 'num'));
      tr.appendChild(cell(leg.bow_deg ? leg.bow_deg.toFixed(4) : '—', 'num'));
      tbody.appendChild(tr);
    });

    const trTotal = document.createElement('tr');
    trTotal.innerHTML = '<td><strong>Total</strong></td><td class="muted">'+ count +' legs</td><td></td><td class="num">'+ total.toFixed(1) +'</td><td></td>';
    tbody.appendChild(trTotal);
  }

  (DATA.kinds || []).forEach(k => sel.appendChild(option(k, k)));
  sel.value = 'All';

  sel.addEventListener('change', () => render(sel.value));
  render(sel.value);
})();
</script>
"""
    return html.replace("__UPDATED__", updated).replace("__DATA_JSON__", data_json)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Render the corridor leg table.")
    ap.add_argument("--out", default=OUT_FILE)
    args = ap.parse_args(argv)

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    try:
        locations = load_locations()
        payload = make_payload(load_routes(locations), locations)
        page = build_html(payload)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(page)
        print("Wrote", args.out)
    except Exception as e:
        print("ERROR building table:", e, file=sys.stderr)
        updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        fallback = """<!doctype html><meta charset="utf-8">
<title>Corridor legs</title>
<style>body{font:16px/1.45 -apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,Arial,sans-serif;padding:24px;color:#233;max-width:900px;margin:auto;background:#f6f8fb}
.card{background:#fff;border-radius:12px;box-shadow:0 4px 20px rgba(0,0,0,.08);padding:20px}</style>
<div class="card">
  <h1>Corridor legs</h1>
  <p><strong>Status:</strong> temporarily unavailable.</p>
  <p><strong>Reason:</strong> __ERR__</p>
  <p>Last attempt: __UPDATED__. This page updates when the generator runs.</p>
</div>""".replace("__ERR__", str(e)).replace("__UPDATED__", updated)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(fallback)
        sys.exit(0)

if __name__ == "__main__":
    main()
