# map/master_code/corridor/locations.py
# Static location table for the Calgary → Edmonton corridor map + popup markup.

from typing import Dict

import pandas as pd

from corridor.arcs import LatLon

CENTER: LatLon = (51.0833, -114.0396)
ZOOM_START = 11

# key, name, subtitle, address, lat, lon  (corridor order, south → north)
LOCATIONS = [
    ("bow_valley_college", "Bow Valley College", "Downtown Campus",
     "345 6 Avenue SE, Calgary, AB T2G 4V1", 51.0452, -114.0655),
    ("calgary_airport", "Calgary International Airport", "YYC",
     "2000 Airport Road NE, Calgary, AB T2E 6Z8", 51.1335, -114.0086),
    ("airdrie", "Airdrie Downtown", "City Centre", "Main Street, Airdrie, AB", 51.2885, -114.0142),
    ("crossfield", "Crossfield Downtown", "Town Centre", "Main Street, Crossfield, AB", 51.4230, -114.0320),
    ("carstairs", "Carstairs", "Town Centre", "Main Street, Carstairs, AB", 51.5550, -114.0950),
    ("didsbury", "Didsbury", "Town Centre", "Main Street, Didsbury, AB", 51.6480, -114.1450),
    ("olds", "Olds", "Town Centre", "Main Street, Olds, AB", 51.7860, -114.1020),
    ("bowden", "Bowden", "Town Centre", "Main Street, Bowden, AB", 51.9350, -114.0240),
    ("innisfail", "Innisfail", "Town Centre", "Main Street, Innisfail, AB", 52.0308, -113.9355),
    ("penhold", "Penhold", "Town Centre", "Main Street, Penhold, AB", 52.1350, -113.8600),
    ("red_deer_airport", "Red Deer Regional Airport", "YQF",
     "Airport Drive, Red Deer County, AB", 52.1805, -113.8815),
    ("red_deer_polytechnic", "Red Deer Polytechnic", "Main Campus",
     "100 College Blvd, Red Deer, AB T4N 5H5", 52.2530, -113.8220),
    ("blackfalds", "Blackfalds", "Town Centre", "Broadway Avenue, Blackfalds, AB", 52.3890, -113.7900),
    ("lacombe", "Lacombe", "City Centre", "Main Street, Lacombe, AB", 52.4900, -113.7350),
    ("ponoka", "Ponoka", "Town Centre", "Main Street, Ponoka, AB", 52.6740, -113.5730),
    ("maskwacis", "Maskwacis", "First Nations Community", "Maskwacis, AB T0C 1N0", 52.8250, -113.4500),
    ("wetaskiwin", "Wetaskiwin", "City Centre", "Main Street, Wetaskiwin, AB", 52.9670, -113.3950),
    ("millet", "Millet", "Town Centre", "Main Street, Millet, AB", 53.0880, -113.4790),
    ("leduc", "Leduc", "City Centre", "Main Street, Leduc, AB", 53.3180, -113.5554),
    ("ualberta", "University of Alberta", "Main Campus",
     "116 St & 85 Ave, Edmonton, AB T6G 2R3", 53.5227, -113.5263),
    ("west_edmonton_mall", "West Edmonton Mall", "World's Largest Mall",
     "8882 170 St NW, Edmonton, AB T5T 4J2", 53.5265, -113.6235),
]

# popup shown on page load
OPEN_POPUP = {"bow_valley_college"}


def load_locations() -> pd.DataFrame:
    """Return dataframe with: key, name, subtitle, address, lat, lon, open_popup."""
    df = pd.DataFrame(LOCATIONS, columns=["key", "name", "subtitle", "address", "lat", "lon"])
    dupes = df.loc[df["key"].duplicated(), "key"].tolist()
    if dupes:
        raise ValueError(f"Duplicate location keys: {', '.join(dupes)}")
    df["open_popup"] = df["key"].isin(OPEN_POPUP)
    return df


def coords_by_key(df: pd.DataFrame) -> Dict[str, LatLon]:
    return {r.key: (float(r.lat), float(r.lon)) for r in df.itertuples(index=False)}


def popup_html(row) -> str:
    return (
        '<div style="text-align: center;">'
        "<strong>{name}</strong><br>"
        "<em>{subtitle}</em><br>"
        "{address}"
        "</div>"
    ).format(name=row["name"], subtitle=row["subtitle"], address=row["address"])
