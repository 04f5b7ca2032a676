"""
Immutable description of the map handed to the folium renderer.

The core builds one MapSpec per load; rendering never feeds anything back.
"""
from dataclasses import dataclass
from typing import Tuple

from ipgroupmap.config import ESCAPE_POPUPS, MAP_TILES, MAP_ZOOM
from ipgroupmap.groups import make_rng
from ipgroupmap.popup import format_popups

DEFAULT_CENTER = (20.0, 0.0)


@dataclass(frozen=True)
class LayerStyle:
    color: str
    icons: Tuple[str, str, str]
    prefix: str = 'fa'


# Marker colors must be folium.Icon colors.
GROUP_STYLES = {
    'Group A': LayerStyle(color='red', icons=('server', 'database', 'hdd')),
    'Group B': LayerStyle(color='blue', icons=('laptop', 'desktop', 'mobile')),
    'Group C': LayerStyle(color='green', icons=('wifi', 'cloud', 'globe')),
}


@dataclass(frozen=True)
class MarkerSpec:
    latitude: float
    longitude: float
    popup: str
    icon: str


@dataclass(frozen=True)
class LayerSpec:
    name: str
    style: LayerStyle
    show: bool
    markers: Tuple[MarkerSpec, ...]


@dataclass(frozen=True)
class MapSpec:
    layers: Tuple[LayerSpec, ...]
    center: Tuple[float, float] = DEFAULT_CENTER
    zoom_start: int = MAP_ZOOM
    tiles: str = MAP_TILES
    measure: bool = True

    @property
    def marker_count(self):
        return sum(len(layer.markers) for layer in self.layers)


def _center(views):
    lats, lons = [], []
    for view in views.values():
        lats.extend(view['latitude'].tolist())
        lons.extend(view['longitude'].tolist())
    if not lats:
        return DEFAULT_CENTER
    return (sum(lats) / len(lats), sum(lons) / len(lons))


def build_layer(name, view, style, show, rng, escape=ESCAPE_POPUPS):
    # Icon variant is drawn per marker, unrelated to the record.
    picks = rng.integers(0, len(style.icons), size=len(view))
    popups = format_popups(view, escape=escape)
    markers = tuple(
        MarkerSpec(latitude=float(lat), longitude=float(lon), popup=popup, icon=style.icons[pick])
        for lat, lon, popup, pick in zip(view['latitude'], view['longitude'], popups, picks)
    )
    return LayerSpec(name=name, style=style, show=show, markers=markers)


def build_map_spec(views, rng=None, styles=None, escape=ESCAPE_POPUPS,
                   tiles=MAP_TILES, zoom_start=MAP_ZOOM, measure=True):
    """
    Turn the category views into a MapSpec.

    One layer per view, in view order, named after its label. Only the first
    layer is visible initially; the others start hidden in the layer control.
    """
    if rng is None:
        rng = make_rng()
    if styles is None:
        styles = GROUP_STYLES
    missing = [label for label in views if label not in styles]
    if missing:
        raise ValueError(f"No layer style for group(s): {', '.join(missing)}")

    layers = tuple(
        build_layer(label, view, styles[label], show=(i == 0), rng=rng, escape=escape)
        for i, (label, view) in enumerate(views.items())
    )
    return MapSpec(
        layers=layers,
        center=_center(views),
        zoom_start=zoom_start,
        tiles=tiles,
        measure=measure,
    )
