import folium
from folium.plugins import MeasureControl
from loguru import logger

POPUP_MAX_WIDTH = 300


def render_map(spec):
    """Build a folium map from a MapSpec: one toggle-able FeatureGroup per layer."""
    m = folium.Map(location=list(spec.center), zoom_start=spec.zoom_start, tiles=spec.tiles)

    for layer in spec.layers:
        fg = folium.FeatureGroup(name=layer.name, show=layer.show)
        for marker in layer.markers:
            folium.Marker(
                [marker.latitude, marker.longitude],
                popup=folium.Popup(marker.popup, max_width=POPUP_MAX_WIDTH),
                icon=folium.Icon(color=layer.style.color, icon=marker.icon, prefix=layer.style.prefix),
            ).add_to(fg)
        fg.add_to(m)

    folium.LayerControl(collapsed=False).add_to(m)

    if spec.measure:
        MeasureControl(
            position='topleft',
            primary_length_unit='kilometers',
            secondary_length_unit='miles',
            primary_area_unit='sqmeters',
        ).add_to(m)

    logger.debug("Rendered {} markers in {} layers", spec.marker_count, len(spec.layers))
    return m

