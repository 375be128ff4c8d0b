#!/usr/bin/env python3
"""
Track visualization using folium maps.
"""

from typing import List
import logging
import folium
from folium.template import Template

from .fix import Fix
from .metrics import TrackMetrics
from .track import Track

logger = logging.getLogger(__name__)


class TrackLegend(folium.MacroElement):
    """Legend showing distance and accept/reject counts."""

    def __init__(self, metrics: TrackMetrics):
        super().__init__()
        self.distance_km = f"{metrics.distance / 1000:.2f}"
        self.accepted = metrics.accepted
        self.processed = metrics.processed
        self.dead_reckoned = metrics.dead_reckoned

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="track-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 230px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
        ">
            <b>Legend</b><br>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #2E86AB; font-weight: bold; font-size: 18px;">—</span>
                Track ({{ this.distance_km }} km)
            </div>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #BBBBBB; font-size: 18px;">—</span>
                Raw fixes ({{ this.accepted }}/{{ this.processed }} accepted)
            </div>
            {% if this.dead_reckoned > 0 %}
            <div style="margin: 4px 0; line-height: 1.3;">
                Dead reckoned: {{ this.dead_reckoned }}
            </div>
            {% endif %}
        </div>
        {% endmacro %}
        """
        )


def create_track_map(
    track: Track,
    raw_fixes: List[Fix],
    output_filename: str,
    metrics: TrackMetrics,
) -> None:
    """
    Create an interactive map of the filtered track over the raw fixes, save as HTML.

    Args:
        track: Track of accepted points
        raw_fixes: Fixes as received from the source, drawn for comparison
        output_filename: Path where HTML map file should be saved
        metrics: TrackMetrics for the legend

    Raises:
        ValueError: If track is empty
    """
    if not track:
        raise ValueError("Cannot create map for empty track")

    south, west, north, east = track.get_bbox()
    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    track_map = folium.Map(location=[center_lat, center_lon], tiles=None)

    folium.TileLayer(
        tiles="CartoDB positron",
        attr=(
            "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
            "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
        ),
        name="Standard",
        control=True,
        show=True,
    ).add_to(track_map)

    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr=(
            "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
            "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
        ),
        name="Satellite",
        control=True,
        show=False,
    ).add_to(track_map)

    folium.LayerControl().add_to(track_map)

    raw_coordinates = [[fix.latitude, fix.longitude] for fix in raw_fixes]
    if len(raw_coordinates) >= 2:
        folium.PolyLine(
            raw_coordinates,
            color="#BBBBBB",
            weight=1,
            opacity=0.6,
            popup="Raw fixes",
            z_index=1,
        ).add_to(track_map)

    folium.PolyLine(
        [list(coord) for coord in track.coordinates()],
        color="#2E86AB",
        weight=3,
        opacity=0.9,
        popup=f"Track ({track.distance / 1000:.2f} km)",
        z_index=2,
    ).add_to(track_map)

    folium.Marker(
        [track[0].latitude, track[0].longitude],
        popup="Start",
        icon=folium.Icon(color="green", icon="play"),
    ).add_to(track_map)

    folium.Marker(
        [track[-1].latitude, track[-1].longitude],
        popup="End",
        icon=folium.Icon(color="red", icon="stop"),
    ).add_to(track_map)

    track_map.add_child(TrackLegend(metrics))
    track_map.fit_bounds([[south, west], [north, east]])
    track_map.save(output_filename)

    logger.debug(
        f"Map saved to {output_filename} with {len(track)} track points "
        f"({track.distance:.1f} m)"
    )
