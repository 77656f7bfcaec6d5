import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

import folium
from branca.element import Figure
from folium.map import FitBounds

from . import conf
from .exceptions import ContractViolation
from .models import ROUTE_ROLES, check_route
from .utils.geo import bounding_box, popup_text

logger = logging.getLogger(__name__)

ROLE_ICONS = {
    'current': {'color': 'blue', 'icon': 'truck'},
    'pickup': {'color': 'green', 'icon': 'arrow-up'},
    'dropoff': {'color': 'red', 'icon': 'flag-checkered'},
}
ROUTE_LINE_STYLE = {'color': 'red', 'weight': 4}
FIT_PADDING = (50, 50)


@dataclass
class MapLayerSet:
    """Layers drawn for one route. Rebuilt from scratch, never edited in place."""
    markers: Dict[str, folium.Marker] = field(default_factory=dict)
    route_line: Optional[folium.PolyLine] = None
    viewport: Optional[FitBounds] = None

    def layers(self):
        found = list(self.markers.values())
        if self.route_line is not None:
            found.append(self.route_line)
        if self.viewport is not None:
            found.append(self.viewport)
        return found


def _detach(parent, element):
    # folium/branca have no public remove; children are keyed by get_name()
    parent._children.pop(element.get_name(), None)


class MapSyncController:
    """Owns one folium map and keeps its layers in step with the latest route."""

    def __init__(self, center=None, zoom=None, tile_url=None, attribution=None):
        self.center = tuple(center or conf.get('TRUCKLOG_DEFAULT_CENTER'))
        self.zoom = zoom if zoom is not None else int(conf.get('TRUCKLOG_DEFAULT_ZOOM'))
        self.tile_url = tile_url or conf.get('TRUCKLOG_TILE_URL')
        self.attribution = attribution or conf.get('TRUCKLOG_TILE_ATTRIBUTION')
        self._container = None
        self._map = None
        self._layers = MapLayerSet()

    @property
    def initialized(self):
        return self._map is not None

    @property
    def map(self):
        return self._map

    @property
    def layer_set(self):
        return MapLayerSet(
            markers=dict(self._layers.markers),
            route_line=self._layers.route_line,
            viewport=self._layers.viewport,
        )

    def initialize(self, container: Figure):
        if self._map is not None:
            return
        self._map = folium.Map(location=list(self.center), zoom_start=self.zoom, tiles=None)
        folium.TileLayer(tiles=self.tile_url, attr=self.attribution).add_to(self._map)
        self._map.add_to(container)
        self._container = container
        logger.debug("Map %s created at %s zoom %d", self._map.get_name(), self.center, self.zoom)

    def apply_route(self, points, labels):
        check_route(points)
        if self._map is None:
            raise ContractViolation("apply_route() called before initialize()")

        self._clear_layers()

        layers = MapLayerSet()
        for role, point in zip(ROUTE_ROLES, points):
            marker = folium.Marker(
                location=list(point),
                popup=folium.Popup(popup_text(role, labels[role])),
                icon=folium.Icon(prefix='fa', **ROLE_ICONS[role]),
            )
            marker.add_to(self._map)
            layers.markers[role] = marker

        layers.route_line = folium.PolyLine([list(p) for p in points], **ROUTE_LINE_STYLE)
        layers.route_line.add_to(self._map)

        layers.viewport = FitBounds(bounding_box(points), padding=FIT_PADDING)
        layers.viewport.add_to(self._map)

        self._layers = layers
        logger.debug("Map %s rebuilt with %d layers", self._map.get_name(), len(layers.layers()))

    def _clear_layers(self):
        for layer in self._layers.layers():
            _detach(self._map, layer)
        self._layers = MapLayerSet()

    def teardown(self):
        if self._map is None:
            return
        self._clear_layers()
        _detach(self._container, self._map)
        logger.debug("Map %s released", self._map.get_name())
        self._map = None
        self._container = None

    def render(self):
        """Embeddable HTML (an iframe) for the container, or '' before initialize()."""
        if self._container is None:
            return ''
        return self._container._repr_html_()
