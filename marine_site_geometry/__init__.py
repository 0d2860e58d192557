"""Marine Licensing site geometry.

Coordinate handling behind the site details map: British National Grid
to WGS 84 conversion, geographic circles for point-and-width sites,
polygon assembly for boundary sites, and the map view fitting policy.
"""

__version__ = "0.1.0"
