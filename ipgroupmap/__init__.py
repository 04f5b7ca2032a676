"""Map and table of synthetic IP geolocations split into three arbitrary groups."""

__version__ = '0.1.0'
