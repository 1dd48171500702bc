from .http_geolocator import HttpGeoLocator

__all__ = ["HttpGeoLocator"]
