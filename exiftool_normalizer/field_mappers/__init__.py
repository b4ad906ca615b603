"""Value converter modules for exiftool metadata normalization.

Modules:
    map_exposure: Aperture, exposure time, focal length, focus distance
    map_dates: Creation date
    map_gps: GPS coordinate extraction and pair resolution
"""

__all__ = [
    "map_exposure",
    "map_dates",
    "map_gps",
]
