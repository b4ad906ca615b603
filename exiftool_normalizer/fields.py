"""Field vocabularies for exiftool metadata normalization.

Two vocabularies meet here: the raw field names emitted by exiftool and the
canonical field names understood by the downstream image metadata record.
``FIELD_MAP`` translates the former into the latter.
"""

from enum import Enum


class ExifField(str, Enum):
    """Canonical field names of the normalized image metadata record."""

    APERTURE = "aperture"
    AUTHOR = "author"
    CAMERA = "camera"
    CAPTION = "caption"
    COLORSPACE = "ColorSpace"
    COPYRIGHT = "copyright"
    CREATION_DATE = "creationdate"
    CREDIT = "credit"
    EXPOSURE = "exposure"
    FILESIZE = "FileSize"
    FOCAL_LENGTH = "focalLength"
    FOCAL_DISTANCE = "focalDistance"
    GPS = "gps"
    HEADLINE = "headline"
    HEIGHT = "height"
    HORIZONTAL_RESOLUTION = "horizontalResolution"
    ISO = "iso"
    JOB_TITLE = "jobTitle"
    KEYWORDS = "keywords"
    MIMETYPE = "MimeType"
    ORIENTATION = "Orientation"
    SOFTWARE = "software"
    SOURCE = "source"
    TITLE = "title"
    VERTICAL_RESOLUTION = "verticalResolution"
    WIDTH = "width"


CANONICAL_FIELDS = frozenset(member.value for member in ExifField)

# exiftool field names
APERTURE = "Aperture"
APPROXIMATE_FOCUS_DISTANCE = "ApproximateFocusDistance"
ARTIST = "Artist"
CAPTION = "Caption"
CAPTION_ABSTRACT = "Caption-Abstract"
COLORSPACE = "ColorSpace"
COPYRIGHT = "Copyright"
CREATE_DATE = "CreateDate"
CREDIT = "Credit"
EXPOSURE_TIME = "ExposureTime"
FILESIZE = "FileSize"
FOCAL_LENGTH = "FocalLength"
HEADLINE = "Headline"
IMAGE_HEIGHT = "ImageHeight"
IMAGE_WIDTH = "ImageWidth"
ISO = "ISO"
JOB_TITLE = "JobTitle"
KEYWORDS = "Keywords"
MIMETYPE = "MIMEType"
MODEL = "Model"
ORIENTATION = "Orientation"
SOFTWARE = "Software"
SOURCE = "Source"
TITLE = "Title"
X_RESOLUTION = "XResolution"
Y_RESOLUTION = "YResolution"
GPS_LATITUDE = "GPSLatitude"
GPS_LONGITUDE = "GPSLongitude"
GPS_LATITUDE_REF = "GPSLatitudeRef"
GPS_LONGITUDE_REF = "GPSLongitudeRef"

# Latitude and longitude keep their exiftool names until GPS resolution
# folds them into ExifField.GPS.
FIELD_MAP: dict[str, str] = {
    APERTURE: ExifField.APERTURE.value,
    ARTIST: ExifField.AUTHOR.value,
    MODEL: ExifField.CAMERA.value,
    CAPTION: ExifField.CAPTION.value,
    COLORSPACE: ExifField.COLORSPACE.value,
    COPYRIGHT: ExifField.COPYRIGHT.value,
    CREATE_DATE: ExifField.CREATION_DATE.value,
    CREDIT: ExifField.CREDIT.value,
    EXPOSURE_TIME: ExifField.EXPOSURE.value,
    FILESIZE: ExifField.FILESIZE.value,
    FOCAL_LENGTH: ExifField.FOCAL_LENGTH.value,
    APPROXIMATE_FOCUS_DISTANCE: ExifField.FOCAL_DISTANCE.value,
    HEADLINE: ExifField.HEADLINE.value,
    IMAGE_HEIGHT: ExifField.HEIGHT.value,
    X_RESOLUTION: ExifField.HORIZONTAL_RESOLUTION.value,
    ISO: ExifField.ISO.value,
    JOB_TITLE: ExifField.JOB_TITLE.value,
    KEYWORDS: ExifField.KEYWORDS.value,
    MIMETYPE: ExifField.MIMETYPE.value,
    ORIENTATION: ExifField.ORIENTATION.value,
    SOFTWARE: ExifField.SOFTWARE.value,
    SOURCE: ExifField.SOURCE.value,
    TITLE: ExifField.TITLE.value,
    Y_RESOLUTION: ExifField.VERTICAL_RESOLUTION.value,
    IMAGE_WIDTH: ExifField.WIDTH.value,
    CAPTION_ABSTRACT: ExifField.CAPTION.value,
    GPS_LATITUDE: GPS_LATITUDE,
    GPS_LONGITUDE: GPS_LONGITUDE,
}
