"""NMEA data types for decoded sentences.

This module defines the generic ``Frame`` and one frozen dataclass per
supported sentence variant.

Design Decisions:
    1. Every variant embeds the ``Frame`` it was decoded from, so the raw
       sentence, its type and untouched field list stay available to callers
       that need more than the typed view.

    2. Most values are kept as the raw field text (HDOP, altitude, satellite
       count, VTG speeds). Only fields whose meaning depends on parsing are
       converted: coordinates, RMC speed/course/variation, and enumerated
       codes. An empty field stays "" rather than becoming None.

    3. Enumerations subclass ``str`` so a member compares equal to its wire
       token: ``FixQuality.GPS == "1"``.

    4. Records are frozen. A decode either yields a complete record or raises;
       there is no partially-populated result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from gpsnmea.coordinate import Coordinate

PREFIX_GPGGA = "GPGGA"
PREFIX_GPGSA = "GPGSA"
PREFIX_GPRMC = "GPRMC"
PREFIX_GPVTG = "GPVTG"
PREFIX_PSRFTXT = "PSRFTXT"


@dataclass(frozen=True)
class Frame:
    """A generically decoded sentence: envelope checked, fields split.

    Attributes:
        raw: The input string exactly as given.
        sentence_type: Token after '$', e.g. "GPRMC".
        fields: Comma-separated tokens between the sentence type and '*',
            in order. Empty tokens are kept, so ",," yields an "" field.
        checksum: Text after '*', uppercased.

    Example:
        >>> from gpsnmea import decode_frame
        >>> frame = decode_frame("$GPFOO,1,2,3.3,x,y,zz,*51")
        >>> frame.sentence_type
        'GPFOO'
        >>> frame.fields
        ('1', '2', '3.3', 'x', 'y', 'zz', '')
    """

    raw: str
    sentence_type: str
    fields: tuple[str, ...]
    checksum: str

    def __str__(self) -> str:
        return self.raw


class FixQuality(str, Enum):
    """GGA fix quality indicator."""

    INVALID = "0"
    GPS = "1"
    DGPS = "2"


class SelectionMode(str, Enum):
    """GSA 2D/3D selection mode."""

    AUTO = "A"
    MANUAL = "M"


class FixType(str, Enum):
    """GSA fix type."""

    NONE = "1"
    FIX_2D = "2"
    FIX_3D = "3"


class Status(str, Enum):
    """RMC receiver status."""

    VALID = "A"
    INVALID = "V"


@dataclass(frozen=True)
class GPGGAData:
    """Decoded GPGGA (Global Positioning System Fix Data) sentence.

    Attributes:
        frame: The generic frame this record was decoded from.
        time: UTC time of fix, HHMMSS.sss, as sent.
        latitude: Latitude, negative for South.
        longitude: Longitude, negative for West.
        fix_quality: Fix quality (invalid, GPS, DGPS).
        num_satellites: Satellites in use, as sent (e.g. "03").
        hdop: Horizontal dilution of precision, as sent.
        altitude: Altitude above mean sea level, as sent.
        separation: Geoidal separation, as sent.
        dgps_age: Age of differential data; "" when no DGPS is used.
        dgps_id: Differential reference station ID.
    """

    frame: Frame
    time: str
    latitude: Coordinate
    longitude: Coordinate
    fix_quality: FixQuality
    num_satellites: str
    hdop: str
    altitude: str
    separation: str
    dgps_age: str
    dgps_id: str


@dataclass(frozen=True)
class GPGSAData:
    """Decoded GPGSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        frame: The generic frame this record was decoded from.
        mode: Automatic or manual 2D/3D selection.
        fix_type: No fix, 2D or 3D.
        sv: PRNs of satellites used in the fix, in slot order. The wire format
            has twelve fixed slots; empty slots are left out.
        pdop: Position dilution of precision, as sent.
        hdop: Horizontal dilution of precision, as sent.
        vdop: Vertical dilution of precision, as sent.
    """

    frame: Frame
    mode: SelectionMode
    fix_type: FixType
    sv: tuple[str, ...]
    pdop: str
    hdop: str
    vdop: str


@dataclass(frozen=True)
class GPRMCData:
    """Decoded GPRMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        frame: The generic frame this record was decoded from.
        time: UTC time, HHMMSS, as sent.
        status: Valid or invalid (receiver warning).
        latitude: Latitude, negative for South.
        longitude: Longitude, negative for West.
        speed: Speed over ground in knots.
        course: Course over ground in degrees true.
        date: Date, DDMMYY, as sent.
        variation: Magnetic variation in degrees, negative when West.
    """

    frame: Frame
    time: str
    status: Status
    latitude: Coordinate
    longitude: Coordinate
    speed: float
    course: float
    date: str
    variation: float


@dataclass(frozen=True)
class GPVTGData:
    """Decoded GPVTG (Track Made Good and Ground Speed) sentence.

    Values are kept as sent; when stationary the tracks are usually empty.

    Attributes:
        frame: The generic frame this record was decoded from.
        true_track: Track relative to true north, degrees.
        magnetic_track: Track relative to magnetic north, degrees.
        speed_knots: Ground speed in knots.
        speed_kph: Ground speed in km/h.
    """

    frame: Frame
    true_track: str
    magnetic_track: str
    speed_knots: str
    speed_kph: str


@dataclass(frozen=True)
class PSRFTXTData:
    """Decoded PSRFTXT (SiRF proprietary text) sentence."""

    frame: Frame
    text: str


Sentence: TypeAlias = (
    Frame | GPGGAData | GPGSAData | GPRMCData | GPVTGData | PSRFTXTData
)
