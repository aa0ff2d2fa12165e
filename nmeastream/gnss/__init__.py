"""GNSS module for streaming NMEA 0183 data from gpsd into a parser."""

from nmeastream.gnss.reader import GNSSReader
from nmeastream.gnss.types import GNSSData

__all__ = ["GNSSData", "GNSSReader"]
