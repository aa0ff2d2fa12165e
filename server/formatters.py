"""JSON formatting utilities for parser output."""

import json

from nmeastream import GNSSData, NMEAParser

__all__ = ["format_gnss_message", "format_stats"]


def format_gnss_message(data: GNSSData) -> str:
    """Serialize a GNSS snapshot into a JSON string for WebSocket transmission."""
    return json.dumps({
        "type": "gnss",
        "lat": data.latitude_degrees,
        "lon": data.longitude_degrees,
        "alt": data.altitude_meters,
        "num_satellites": data.num_satellites,
        "hdop": data.horizontal_dilution_of_precision,
        "utc_time": data.utc_time,
        "utc_date": data.utc_date,
        "speed_ms": data.speed_meters_per_second,
        "course_degrees": data.course_degrees,
        "valid": data.valid,
    })


def format_stats(gps: NMEAParser) -> dict[str, int]:
    """Collect the parser's running counters."""
    return {
        "chars_processed": gps.chars_processed,
        "sentences_with_fix": gps.sentences_with_fix,
        "passed_checksum": gps.passed_checksum,
        "failed_checksum": gps.failed_checksum,
    }
