"""Helper factories for server tests."""

from nmeastream import GNSSData


def make_gnss(valid: bool) -> GNSSData:
    if not valid:
        return GNSSData(
            latitude_degrees=None,
            longitude_degrees=None,
            altitude_meters=None,
            speed_meters_per_second=None,
            course_degrees=None,
            num_satellites=0,
            horizontal_dilution_of_precision=None,
            utc_time="120000.00",
            utc_date=None,
            valid=False,
        )
    return GNSSData(
        latitude_degrees=45.0,
        longitude_degrees=9.0,
        altitude_meters=100.0,
        speed_meters_per_second=2.3,
        course_degrees=12.3,
        num_satellites=8,
        horizontal_dilution_of_precision=1.0,
        utc_time="120000.00",
        utc_date="010125",
        valid=True,
    )
