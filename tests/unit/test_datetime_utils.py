"""
Testes para DateTime Utilities
"""
from datetime import datetime, timedelta, timezone

from shared.utils.datetime_utils import (
    format_day,
    format_hour,
    from_epoch_seconds,
    hour_of_day,
    week_day_index
)


class TestDateTimeUtils:
    """Testes para conversões de epoch e extração de hora/dia"""

    def test_from_epoch_seconds(self):
        moment = from_epoch_seconds(1718200800)

        assert moment == datetime(2024, 6, 12, 14, 0, tzinfo=timezone.utc)
        assert moment.tzinfo == timezone.utc

    def test_from_epoch_accepts_float(self):
        assert from_epoch_seconds(1718200800.9) == from_epoch_seconds(1718200800)

    def test_format_hour_with_timezone(self):
        moment = datetime(2024, 6, 12, 14, 35, tzinfo=timezone.utc)
        sao_paulo = timezone(timedelta(hours=-3))

        assert format_hour(moment, timezone.utc) == "14:00"
        assert format_hour(moment, sao_paulo) == "11:00"

    def test_hour_of_day(self):
        moment = datetime(2024, 6, 12, 2, 10, tzinfo=timezone.utc)

        assert hour_of_day(moment, timezone.utc) == 2
        assert hour_of_day(moment, timezone(timedelta(hours=-3))) == 23

    def test_hour_of_day_uses_host_timezone_by_default(self, host_timezone):
        """Sem tz explícito vale o fuso do host (aqui -03:00)"""
        host_timezone("BRT+3")
        moment = datetime(2024, 6, 12, 2, 10, tzinfo=timezone.utc)

        assert hour_of_day(moment) == 23
        assert format_hour(moment) == "23:00"

    def test_format_day_ignores_host_timezone(self, host_timezone):
        host_timezone("BRT+3")

        assert format_day(datetime(2024, 6, 13, 1, 0, tzinfo=timezone.utc)) == "06/13"
        assert week_day_index(datetime(2024, 6, 16, 1, 0, tzinfo=timezone.utc)) == 0

    def test_format_day_in_utc(self):
        moment = datetime(2024, 6, 12, 23, 30, tzinfo=timezone(timedelta(hours=-3)))

        assert format_day(moment) == "06/13"

    def test_week_day_index(self):
        assert week_day_index(datetime(2024, 6, 16, tzinfo=timezone.utc)) == 0  # domingo
        assert week_day_index(datetime(2024, 6, 17, tzinfo=timezone.utc)) == 1
        assert week_day_index(datetime(2024, 6, 22, tzinfo=timezone.utc)) == 6

    def test_week_day_index_ignores_offset(self):
        # Sábado 22h em -03:00 já é domingo em UTC
        moment = datetime(2024, 6, 15, 22, 0, tzinfo=timezone(timedelta(hours=-3)))

        assert week_day_index(moment) == 0
