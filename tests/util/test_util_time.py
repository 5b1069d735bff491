import unittest
from datetime import datetime, timezone

from rmfs.util.time import parse_client_time, try_parse_client_time


class TestUtilTime(unittest.TestCase):
    def test_parse_client_time_z(self) -> None:
        dt = parse_client_time("2025-01-01T12:34:56Z")
        self.assertEqual(dt, datetime(2025, 1, 1, 12, 34, 56, tzinfo=timezone.utc))

    def test_parse_client_time_drops_fraction(self) -> None:
        dt = parse_client_time("2021-03-04T05:06:07.123456789Z")
        self.assertEqual(dt, datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone.utc))

    def test_parse_client_time_rejects_short_or_invalid(self) -> None:
        with self.assertRaises(ValueError):
            parse_client_time("2025-01-01")
        with self.assertRaises(ValueError):
            parse_client_time("not-a-timestamp-at-all")

    def test_try_parse_client_time(self) -> None:
        self.assertIsNone(try_parse_client_time(None))
        self.assertIsNone(try_parse_client_time("garbage"))
        self.assertEqual(
            try_parse_client_time("2025-01-01T00:00:00"),
            datetime(2025, 1, 1, tzinfo=timezone.utc),
        )


if __name__ == "__main__":
    unittest.main()
