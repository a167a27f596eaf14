#!/usr/bin/env python3
import unittest
from datetime import datetime, timezone

from webhook_sms.formatters import (
    format_candidate_message,
    format_iso_timestamp,
    format_local_timestamp,
)
from webhook_sms.parsing import CandidateInfo

NOW = datetime(2026, 3, 5, 14, 7, 9)


class TestTimestamps(unittest.TestCase):
    def test_local_timestamp_pm(self):
        self.assertEqual(format_local_timestamp(NOW), "3/5/2026, 2:07:09 PM")

    def test_local_timestamp_midnight_and_noon(self):
        self.assertEqual(format_local_timestamp(datetime(2026, 12, 31, 0, 0, 1)), "12/31/2026, 12:00:01 AM")
        self.assertEqual(format_local_timestamp(datetime(2026, 1, 1, 12, 30, 0)), "1/1/2026, 12:30:00 PM")

    def test_iso_timestamp(self):
        ts = format_iso_timestamp(datetime(2026, 3, 5, 14, 7, 9, 123456, tzinfo=timezone.utc))
        self.assertEqual(ts, "2026-03-05T14:07:09.123Z")


class TestCandidateMessage(unittest.TestCase):
    def test_with_email(self):
        info = CandidateInfo(name="Ada", job_title="Engineer", email="ada@example.com")
        self.assertEqual(
            format_candidate_message(info, NOW),
            "🔔 New candidate applied!\n\n"
            "Name: Ada\n"
            "Position: Engineer\n"
            "Email: ada@example.com\n\n"
            "Time: 3/5/2026, 2:07:09 PM",
        )

    def test_without_email(self):
        info = CandidateInfo(name="Ada", job_title="Engineer")
        message = format_candidate_message(info, NOW)
        self.assertNotIn("Email:", message)
        self.assertTrue(message.endswith("Position: Engineer\n\nTime: 3/5/2026, 2:07:09 PM"))


if __name__ == "__main__":
    unittest.main()
