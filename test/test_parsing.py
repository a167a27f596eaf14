#!/usr/bin/env python3
import unittest

from webhook_sms.parsing import (
    event_type,
    extract_candidate_info,
    is_candidate_created,
    is_candidate_updated,
)


def _event(attributes=None, job=None, **top):
    data = {}
    if attributes is not None:
        data["attributes"] = attributes
    if job is not None:
        data["relationships"] = {"job": job}
    body = {"data": data}
    body.update(top)
    return body


class TestEventType(unittest.TestCase):
    def test_created_via_type_or_event(self):
        self.assertTrue(is_candidate_created({"type": "candidate_created"}))
        self.assertTrue(is_candidate_created({"event": "candidate_created"}))
        self.assertTrue(is_candidate_created({"type": "other", "event": "candidate_created"}))
        self.assertFalse(is_candidate_created({"type": "candidate_updated"}))

    def test_updated(self):
        self.assertTrue(is_candidate_updated({"event": "candidate_updated"}))
        self.assertFalse(is_candidate_updated({}))

    def test_non_dict_body(self):
        self.assertFalse(is_candidate_created(["candidate_created"]))
        self.assertIsNone(event_type(None))

    def test_event_type_prefers_type(self):
        self.assertEqual(event_type({"type": "a", "event": "b"}), "a")
        self.assertEqual(event_type({"type": "", "event": "b"}), "b")


class TestExtractCandidateInfo(unittest.TestCase):
    def test_full_payload(self):
        body = _event(
            attributes={"name": "Ada Lovelace", "first_name": "Ada", "email": "ada@example.com"},
            job={"data": {"attributes": {"title": "Engineer"}}},
        )
        info = extract_candidate_info(body)
        self.assertEqual(info.name, "Ada Lovelace")
        self.assertEqual(info.email, "ada@example.com")
        self.assertEqual(info.job_title, "Engineer")

    def test_first_name_fallback(self):
        info = extract_candidate_info(_event(attributes={"first_name": "Grace"}))
        self.assertEqual(info.name, "Grace")

    def test_empty_name_falls_through(self):
        info = extract_candidate_info(_event(attributes={"name": "", "first_name": "Grace"}))
        self.assertEqual(info.name, "Grace")

    def test_placeholders(self):
        info = extract_candidate_info({})
        self.assertEqual(info.name, "New candidate")
        self.assertEqual(info.job_title, "Unknown position")
        self.assertEqual(info.email, "")

    def test_malformed_job_does_not_raise(self):
        for job in ({}, {"data": None}, {"data": "x"}, "job", {"data": {"attributes": None}}):
            info = extract_candidate_info(_event(attributes={"name": "A"}, job=job))
            self.assertEqual(info.job_title, "Unknown position", f"job={job!r}")

    def test_attributes_not_a_dict(self):
        info = extract_candidate_info({"data": {"attributes": "oops"}})
        self.assertEqual(info.name, "New candidate")

    def test_non_string_values_flow_through(self):
        info = extract_candidate_info(_event(attributes={"name": 42}))
        self.assertEqual(info.name, 42)


if __name__ == "__main__":
    unittest.main()
