"""
Tests for node identity generation.
"""

import uuid

from qtree.identity import copy_link_id, is_copied_link_id, new_question_id


class TestNewQuestionId:
    """Test fresh question ids."""

    def test_is_uuid4(self):
        value = new_question_id()
        assert uuid.UUID(value).version == 4

    def test_unique(self):
        ids = {new_question_id() for _ in range(200)}
        assert len(ids) == 200


class TestCopyLinkId:
    """Test link ids for copied questions."""

    def test_keeps_source_prefix(self):
        assert copy_link_id("vitals").startswith("vitals-copy-")

    def test_marked_as_copy(self):
        assert is_copied_link_id(copy_link_id("vitals"))

    def test_rapid_copies_are_distinct(self):
        """Copies issued back to back still get different link ids."""
        link_ids = [copy_link_id("Q1") for _ in range(100)]
        assert len(set(link_ids)) == 100

    def test_custom_marker(self):
        link_id = copy_link_id("Q1", marker="dup")
        assert link_id.startswith("Q1-dup-")
        assert is_copied_link_id(link_id, marker="dup")
        assert not is_copied_link_id(link_id)

    def test_copy_of_copy(self):
        twice = copy_link_id(copy_link_id("Q1"))
        assert twice.startswith("Q1-copy-")
        assert is_copied_link_id(twice)


def test_plain_link_id_not_a_copy():
    assert not is_copied_link_id("vitals")
    assert not is_copied_link_id("copy")
    assert not is_copied_link_id("vitals-copy-")
