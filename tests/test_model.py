"""
Tests for qtree Core Model Objects

These tests verify:
    - Question type tags and the container flag
    - Question creation and defaults
    - Questionnaire lookups at every depth
"""

import pytest
from qtree.model import Question, QuestionType, Questionnaire
from qtree.examples import build_example_questionnaire
from qtree.model import count_questions as model_count_questions
from qtree.query import count_questions as query_count_questions


class TestQuestionType:
    """Test the closed set of question kinds."""

    def test_only_group_is_container(self):
        """Exactly one variant marks a container."""
        containers = [t for t in QuestionType if t.is_container]
        assert containers == [QuestionType.GROUP]

    def test_lookup_by_value(self):
        """Should resolve types from their wire values."""
        assert QuestionType("group") is QuestionType.GROUP
        assert QuestionType("dateTime") is QuestionType.DATETIME

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            QuestionType("signature")


class TestQuestion:
    """Test Question objects."""

    def test_minimal_question(self):
        """Should create a leaf with defaults."""
        q = Question(id="q1", link_id="Q1", type=QuestionType.TEXT)
        assert q.text == ""
        assert q.questions == []
        assert q.required is None
        assert q.repeats is None
        assert q.extra == {}
        assert not q.is_group

    def test_group_with_children(self):
        child = Question(id="q1", link_id="Q1", type=QuestionType.STRING, text="Name")
        group = Question(id="g1", link_id="G1", type=QuestionType.GROUP, questions=[child])
        assert group.is_group
        assert group.questions[0] is child

    def test_default_children_not_shared(self):
        """Each question owns its own children list."""
        a = Question(id="a", link_id="a", type=QuestionType.GROUP)
        b = Question(id="b", link_id="b", type=QuestionType.GROUP)
        a.questions.append(Question(id="c", link_id="c", type=QuestionType.TEXT))
        assert b.questions == []

    def test_structural_equality(self):
        a = Question(id="q1", link_id="Q1", type=QuestionType.TEXT, text="x")
        b = Question(id="q1", link_id="Q1", type=QuestionType.TEXT, text="x")
        assert a == b


class TestQuestionnaire:
    """Test Questionnaire lookups."""

    def test_defaults(self):
        qn = Questionnaire(title="Empty")
        assert qn.status == "draft"
        assert qn.version == "1.0"
        assert qn.questions == []
        assert qn.count_questions() == 0

    def test_get_question_nested(self):
        """Should find questions at any depth."""
        qn = build_example_questionnaire()
        systolic = qn.get_question("q-systolic")
        assert systolic is not None
        assert systolic.link_id == "systolic"

    def test_get_question_missing(self):
        qn = build_example_questionnaire()
        assert qn.get_question("nope") is None

    def test_get_question_by_link_id(self):
        qn = build_example_questionnaire()
        bp = qn.get_question_by_link_id("bp")
        assert bp is not None
        assert bp.id == "grp-bp"

    def test_count_questions(self):
        """Counts every node, groups included."""
        qn = build_example_questionnaire()
        # vitals, pulse, bp, systolic, diastolic, temp, history, smoker, allergies, note
        assert qn.count_questions() == 10

    def test_count_matches_query_helper(self):
        """The method and the query helper are the same function."""
        qn = build_example_questionnaire()
        assert query_count_questions is model_count_questions
        assert qn.count_questions() == query_count_questions(qn.questions)
