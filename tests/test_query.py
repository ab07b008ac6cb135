"""
Tests for read-only question tree traversals.
"""

import copy

from qtree.model import Question, QuestionType
from qtree.examples import build_example_questionnaire
from qtree.query import (
    collect_ids,
    count_questions,
    extract_group_questions,
    extract_questions_by_ids,
    find_question,
    find_question_by_link_id,
    find_question_path,
    iter_questions,
)


def group(qid, *children):
    return Question(id=qid, link_id=qid, type=QuestionType.GROUP, questions=list(children))


def leaf(qid, qtype=QuestionType.TEXT):
    return Question(id=qid, link_id=qid, type=qtype)


class TestIteration:
    """Test depth-first iteration helpers."""

    def test_preorder(self):
        forest = [group("g1", leaf("a"), group("g2", leaf("b"))), leaf("c")]
        assert [q.id for q in iter_questions(forest)] == ["g1", "a", "g2", "b", "c"]

    def test_count_and_ids(self):
        forest = [group("g1", leaf("a"), group("g2", leaf("b"))), leaf("c")]
        assert count_questions(forest) == 5
        assert collect_ids(forest) == {"g1", "a", "g2", "b", "c"}

    def test_empty_forest(self):
        assert list(iter_questions([])) == []
        assert count_questions([]) == 0


class TestLookups:
    """Test single-question lookups."""

    def test_find_question(self):
        forest = [group("g1", group("g2", leaf("deep")))]
        assert find_question(forest, "deep").id == "deep"
        assert find_question(forest, "missing") is None

    def test_find_by_link_id_first_match(self):
        """Depth-first, first match wins."""
        a = Question(id="a", link_id="dup", type=QuestionType.TEXT)
        b = Question(id="b", link_id="dup", type=QuestionType.TEXT)
        forest = [group("g1", a), b]
        assert find_question_by_link_id(forest, "dup") is a

    def test_find_question_path(self):
        qn = build_example_questionnaire()
        path = find_question_path(qn.questions, "systolic")
        assert [q.link_id for q in path] == ["vitals", "bp", "systolic"]

    def test_find_question_path_root(self):
        qn = build_example_questionnaire()
        path = find_question_path(qn.questions, "note")
        assert [q.link_id for q in path] == ["note"]

    def test_find_question_path_missing(self):
        qn = build_example_questionnaire()
        assert find_question_path(qn.questions, "nope") is None

    def test_find_question_path_skips_non_group_children(self):
        """Children hanging off a non-group question are not searched."""
        odd = Question(id="t", link_id="t", type=QuestionType.TEXT, questions=[leaf("hidden")])
        assert find_question_path([odd], "hidden") is None


class TestExtractGroupQuestions:
    """Test the group-only view of a forest."""

    def test_reference_scenario(self):
        """Leaves dropped at every level, nested group kept."""
        forest = [
            group("g1", leaf("t1"), group("g2")),
            leaf("t2"),
        ]
        result = extract_group_questions(forest)
        assert result == [group("g1", group("g2"))]

    def test_order_preserved(self):
        forest = [group("a"), leaf("x"), group("b", group("b1"), leaf("y"), group("b2"))]
        result = extract_group_questions(forest)
        assert [q.id for q in result] == ["a", "b"]
        assert [q.id for q in result[1].questions] == ["b1", "b2"]

    def test_input_untouched(self):
        forest = [group("g1", leaf("t1"), group("g2", leaf("t3")))]
        before = copy.deepcopy(forest)
        result = extract_group_questions(forest)
        assert forest == before
        assert result[0] is not forest[0]

    def test_fields_reused(self):
        g = Question(id="g1", link_id="G1", type=QuestionType.GROUP, text="Vitals",
                     required=True, extra={"styling_metadata": {"layout": "grid"}})
        [result] = extract_group_questions([g])
        assert result.link_id == "G1"
        assert result.text == "Vitals"
        assert result.required is True
        assert result.extra == {"styling_metadata": {"layout": "grid"}}

    def test_no_groups(self):
        assert extract_group_questions([leaf("a"), leaf("b")]) == []


class TestExtractQuestionsBySelection:
    """Test collecting selected questions."""

    def test_any_depth_in_document_order(self):
        forest = [group("g1", leaf("a"), group("g2", leaf("b"))), leaf("c")]
        result = extract_questions_by_ids({"c", "b", "a"}, forest)
        assert [q.id for q in result] == ["a", "b", "c"]

    def test_selected_group_returned_whole(self):
        forest = [group("g1", leaf("a"), leaf("b"))]
        [result] = extract_questions_by_ids({"g1"}, forest)
        assert result is forest[0]
        assert [q.id for q in result.questions] == ["a", "b"]

    def test_nested_selection_emits_descendant_again(self):
        """A selected child of a selected group appears nested and on its own."""
        forest = [group("g1", leaf("a"), leaf("b"))]
        result = extract_questions_by_ids({"g1", "b"}, forest)
        assert [q.id for q in result] == ["g1", "b"]
        assert result[1] is forest[0].questions[1]

    def test_unknown_ids_ignored(self):
        forest = [group("g1", leaf("a"))]
        assert extract_questions_by_ids({"zzz"}, forest) == []

    def test_empty_selection(self):
        forest = [group("g1", leaf("a"))]
        assert extract_questions_by_ids(set(), forest) == []
