"""
Read-only traversals over a question forest.

IMPORTANT: Nothing in this module modifies its input. Functions that return
questions either return the original objects (lookups) or freshly shaped
copies (extract_group_questions).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List, Optional, Set

from qtree.model import Question, count_questions, iter_questions


logger = logging.getLogger(__name__)


def collect_ids(questions: Iterable[Question]) -> Set[str]:
    return {q.id for q in iter_questions(questions)}


def find_question(questions: Iterable[Question], question_id: str) -> Optional[Question]:
    for question in iter_questions(questions):
        if question.id == question_id:
            return question
    return None


def find_question_by_link_id(questions: Iterable[Question], link_id: str) -> Optional[Question]:
    for question in iter_questions(questions):
        if question.link_id == link_id:
            return question
    return None


def find_question_path(questions: List[Question], link_id: str) -> Optional[List[Question]]:
    """
    Find the chain of questions from a root down to the question with link_id.

    Only group questions are descended into. The returned list starts at the
    root and ends with the matching question itself.

    Returns:
        List of questions, or None if no reachable question has that link id
    """
    for question in questions:
        if question.link_id == link_id:
            return [question]
        if question.is_group and question.questions:
            sub_path = find_question_path(question.questions, link_id)
            if sub_path is not None:
                return [question] + sub_path
    return None


def extract_group_questions(questions: List[Question]) -> List[Question]:
    """
    Keep only group questions, at every level.

    Each returned group is a copy of the original whose children are
    filtered by the same rule: non-group descendants are dropped at every
    depth, nested groups are kept in order. Non-group roots are omitted.

    Example:
        [g1(t1, g2()), t2]  ->  [g1(g2())]

    Used to offer the only valid destinations for a move or copy.
    """
    return [
        dataclasses.replace(q, questions=extract_group_questions(q.questions))
        for q in questions
        if q.is_group
    ]


def extract_questions_by_ids(selected_ids: Set[str], questions: List[Question]) -> List[Question]:
    """
    Collect every question whose id is in selected_ids, at any depth.

    Order is depth-first, parent before children, left to right. A matched
    question is returned whole, children included. The walk descends into
    every question's children whether or not the question itself matched, so
    a selected descendant of a selected group appears twice: nested inside
    its group, and again as its own entry right after it.

    Args:
        selected_ids: Ids to look for
        questions: The forest to search

    Returns:
        Matching questions (the original objects, not copies)
    """
    if not selected_ids:
        return []
    result: List[Question] = []
    _collect_selected(selected_ids, questions, result)
    logger.debug("Selection of %d ids matched %d questions", len(selected_ids), len(result))
    return result


def _collect_selected(selected_ids: Set[str], questions: List[Question], result: List[Question]) -> None:
    for question in questions:
        if question.id in selected_ids:
            result.append(question)
        if question.questions:
            _collect_selected(selected_ids, question.questions, result)


__all__ = [
    "iter_questions",
    "count_questions",
    "collect_ids",
    "find_question",
    "find_question_by_link_id",
    "find_question_path",
    "extract_group_questions",
    "extract_questions_by_ids",
]
