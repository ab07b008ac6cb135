"""
Structural edits over a question forest.

Every function here is a pure transformation: it takes a forest snapshot and
returns a new one. Questions that an edit does not touch are shared between
the input and the output; questions on the path of a change are shallow
copies carrying a new `questions` list. No input object is modified.

PRECONDITIONS (not checked here):
    - Ids are unique across the forest
    - A move destination is not one of the moved questions or inside them
    - A move destination exists; otherwise the moved questions are dropped
The editor layer enforces the last two before calling in.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from qtree.identity import copy_link_id, new_question_id
from qtree.model import Question
from qtree.query import extract_questions_by_ids


logger = logging.getLogger(__name__)


@dataclass
class RemovalResult:
    """New forest after a removal, plus the ids that actually matched."""
    questions: List[Question]
    removed_ids: Set[str] = field(default_factory=set)


def remove_questions(questions: List[Question], selected_ids: Set[str]) -> RemovalResult:
    """
    Remove every selected question, at any depth.

    A selected question disappears together with its whole subtree. Each id
    is consumed once: the first depth-first match wins. Once every selected
    id has matched, no deeper recursion happens. Unknown ids are ignored.
    Removing all children of a group leaves the group in place with an
    empty `questions` list.

    The caller's selected_ids is not modified; the ids that matched are
    reported in RemovalResult.removed_ids.
    """
    pending = set(selected_ids)
    kept = _remove_pending(questions, pending)
    removed = set(selected_ids) - pending
    logger.debug("Removed %d of %d selected questions", len(removed), len(selected_ids))
    return RemovalResult(questions=kept, removed_ids=removed)


def _remove_pending(questions: List[Question], pending: Set[str]) -> List[Question]:
    kept: List[Question] = []
    for question in questions:
        if question.id in pending:
            pending.discard(question.id)
            continue
        if question.questions and pending:
            children = _remove_pending(question.questions, pending)
            # A deeper removal keeps the count but swaps in a filtered copy
            if len(children) != len(question.questions) or any(
                new is not old for new, old in zip(children, question.questions)
            ):
                question = dataclasses.replace(question, questions=children)
        kept.append(question)
    return kept


def add_questions_to_destination(
    questions: List[Question],
    destination_id: str,
    new_questions: List[Question],
) -> List[Question]:
    """
    Append new_questions, in order, after the children of the destination.

    Only the first depth-first match of destination_id receives them. When
    nothing matches, the forest is returned unchanged. No deduplication
    happens: whether this is half of a move or of a copy is decided entirely
    by what the caller passes in.
    """
    result, found = _insert(questions, destination_id, new_questions)
    if not found:
        logger.debug("Destination %s not found, forest unchanged", destination_id)
    return result


def _insert(
    questions: List[Question],
    destination_id: str,
    new_questions: List[Question],
) -> Tuple[List[Question], bool]:
    for index, question in enumerate(questions):
        if question.id == destination_id:
            updated = dataclasses.replace(
                question, questions=list(question.questions) + list(new_questions)
            )
        elif question.questions:
            children, found = _insert(question.questions, destination_id, new_questions)
            if not found:
                continue
            updated = dataclasses.replace(question, questions=children)
        else:
            continue
        return questions[:index] + [updated] + questions[index + 1:], True
    return list(questions), False


def copy_question_with_new_ids(question: Question, marker: Optional[str] = None) -> Question:
    """
    Clone a question and its whole subtree with fresh identities.

    Every node in the clone gets a new id and a copy-marked link id. All
    other fields are copied unchanged; the shape (order and nesting) mirrors
    the source exactly.
    """
    return dataclasses.replace(
        question,
        id=new_question_id(),
        link_id=copy_link_id(question.link_id, marker),
        questions=[copy_question_with_new_ids(child, marker) for child in question.questions],
        extra=dict(question.extra),
    )


def regenerate_ids(questions: List[Question]) -> List[Question]:
    """
    Deep-copy a forest giving every question a fresh id.

    Link ids are kept, so references between questions by link id survive.
    Used when importing a questionnaire so its ids never collide with the
    source it was taken from.
    """
    return [
        dataclasses.replace(
            q,
            id=new_question_id(),
            questions=regenerate_ids(q.questions),
            extra=dict(q.extra),
        )
        for q in questions
    ]


def move_questions(
    questions: List[Question],
    selected_ids: Set[str],
    destination_id: str,
) -> List[Question]:
    """
    Move the selected questions to the end of the destination's children.

    Captures the selection, excises it, then appends the captured questions
    to the destination. Identities and subtrees travel unchanged; relative
    order among the moved questions is kept.
    """
    moving = extract_questions_by_ids(selected_ids, questions)
    excised = remove_questions(questions, selected_ids).questions
    return add_questions_to_destination(excised, destination_id, moving)


def copy_questions(
    questions: List[Question],
    selected_ids: Set[str],
    destination_id: str,
    marker: Optional[str] = None,
) -> List[Question]:
    """
    Append fresh-identity clones of the selected questions to the destination.

    The originals stay where they are.
    """
    selected = extract_questions_by_ids(selected_ids, questions)
    copies = [copy_question_with_new_ids(q, marker) for q in selected]
    return add_questions_to_destination(questions, destination_id, copies)
