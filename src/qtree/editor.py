"""
Selection-aware editing session over a question forest.

QuestionTreeEditor holds the state the authoring dialog keeps: the current
forest and the set of selected question ids. It validates a requested edit,
runs the pure operations from qtree.mutation, replaces its forest with the
result and reports what happened so the caller can expand and focus the
destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Set

from qtree.config import DEFAULT_CONFIG, EditorConfig
from qtree.errors import DestinationNotFoundError, InvalidDestinationError
from qtree.model import Question
from qtree.mutation import copy_questions, move_questions, remove_questions
from qtree.query import (
    collect_ids,
    extract_group_questions,
    extract_questions_by_ids,
    find_question,
    find_question_path,
)


logger = logging.getLogger(__name__)


class EditAction(Enum):
    MOVE = "move"
    COPY = "copy"
    REMOVE = "remove"


@dataclass
class EditResult:
    """
    Outcome of one editor action.

    Properties:
        action: Which edit was requested
        changed: False when the request was a no-op (nothing selected,
            no destination given, or no selected id matched)
        questions: The forest after the edit
        affected_ids: Ids of the selected questions the edit applied to
        destination_link_id: Link id of the destination, for focusing it
        expand_path: Link ids from a root down to the destination
    """

    action: EditAction
    changed: bool
    questions: List[Question]
    affected_ids: Set[str] = field(default_factory=set)
    destination_link_id: Optional[str] = None
    expand_path: List[str] = field(default_factory=list)


class QuestionTreeEditor:
    """
    Editing session for one questionnaire's question forest.

    Example:
        >>> editor = QuestionTreeEditor(questions)
        >>> editor.select("q1")
        >>> result = editor.move_selected("g2")
        >>> result.destination_link_id
        'g2-link'
    """

    def __init__(self, questions: List[Question], config: EditorConfig = DEFAULT_CONFIG):
        self.questions = list(questions)
        self.config = config
        self._selected: Set[str] = set()

    # =========================================================================
    # SELECTION
    # =========================================================================

    @property
    def selected_ids(self) -> Set[str]:
        return set(self._selected)

    def select(self, *question_ids: str) -> None:
        self._selected.update(question_ids)

    def deselect(self, question_id: str) -> None:
        self._selected.discard(question_id)

    def toggle(self, question_id: str) -> None:
        if question_id in self._selected:
            self._selected.discard(question_id)
        else:
            self._selected.add(question_id)

    def clear_selection(self) -> None:
        self._selected.clear()

    def selected_questions(self) -> List[Question]:
        return extract_questions_by_ids(self._selected, self.questions)

    def destination_choices(self) -> List[Question]:
        """Group-only view of the forest: the only valid destinations."""
        return extract_group_questions(self.questions)

    # =========================================================================
    # EDITS
    # =========================================================================

    def move_selected(self, destination_id: str) -> EditResult:
        """
        Move the selected questions under the destination group.

        Raises:
            DestinationNotFoundError: destination id is not in the forest
            InvalidDestinationError: destination is not a group, or is one of
                the selected questions or nested inside one
        """
        selected = self.selected_questions()
        if not destination_id or not selected:
            return self._unchanged(EditAction.MOVE)

        destination = self._resolve_destination(destination_id)
        moving_ids = collect_ids(selected)
        if destination.id in moving_ids:
            raise InvalidDestinationError(
                f"Cannot move questions into themselves: {destination.link_id}"
            )

        self.questions = move_questions(self.questions, self._selected, destination_id)
        return self._finish(EditAction.MOVE, selected, destination)

    def copy_selected(self, destination_id: str) -> EditResult:
        """
        Copy the selected questions, with fresh ids, under the destination group.

        Copying into a group that is itself selected is allowed: the clones
        are built before they are inserted.

        Raises:
            DestinationNotFoundError: destination id is not in the forest
            InvalidDestinationError: destination is not a group
        """
        selected = self.selected_questions()
        if not destination_id or not selected:
            return self._unchanged(EditAction.COPY)

        destination = self._resolve_destination(destination_id)
        self.questions = copy_questions(
            self.questions, self._selected, destination_id, marker=self.config.copy_marker
        )
        return self._finish(EditAction.COPY, selected, destination)

    def remove_selected(self) -> EditResult:
        """Remove the selected questions; matched ids leave the selection."""
        if not self._selected:
            return self._unchanged(EditAction.REMOVE)

        removal = remove_questions(self.questions, self._selected)
        if not removal.removed_ids:
            return self._unchanged(EditAction.REMOVE)

        self.questions = removal.questions
        self._selected -= removal.removed_ids
        logger.info("Removed %d questions", len(removal.removed_ids))
        return EditResult(
            action=EditAction.REMOVE,
            changed=True,
            questions=self.questions,
            affected_ids=set(removal.removed_ids),
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _resolve_destination(self, destination_id: str) -> Question:
        destination = find_question(self.questions, destination_id)
        if destination is None:
            raise DestinationNotFoundError(destination_id)
        if not destination.is_group:
            raise InvalidDestinationError(
                f"Destination must be a group question, got {destination.type.value}: "
                f"{destination.link_id}"
            )
        return destination

    def _unchanged(self, action: EditAction) -> EditResult:
        logger.debug("Nothing to %s", action.value)
        return EditResult(action=action, changed=False, questions=self.questions)

    def _finish(self, action: EditAction, selected: Iterable[Question], destination: Question) -> EditResult:
        affected = {q.id for q in selected}
        path = find_question_path(self.questions, destination.link_id) or []
        self._selected.clear()
        logger.info(
            "%s %d questions to %s",
            "Moved" if action is EditAction.MOVE else "Copied",
            len(affected),
            destination.link_id,
        )
        return EditResult(
            action=action,
            changed=True,
            questions=self.questions,
            affected_ids=affected,
            destination_link_id=destination.link_id,
            expand_path=[q.link_id for q in path],
        )
