"""
Core Questionnaire Model Objects

Defines the fundamental data structures of a questionnaire question tree.

These are pure data classes representing:
    - Question types (closed set of question kinds)
    - Questions (tree nodes, possibly containers)
    - Questionnaires (root container holding the forest)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about dialogs or persistence
        - Are treated as immutable snapshots by every edit operation
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional


class QuestionType(Enum):
    """
    Closed set of question kinds.

    Exactly one variant, GROUP, marks a question as a container.
    """

    GROUP = "group"
    DISPLAY = "display"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    STRING = "string"
    TEXT = "text"
    DATE = "date"
    DATETIME = "dateTime"
    TIME = "time"
    CHOICE = "choice"
    URL = "url"
    QUANTITY = "quantity"
    STRUCTURED = "structured"

    @property
    def is_container(self) -> bool:
        return self is QuestionType.GROUP


@dataclass
class Question:
    """
    Represents a single questionnaire question, the only node type in the tree.

    Properties:
        id:
            Opaque unique identifier, assigned at creation and never reused

        link_id:
            Export/display key. Expected unique within reasonable authoring,
            used to locate a node after a structural edit.
            Examples: "Q-1700000000000", "vitals", "vitals-copy-lq3x0a"

        type:
            QuestionType tag. Only GROUP questions meaningfully hold children.

        text:
            Display label, opaque to the editor

        questions:
            Ordered child questions, owned exclusively by this question.
            Empty for leaves.

        required / repeats:
            Authoring flags, copied unchanged by every edit

        extra:
            Any other authoring fields (enable_when, answer_option, ...).
            Carried through edits and serialization untouched.

    ARCHITECTURAL RULE:
        - Non-group questions should not have children. This is NOT enforced
          here; the analyzer reports it.
    """

    id: str
    link_id: str
    type: QuestionType
    text: str = ""
    questions: List["Question"] = field(default_factory=list)
    required: Optional[bool] = None
    repeats: Optional[bool] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_group(self) -> bool:
        return self.type.is_container


def iter_questions(questions: Iterable[Question]) -> Iterator[Question]:
    """Depth-first, parent-before-children iteration over every question."""
    for question in questions:
        yield question
        if question.questions:
            yield from iter_questions(question.questions)


def count_questions(questions: Iterable[Question]) -> int:
    return sum(1 for _ in iter_questions(questions))


@dataclass
class Questionnaire:
    """
    Root container for a questionnaire definition.

    Properties:
        title: Human-readable title
        slug: URL-safe identifier
        description: Free text (optional)
        status: Publication status, "draft" for newly authored forms
        version: Version string
        questions: The forest, an ordered sequence of root questions

    INVARIANTS:
        - The forest has no cycles and no shared ownership
        - Every non-root question has exactly one parent
    """

    title: str
    slug: str = ""
    description: Optional[str] = None
    status: str = "draft"
    version: str = "1.0"
    questions: List[Question] = field(default_factory=list)

    def get_question(self, question_id: str) -> Optional[Question]:
        """
        Retrieve a question by id, searching at every depth.

        Args:
            question_id: Question identifier

        Returns:
            Question object or None if not found
        """
        for question in iter_questions(self.questions):
            if question.id == question_id:
                return question
        return None

    def get_question_by_link_id(self, link_id: str) -> Optional[Question]:
        """Retrieve the first question (depth-first) with the given link id."""
        for question in iter_questions(self.questions):
            if question.link_id == link_id:
                return question
        return None

    def count_questions(self) -> int:
        return count_questions(self.questions)
