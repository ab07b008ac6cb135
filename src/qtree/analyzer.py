"""
Questionnaire Analyzer: structural diagnostics for question trees.

This module provides lightweight analysis of Questionnaire objects:
    - Question inventory (totals, per-type counts, depth)
    - Identity problems (duplicate ids and link ids)
    - Shape problems (children under non-group questions, empty groups)
    - Copies that still carry a generated link id

IMPORTANT: It does NOT modify the questionnaire. It only produces
read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from qtree.identity import is_copied_link_id
from qtree.model import Question, Questionnaire


@dataclass
class TreeReport:
    """Structural analysis report for a questionnaire."""

    title: str
    total_questions: int = 0
    total_groups: int = 0
    total_leaves: int = 0
    root_count: int = 0
    max_depth: int = 0

    type_counts: Dict[str, int] = field(default_factory=dict)

    # Identity
    duplicate_ids: Set[str] = field(default_factory=set)
    duplicate_link_ids: Set[str] = field(default_factory=set)
    copied_link_ids: List[str] = field(default_factory=list)

    # Shape
    non_group_with_children: List[str] = field(default_factory=list)
    empty_groups: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _walk(questions: List[Question], depth: int, report: TreeReport,
          ids: Counter, link_ids: Counter, marker: Optional[str]) -> None:
    for q in questions:
        report.total_questions += 1
        report.max_depth = max(report.max_depth, depth)
        report.type_counts[q.type.value] = report.type_counts.get(q.type.value, 0) + 1
        ids[q.id] += 1
        link_ids[q.link_id] += 1

        if q.is_group:
            report.total_groups += 1
            if not q.questions:
                report.empty_groups.append(q.link_id)
        else:
            report.total_leaves += 1
            if q.questions:
                report.non_group_with_children.append(q.link_id)

        if is_copied_link_id(q.link_id, marker):
            report.copied_link_ids.append(q.link_id)

        if q.questions:
            _walk(q.questions, depth + 1, report, ids, link_ids, marker)


def analyze_questionnaire(questionnaire: Questionnaire, marker: Optional[str] = None) -> TreeReport:
    """
    Perform structural analysis of a Questionnaire.

    Depth counts roots as depth 1; an empty questionnaire has depth 0.
    marker is the copy marker used to spot copied link ids (defaults to
    DEFAULT_CONFIG.copy_marker).

    Returns a TreeReport with metrics and warnings.
    """
    report = TreeReport(title=questionnaire.title)
    report.root_count = len(questionnaire.questions)

    ids: Counter = Counter()
    link_ids: Counter = Counter()
    _walk(questionnaire.questions, 1, report, ids, link_ids, marker)

    report.duplicate_ids = {k for k, n in ids.items() if n > 1}
    report.duplicate_link_ids = {k for k, n in link_ids.items() if n > 1}

    if report.duplicate_ids:
        report.add_warning(
            f"Duplicate question ids: {', '.join(sorted(report.duplicate_ids))}"
        )

    if report.duplicate_link_ids:
        report.add_warning(
            f"Duplicate link ids: {', '.join(sorted(report.duplicate_link_ids))}"
        )

    if report.non_group_with_children:
        report.add_warning(
            f"Non-group questions with children: {', '.join(report.non_group_with_children)}"
        )

    if report.empty_groups:
        report.add_warning(
            f"Empty groups: {', '.join(report.empty_groups)}"
        )

    return report
