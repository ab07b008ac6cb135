"""
Indented text outline of a question forest.

Renders the tree the way the destination picker shows it: one line per
question, indented per nesting level. Groups carry an expand marker
("-" expanded, "+" collapsed); leaves get a blank marker. Selected
questions are marked with "[x]". Children of collapsed groups are hidden.
"""

from typing import Collection, List, Optional

from qtree.config import DEFAULT_CONFIG
from qtree.model import Question


def _render(questions: List[Question], level: int, selected_ids: Collection[str],
            expanded_ids: Optional[Collection[str]], indent: str, lines: List[str]) -> None:
    for q in questions:
        has_children = bool(q.questions)
        expanded = has_children and (expanded_ids is None or q.id in expanded_ids)
        if has_children:
            toggle = "-" if expanded else "+"
        else:
            toggle = " "
        check = "[x]" if q.id in selected_ids else "[ ]"
        label = q.text or q.link_id
        lines.append(f"{indent * level}{toggle} {check} {label} ({q.type.value})")
        if expanded:
            _render(q.questions, level + 1, selected_ids, expanded_ids, indent, lines)


def render_outline(
    questions: List[Question],
    selected_ids: Collection[str] = (),
    expanded_ids: Optional[Collection[str]] = None,
    indent: Optional[str] = None,
) -> str:
    """
    Render a forest as an indented outline.

    Args:
        questions: Forest to render
        selected_ids: Ids to mark as selected
        expanded_ids: Ids of expanded questions; None expands everything
        indent: Indent unit per level (defaults to DEFAULT_CONFIG.outline_indent)

    Returns:
        The outline, one question per line
    """
    lines: List[str] = []
    _render(questions, 0, selected_ids, expanded_ids,
            indent or DEFAULT_CONFIG.outline_indent, lines)
    return "\n".join(lines)
