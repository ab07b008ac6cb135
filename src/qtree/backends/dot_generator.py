"""
Graphviz DOT diagram generator for questionnaires.

Converts a Questionnaire into Graphviz DOT format for visualization.

Supports multiple modes:
    - SIMPLE: Question labels and parent -> child edges
    - DETAILED: Labels include type and link id
    - CLUSTERED: Groups drawn as nested clusters, no edges
"""

from enum import Enum
from typing import List, Optional

from qtree.config import DEFAULT_CONFIG
from qtree.model import Question, Questionnaire


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"        # Parent/child edges
    DETAILED = "detailed"    # Include type and link id
    CLUSTERED = "clustered"  # Groups as clusters


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    # Escape backslashes first
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def _node_id(question: Question) -> str:
    # Question ids are UUIDs or free text, always quote them
    return _escape_dot_string(question.id)


def _label(question: Question, mode: DotMode) -> str:
    label = question.text or question.link_id
    if mode == DotMode.DETAILED:
        label = f"{label}\n[{question.type.value}] {question.link_id}"
    return _escape_dot_string(label)


def _node_line(question: Question, mode: DotMode) -> str:
    attrs = [f"label={_label(question, mode)}"]
    if question.is_group:
        attrs.append("fillcolor=lightgrey")
    return f"{_node_id(question)} [{', '.join(attrs)}];"


def _emit_edges(questions: List[Question], mode: DotMode, lines: List[str]) -> None:
    for q in questions:
        lines.append(f"  {_node_line(q, mode)}")
        for child in q.questions:
            lines.append(f"  {_node_id(q)} -> {_node_id(child)};")
        _emit_edges(q.questions, mode, lines)


def _emit_clusters(questions: List[Question], depth: int, lines: List[str]) -> None:
    pad = "  " * depth
    for q in questions:
        if q.is_group:
            lines.append(f'{pad}subgraph "cluster_{q.id}" {{')
            lines.append(f'{pad}  label={_escape_dot_string(q.text or q.link_id)};')
            lines.append(f'{pad}  style=filled;')
            lines.append(f'{pad}  color=lightgrey;')
            if not q.questions:
                # Graphviz drops empty clusters
                lines.append(f'{pad}  {_escape_dot_string(q.id + ":empty")} [label="", style=invis];')
            _emit_clusters(q.questions, depth + 1, lines)
            lines.append(f"{pad}}}")
        else:
            lines.append(f"{pad}{_node_line(q, DotMode.CLUSTERED)}")


def generate_dot(questionnaire: Questionnaire, mode: DotMode = DotMode.SIMPLE,
                 rankdir: Optional[str] = None) -> str:
    """
    Generate Graphviz DOT format for a questionnaire.

    Args:
        questionnaire: Questionnaire to visualize
        mode: Visualization mode (SIMPLE, DETAILED, CLUSTERED)
        rankdir: Layout direction (defaults to DEFAULT_CONFIG.dot_rankdir)

    Returns:
        String containing DOT graph definition
    """
    lines = []

    # Header
    lines.append("digraph questionnaire {")
    lines.append(f"  rankdir={rankdir or DEFAULT_CONFIG.dot_rankdir};")
    lines.append(f"  label={_escape_dot_string(questionnaire.title)};")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    if mode == DotMode.CLUSTERED:
        _emit_clusters(questionnaire.questions, 1, lines)
    else:
        _emit_edges(questionnaire.questions, mode, lines)

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(questionnaire: Questionnaire, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        questionnaire: Questionnaire to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(questionnaire, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
