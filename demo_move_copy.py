#!/usr/bin/env python3
"""
Demo: Move and copy questions between groups.

Shows the destination picker view, a move, a copy, and the structural
report afterwards.
"""

import logging

from qtree.analyzer import analyze_questionnaire
from qtree.backends import render_outline
from qtree.editor import QuestionTreeEditor
from qtree.examples import build_example_questionnaire


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    questionnaire = build_example_questionnaire()
    editor = QuestionTreeEditor(questionnaire.questions)

    print("=" * 80)
    print("QUESTION TREE EDITOR DEMO")
    print("=" * 80)

    print("\nSTARTING TREE:")
    print("-" * 80)
    print(render_outline(editor.questions))

    print("\nDESTINATION CHOICES:")
    print("-" * 80)
    print(render_outline(editor.destination_choices()))

    # Move pulse and the note into History
    editor.select("q-pulse", "q-note")
    print("\nSELECTED:")
    print("-" * 80)
    print(render_outline(editor.questions, selected_ids=editor.selected_ids))
    result = editor.move_selected("grp-history")
    print(f"\nMOVED {len(result.affected_ids)} -> {result.destination_link_id} "
          f"(expand {' / '.join(result.expand_path)})")
    print("-" * 80)
    print(render_outline(editor.questions))

    # Copy the blood pressure group into History
    editor.select("grp-bp")
    result = editor.copy_selected("grp-history")
    print(f"\nCOPIED {len(result.affected_ids)} -> {result.destination_link_id}")
    print("-" * 80)
    print(render_outline(editor.questions))

    questionnaire.questions = editor.questions
    report = analyze_questionnaire(questionnaire)
    print("\nREPORT:")
    print("-" * 80)
    print(f"Questions: {report.total_questions} ({report.total_groups} groups)")
    print(f"Copied link ids: {', '.join(report.copied_link_ids)}")
    for warning in report.warnings:
        print(f"WARNING: {warning}")
    print("=" * 80)


if __name__ == "__main__":
    main()
