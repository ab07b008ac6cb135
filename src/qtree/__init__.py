"""
Questionnaire Question-Tree Editor (qtree) Package

Structural editing of clinical questionnaire question trees.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Dialogs, sheets or any UI chrome
    - Remote persistence of a questionnaire
    - Rendering of answerable question kinds
    - Scrolling, focusing or notifications

This package defines TREE STRUCTURE and STRUCTURAL EDITS only.

Every edit is a pure function from one forest snapshot to a new one.
The surrounding authoring layer decides what to do with the result.
"""

__version__ = "0.1.0"
