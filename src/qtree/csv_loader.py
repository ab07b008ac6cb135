"""
CSV Outline Loader (spreadsheet outline → Questionnaire).

Builds a question forest from a flat CSV outline, one row per question.

CSV Format:
    link_id, parent, type, text, required, repeats

Column Notes:
    - parent: link_id of the parent row, blank for root questions
    - A parent row must appear before its children
    - Children keep row order under their parent
    - required / repeats: optional, accept true/false/yes/no/1/0
    - Every loaded question gets a freshly generated id
"""

import csv
import os
import warnings
from dataclasses import dataclass
from io import StringIO
from typing import Dict, List, Optional

from qtree.errors import CSVParseError
from qtree.identity import new_question_id
from qtree.model import Question, QuestionType, Questionnaire


_TRUE = {"true", "yes", "y", "1"}
_FALSE = {"false", "no", "n", "0"}


@dataclass
class CSVRow:
    """Parsed CSV row."""
    link_id: str
    parent: str
    type: QuestionType
    text: str
    required: Optional[bool] = None
    repeats: Optional[bool] = None


def _parse_flag(value: Optional[str], column: str) -> Optional[bool]:
    value = (value or "").strip().lower()
    if not value:
        return None
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid {column} value: {value!r}")


def _parse_csv_rows(csv_content: str) -> List[CSVRow]:
    """Parse CSV content into structured rows."""
    reader = csv.DictReader(StringIO(csv_content))

    if reader.fieldnames is None:
        raise CSVParseError("CSV is empty")

    required_columns = ['link_id', 'parent', 'type', 'text']
    missing = [col for col in required_columns if col not in reader.fieldnames]
    if missing:
        raise CSVParseError(f"Missing required columns: {missing}")

    rows = []
    for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is line 1)
        try:
            link_id = (row.get('link_id') or '').strip()
            if not link_id:
                raise ValueError("link_id is empty")
            csv_row = CSVRow(
                link_id=link_id,
                parent=(row.get('parent') or '').strip(),
                type=QuestionType((row.get('type') or '').strip()),
                text=(row.get('text') or '').strip(),
                required=_parse_flag(row.get('required'), 'required'),
                repeats=_parse_flag(row.get('repeats'), 'repeats'),
            )
            rows.append(csv_row)
        except ValueError as e:
            raise CSVParseError(f"Error parsing row {row_num}: {str(e)}") from e

    return rows


def parse_csv_string(csv_content: str, title: str = "CSVQuestionnaire") -> Questionnaire:
    """
    Parse CSV content into a Questionnaire object.

    Args:
        csv_content: CSV as string
        title: Title for the questionnaire

    Returns:
        Questionnaire whose forest follows the parent column

    Raises:
        CSVParseError: If parsing fails
    """
    rows = _parse_csv_rows(csv_content)

    link_ids = [row.link_id for row in rows]
    if len(link_ids) != len(set(link_ids)):
        duplicates = {name for name in link_ids if link_ids.count(name) > 1}
        raise CSVParseError(f"Duplicate link ids: {sorted(duplicates)}")

    by_link_id: Dict[str, Question] = {}
    roots: List[Question] = []

    for row_num, row in enumerate(rows, start=2):
        question = Question(
            id=new_question_id(),
            link_id=row.link_id,
            type=row.type,
            text=row.text,
            required=row.required,
            repeats=row.repeats,
        )
        if not row.parent:
            roots.append(question)
        else:
            parent = by_link_id.get(row.parent)
            if parent is None:
                raise CSVParseError(
                    f"Error parsing row {row_num}: unknown parent {row.parent!r} "
                    f"(parents must be declared before their children)"
                )
            if not parent.is_group:
                warnings.warn(
                    f"{row.link_id} is nested under non-group question {parent.link_id}",
                    UserWarning,
                )
            parent.questions.append(question)
        by_link_id[row.link_id] = question

    return Questionnaire(title=title, questions=roots)


def parse_csv_file(filepath: str, title: Optional[str] = None) -> Questionnaire:
    """
    Parse CSV file into a Questionnaire object.

    Args:
        filepath: Path to CSV file
        title: Optional title (defaults to filename)

    Raises:
        FileNotFoundError: If file doesn't exist
        CSVParseError: If parsing fails
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    if title is None:
        title = os.path.splitext(os.path.basename(filepath))[0]

    return parse_csv_string(content, title=title)


__all__ = [
    "parse_csv_string",
    "parse_csv_file",
    "CSVParseError",
]
