"""
Serialization helpers for qtree objects (Questionnaire, Question).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Unknown question keys are kept in Question.extra and written back at the top
level, so fields this package does not model survive a round-trip.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from qtree.model import Question, QuestionType, Questionnaire


_QUESTION_KEYS = ("id", "link_id", "type", "text", "questions", "required", "repeats")


def question_to_dict(q: Question) -> Dict[str, Any]:
    d: Dict[str, Any] = dict(q.extra)
    d.update({
        "id": q.id,
        "link_id": q.link_id,
        "type": q.type.value,
        "text": q.text,
        "questions": [question_to_dict(child) for child in q.questions],
    })
    if q.required is not None:
        d["required"] = q.required
    if q.repeats is not None:
        d["repeats"] = q.repeats
    return d


def question_from_dict(d: Dict[str, Any]) -> Question:
    try:
        qtype = QuestionType(d["type"])
    except ValueError:
        raise ValueError(f"Unsupported question type: {d['type']!r}") from None
    return Question(
        id=d["id"],
        link_id=d["link_id"],
        type=qtype,
        text=d.get("text", ""),
        questions=[question_from_dict(child) for child in d.get("questions") or []],
        required=d.get("required"),
        repeats=d.get("repeats"),
        extra={k: v for k, v in d.items() if k not in _QUESTION_KEYS},
    )


def questionnaire_to_dict(qn: Questionnaire) -> Dict[str, Any]:
    return {
        "title": qn.title,
        "slug": qn.slug,
        "description": qn.description,
        "status": qn.status,
        "version": qn.version,
        "questions": [question_to_dict(q) for q in qn.questions],
    }


def questionnaire_from_dict(d: Dict[str, Any]) -> Questionnaire:
    qn = Questionnaire(title=d.get("title", ""))
    qn.slug = d.get("slug", "")
    qn.description = d.get("description")
    qn.status = d.get("status", "draft")
    qn.version = d.get("version", "1.0")
    qn.questions = [question_from_dict(q) for q in d.get("questions", [])]
    return qn


def questionnaire_to_json(qn: Questionnaire) -> str:
    return json.dumps(questionnaire_to_dict(qn), sort_keys=True)


def questionnaire_from_json(s: str) -> Questionnaire:
    d = json.loads(s)
    return questionnaire_from_dict(d)


def questionnaire_to_yaml(qn: Questionnaire) -> str:
    return yaml.safe_dump(questionnaire_to_dict(qn))


def questionnaire_from_yaml(s: str) -> Questionnaire:
    d = yaml.safe_load(s)
    return questionnaire_from_dict(d)
