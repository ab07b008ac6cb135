"""
Example questionnaire builder for demos and tests.

Builds a small intake form: a vitals group with a nested blood pressure
group, a history group, and a top-level free-text note.
"""
from qtree.model import Question, QuestionType, Questionnaire


def build_example_questionnaire() -> Questionnaire:
    bp = Question(
        id="grp-bp",
        link_id="bp",
        type=QuestionType.GROUP,
        text="Blood pressure",
        questions=[
            Question(id="q-systolic", link_id="systolic", type=QuestionType.QUANTITY,
                     text="Systolic", required=True),
            Question(id="q-diastolic", link_id="diastolic", type=QuestionType.QUANTITY,
                     text="Diastolic", required=True),
        ],
    )
    vitals = Question(
        id="grp-vitals",
        link_id="vitals",
        type=QuestionType.GROUP,
        text="Vitals",
        questions=[
            Question(id="q-pulse", link_id="pulse", type=QuestionType.INTEGER, text="Pulse"),
            bp,
            Question(id="q-temp", link_id="temp", type=QuestionType.DECIMAL, text="Temperature"),
        ],
    )
    history = Question(
        id="grp-history",
        link_id="history",
        type=QuestionType.GROUP,
        text="History",
        questions=[
            Question(id="q-smoker", link_id="smoker", type=QuestionType.BOOLEAN,
                     text="Current smoker?"),
            Question(id="q-allergies", link_id="allergies", type=QuestionType.TEXT,
                     text="Known allergies", repeats=True),
        ],
    )
    note = Question(id="q-note", link_id="note", type=QuestionType.TEXT, text="Clinician note")

    return Questionnaire(
        title="Intake Assessment",
        slug="intake-assessment",
        questions=[vitals, history, note],
    )
