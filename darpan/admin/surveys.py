"""
Survey configuration — surveys and their questions, in memory.

The catalog is never left empty: deleting the last survey is refused.
"""
from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from typing import Optional

from darpan.config import NEW_QUESTION_TEXT, NEW_QUESTION_TYPE, NEW_SURVEY_TITLE
from darpan.data.seed import SAMPLE_SURVEYS


class LastSurveyError(ValueError):
    """Raised when deleting the only remaining survey."""


@dataclass
class Question:
    id: int
    text: str = NEW_QUESTION_TEXT
    type: str = NEW_QUESTION_TYPE


@dataclass
class Survey:
    id: str
    title: str = NEW_SURVEY_TITLE
    status: str = "Draft"
    questions: list[Question] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


class SurveyCatalog:
    def __init__(self, seed: bool = True) -> None:
        self._surveys: list[Survey] = []
        self._next_survey = 1
        self._next_question = 1
        if seed:
            for raw in copy.deepcopy(SAMPLE_SURVEYS):
                questions = [Question(**q) for q in raw.pop("questions")]
                self._surveys.append(Survey(questions=questions, **raw))
            self._next_survey = len(self._surveys) + 1
            self._next_question = max(
                (q.id for s in self._surveys for q in s.questions), default=0
            ) + 1

    # ------------------------------------------------------------------
    # Surveys
    # ------------------------------------------------------------------

    def list(self) -> list[Survey]:
        return list(self._surveys)

    def get(self, survey_id: str) -> Optional[Survey]:
        return next((s for s in self._surveys if s.id == survey_id), None)

    def _require(self, survey_id: str) -> Survey:
        survey = self.get(survey_id)
        if survey is None:
            raise KeyError(survey_id)
        return survey

    def add(self) -> Survey:
        """New untitled draft survey."""
        survey_id = f"S{self._next_survey}"
        while self.get(survey_id) is not None:
            self._next_survey += 1
            survey_id = f"S{self._next_survey}"
        self._next_survey += 1
        survey = Survey(id=survey_id)
        self._surveys.append(survey)
        return survey

    def delete(self, survey_id: str) -> list[Survey]:
        """Remove a survey and return the remaining ones."""
        self._require(survey_id)
        if len(self._surveys) <= 1:
            raise LastSurveyError("Cannot delete the last survey!")
        self._surveys = [s for s in self._surveys if s.id != survey_id]
        return self.list()

    def rename(self, survey_id: str, title: str) -> Survey:
        survey = self._require(survey_id)
        survey.title = title
        return survey

    def toggle_status(self, survey_id: str) -> Survey:
        """Active ↔ Draft."""
        survey = self._require(survey_id)
        survey.status = "Draft" if survey.status == "Active" else "Active"
        return survey

    # ------------------------------------------------------------------
    # Questions
    # ------------------------------------------------------------------

    def add_question(self, survey_id: str) -> Question:
        survey = self._require(survey_id)
        question = Question(id=self._next_question)
        self._next_question += 1
        survey.questions.append(question)
        return question

    def update_question(self, survey_id: str, question_id: int, field_name: str, value: str) -> Question:
        if field_name not in ("text", "type"):
            raise ValueError(f"Question field not editable: {field_name}")
        survey = self._require(survey_id)
        for question in survey.questions:
            if question.id == question_id:
                setattr(question, field_name, value)
                return question
        raise KeyError(question_id)

    def delete_question(self, survey_id: str, question_id: int) -> Survey:
        survey = self._require(survey_id)
        before = len(survey.questions)
        survey.questions = [q for q in survey.questions if q.id != question_id]
        if len(survey.questions) == before:
            raise KeyError(question_id)
        return survey
