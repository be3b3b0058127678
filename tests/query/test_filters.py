# tests/query/test_filters.py
"""Tests for multi-criteria filtering."""

import pytest

from qbank.models import QuestionFilter
from qbank.query import apply_filters, contains_any, matches


def ids(questions):
    return [q.id for q in questions]


class TestContainsAny:
    def test_case_insensitive_substring(self):
        assert contains_any("Modern Indian History", ["history"])

    def test_no_match(self):
        assert not contains_any("Geography", ["history", "polity"])

    def test_empty_candidates(self):
        assert not contains_any("History", [])


class TestApplyFilters:
    def test_none_filter_keeps_everything(self, varied_questions):
        result = apply_filters(varied_questions, None)
        assert ids(result) == ids(varied_questions)
        assert result is not varied_questions

    def test_empty_filter_keeps_everything(self, varied_questions):
        assert ids(apply_filters(varied_questions, QuestionFilter())) == ids(varied_questions)

    def test_empty_field_places_no_constraint(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(year=[], subject=[]))
        assert len(result) == len(varied_questions)

    def test_year_membership(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(year=[2022, 2024]))
        assert ids(result) == ["h1", "e1", "s1"]

    def test_exact_enum_fields(self, varied_questions):
        assert ids(apply_filters(varied_questions, QuestionFilter(exam_type=["Prelims"]))) == ["h1"]
        assert ids(apply_filters(varied_questions, QuestionFilter(paper_type=["GS-II"]))) == ["p1"]
        assert ids(apply_filters(varied_questions, QuestionFilter(question_type=["Essay"]))) == [
            "s1"
        ]
        assert ids(apply_filters(varied_questions, QuestionFilter(difficulty=["Hard"]))) == [
            "g1",
            "s1",
        ]

    def test_subject_is_case_insensitive_substring(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(subject=["geo"]))
        assert ids(result) == ["g1"]

    def test_topic_matches_any_candidate(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(topic=["ancient", "FEDERAL"]))
        assert ids(result) == ["h1", "p1"]

    def test_keywords_substring_in_any_element(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(keywords=["nino"]))
        assert ids(result) == ["g1"]

    def test_tags(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(tags=["geography", "macro"]))
        assert ids(result) == ["g1", "e1"]

    def test_question_without_keywords_never_matches_keyword_filter(self, varied_questions):
        result = apply_filters(varied_questions, QuestionFilter(keywords=["education"]))
        assert result == []

    def test_fields_are_anded(self, varied_questions):
        result = apply_filters(
            varied_questions,
            QuestionFilter(year=[2023, 2024], difficulty=["Medium"], paper_type=["GS-III"]),
        )
        assert ids(result) == ["e1"]

    def test_no_matches(self, varied_questions):
        assert apply_filters(varied_questions, QuestionFilter(year=[1999])) == []

    def test_preserves_input_order_and_does_not_mutate(self, varied_questions):
        before = list(varied_questions)
        apply_filters(varied_questions, QuestionFilter(difficulty=["Medium"]))
        assert varied_questions == before

    @pytest.mark.parametrize(
        "filters,expected",
        [
            (QuestionFilter(subject=["History"]), True),
            (QuestionFilter(subject=["Polity"]), False),
            (QuestionFilter(year=[2022], tags=["art"]), True),
        ],
    )
    def test_matches_single_question(self, varied_questions, filters, expected):
        assert matches(varied_questions[0], filters) is expected
