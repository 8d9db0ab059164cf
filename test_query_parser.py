"""
Tests for the rule-based query parser.
"""

import pytest

from query_parser import QueryParser, ExtractionRule, RULES, WORD
from models import SearchCriteria


@pytest.fixture
def parser():
    return QueryParser()


class TestRatingRule:
    def test_rating_from_stars_phrase(self, parser):
        criteria = parser.parse_query("I want ratings around 4.5 stars")
        assert criteria.rating == 4.5
        assert criteria.subject is None
        assert criteria.keywords is None

    def test_integer_rating_is_float(self, parser):
        criteria = parser.parse_query("score of 4 or better")
        assert criteria.rating == 4.0
        assert isinstance(criteria.rating, float)

    def test_trigger_without_number_leaves_rating_absent(self, parser):
        assert parser.parse_query("who has the best rating?").rating is None


class TestSubjectRule:
    def test_first_word_after_trigger(self, parser):
        assert parser.parse_query("Who teaches calculus on Mondays?").subject == "calculus"

    def test_subject_keeps_case(self, parser):
        assert parser.parse_query("subject: Physics").subject == "Physics"

    def test_trigger_is_case_insensitive(self, parser):
        assert parser.parse_query("COURSE biology").subject == "biology"


class TestKeywordsRule:
    def test_keywords_are_lowercased(self, parser):
        assert parser.parse_query("expertise in Robotics").keywords == "in"
        assert parser.parse_query("specialty Robotics").keywords == "robotics"


class TestParserBehaviour:
    def test_no_triggers_gives_empty_criteria(self, parser):
        criteria = parser.parse_query("top professors for data science")
        assert criteria == SearchCriteria()
        assert criteria.is_empty()

    def test_rules_apply_independently(self, parser):
        criteria = parser.parse_query("course chemistry with rating 4.2 and focus Labs")
        assert criteria.as_filter() == {"subject": "chemistry", "rating": 4.2, "keywords": "labs"}

    def test_first_match_wins(self, parser):
        assert parser.parse_query("stars 3 or stars 5").rating == 3.0

    def test_deterministic(self, parser):
        text = "teach statistics, score 4.8, focus research"
        assert parser.parse_query(text) == parser.parse_query(text)
        assert QueryParser().parse_query(text) == parser.parse_query(text)

    def test_empty_input(self, parser):
        assert parser.parse_query("").is_empty()

    def test_custom_rule_table(self):
        rules = RULES + (ExtractionRule("subject", ("department",), WORD, str.upper),)
        criteria = QueryParser(rules).parse_query("department math")
        assert criteria.subject == "MATH"


class TestValueBoundaries:
    def test_number_cannot_start_after_a_dot(self, parser):
        assert parser.parse_query("rating .5").rating is None

    def test_number_glued_to_letters_is_skipped(self, parser):
        assert parser.parse_query("rating 4.5x").rating is None
        assert parser.parse_query("rating 4.5x or 3").rating == 3.0

    def test_sentence_final_period_is_not_part_of_number(self, parser):
        assert parser.parse_query("I want a score of 4.5.").rating == 4.5

    def test_value_never_taken_from_inside_trigger_word(self, parser):
        assert parser.parse_query("she teaches").subject is None
