"""Tests for the enhanced ATS scorer."""

import copy

import pytest

from conftest import make_description_resume, make_full_resume
from models.schemas.ats_evaluation import EnhancedAtsEvaluation, EnhancedResumeScore
from models.schemas.resume_data import ResumeData
from services.ats.enhanced import (
    MAX_SUGGESTIONS,
    EnhancedAtsScorer,
    calculate_enhanced_ats_score,
    quick_ats_check,
)
from services.ats.keywords import ROLE_KEYWORDS, get_industry_keywords
from services.ats.recommendations import MSG_MISSING_SUMMARY, MSG_NO_EXPERIENCE
from services.ats.subscores import (
    MAX_CONTENT,
    MAX_FORMATTING,
    MAX_IMPACT,
    MAX_KEYWORDS,
    MAX_MODERNIZATION,
    MAX_READABILITY,
    MAX_STRUCTURE,
)

BOUNDS = {
    "structure": MAX_STRUCTURE,
    "content": MAX_CONTENT,
    "keywords": MAX_KEYWORDS,
    "formatting": MAX_FORMATTING,
    "readability": MAX_READABILITY,
    "impact": MAX_IMPACT,
    "modernization": MAX_MODERNIZATION,
}

FILLER = ("alpha", "beta", "gamma", "delta")


def _filler(n: int) -> str:
    return " ".join(FILLER[i % len(FILLER)] for i in range(n))


def _evaluate(resume, **options) -> EnhancedAtsEvaluation:
    return EnhancedAtsScorer(resume, **options).calculate_score()


@pytest.mark.parametrize("options", [
    {},
    {"industry": "technology"},
    {"target_role": "Senior Software Engineer", "industry": "Technology"},
    {"target_role": "unknown role xyz", "industry": "aerospace"},
])
def test_scores_within_bounds(full_resume, empty_resume, options):
    for resume in (full_resume, empty_resume, make_description_resume("Led | built " * 200)):
        result = calculate_enhanced_ats_score(resume, **options)
        assert 0 <= result.overall <= 100
        for name, maximum in BOUNDS.items():
            assert 0 <= getattr(result.breakdown, name) <= maximum, name


def test_idempotent(full_resume):
    first = calculate_enhanced_ats_score(full_resume, "Software Engineer", "technology")
    second = calculate_enhanced_ats_score(full_resume, "Software Engineer", "technology")
    assert first == second


def test_does_not_mutate_model_input(full_resume):
    before = full_resume.model_dump()
    calculate_enhanced_ats_score(full_resume, "Software Engineer", "technology")
    assert full_resume.model_dump() == before


def test_does_not_mutate_dict_input(full_resume_data):
    before = copy.deepcopy(full_resume_data)
    calculate_enhanced_ats_score(full_resume_data, "Data Scientist", "technology")
    assert full_resume_data == before


def test_accepts_dict_input(full_resume, full_resume_data):
    assert calculate_enhanced_ats_score(full_resume_data) == calculate_enhanced_ats_score(full_resume)


class TestEmptyResume:
    def setup_method(self):
        self.result = calculate_enhanced_ats_score(ResumeData())

    def test_structure_zero(self):
        assert self.result.breakdown.structure == 0

    def test_critical_issues(self):
        assert MSG_MISSING_SUMMARY in self.result.critical_issues
        assert MSG_NO_EXPERIENCE in self.result.critical_issues

    def test_overall_low(self):
        assert isinstance(self.result.overall, int)
        assert self.result.overall < 20

    def test_metrics_defaults(self):
        metrics = self.result.detailed_metrics
        assert metrics.word_count == 0
        assert metrics.industry_alignment == 50
        assert metrics.section_completeness == 0

    def test_critical_issues_lead_high_bucket(self):
        high = self.result.recommendations.high
        assert high[: len(self.result.critical_issues)] == self.result.critical_issues


def test_empty_lists_as_nulls():
    result = calculate_enhanced_ats_score({
        "personal_info": {},
        "experience": None,
        "education": None,
        "skills": None,
        "projects": None,
        "certifications": None,
        "languages": None,
    })
    assert result.breakdown.structure == 0


def test_summary_increases_structure_by_five():
    without = calculate_enhanced_ats_score(ResumeData())
    with_summary = calculate_enhanced_ats_score(
        {"personal_info": {"summary": "Backend engineer focused on reliable payment systems"}}
    )
    assert with_summary.breakdown.structure - without.breakdown.structure == 5
    assert with_summary.overall >= without.overall


def test_optimal_word_count_bonus():
    resume = make_description_resume(_filler(500))
    evaluation = _evaluate(resume)
    assert evaluation.detailed_metrics.word_count == 500
    # 15 for the 400-600 word band plus 5 from the neutral industry alignment
    assert evaluation.breakdown.content == 20


def test_word_count_outside_optimal_band():
    evaluation = _evaluate(make_description_resume(_filler(250)))
    assert evaluation.breakdown.content == 10


def test_keyword_density_bonus():
    text = "javascript react node.js " + _filler(97)
    evaluation = _evaluate(make_description_resume(text), industry="technology")
    assert evaluation.detailed_metrics.keyword_density == 3.0
    assert evaluation.breakdown.keywords == 20


def test_formatting_penalty_for_pipe():
    resume = make_description_resume("Python | Django", full_name="Jane Doe")
    assert _evaluate(resume).breakdown.formatting == 20


class TestKeywordMatching:
    def test_software_engineer_with_technology(self, full_resume):
        evaluation = _evaluate(full_resume, target_role="Software Engineer", industry="technology")
        expected = set(get_industry_keywords("technology")) | set(ROLE_KEYWORDS["software engineer"])
        assert set(evaluation.matched_keywords) | set(evaluation.missing_keywords) == expected
        assert not set(evaluation.matched_keywords) & set(evaluation.missing_keywords)
        assert "python" in evaluation.matched_keywords
        assert "react" in evaluation.matched_keywords

    def test_role_only(self, full_resume):
        evaluation = _evaluate(full_resume, target_role="Software Engineer")
        assert set(evaluation.matched_keywords + evaluation.missing_keywords) == set(
            ROLE_KEYWORDS["software engineer"]
        )

    def test_role_substring_case_insensitive(self, full_resume):
        evaluation = _evaluate(full_resume, target_role="  SENIOR Software ENGINEER ")
        assert set(evaluation.matched_keywords + evaluation.missing_keywords) == set(
            ROLE_KEYWORDS["software engineer"]
        )

    def test_unknown_role_falls_back_to_industry(self, full_resume):
        evaluation = _evaluate(full_resume, target_role="unknown role xyz", industry="technology")
        assert set(evaluation.matched_keywords + evaluation.missing_keywords) == set(
            get_industry_keywords("technology")
        )

    def test_no_targets(self, full_resume):
        evaluation = _evaluate(full_resume, target_role="unknown role xyz")
        assert evaluation.matched_keywords == []
        assert evaluation.missing_keywords == []


class TestResumeScore:
    def setup_method(self):
        self.result = calculate_enhanced_ats_score(make_full_resume(), "Software Engineer", "technology")

    def test_shape(self):
        assert isinstance(self.result, EnhancedResumeScore)

    def test_ats_is_parse_composite(self):
        bd = self.result.breakdown
        expected = (bd.structure + bd.keywords + bd.formatting + bd.readability) / 4
        assert abs(self.result.ats - expected) <= 0.5

    def test_completeness_bounds(self):
        assert 0 <= self.result.completeness <= 100

    def test_suggestions_capped(self):
        recs = self.result.recommendations
        assert self.result.suggestions == (recs.high + recs.medium + recs.low)[:MAX_SUGGESTIONS]
        assert len(self.result.suggestions) <= MAX_SUGGESTIONS

    def test_full_resume_has_no_missing_sections(self):
        assert MSG_MISSING_SUMMARY not in self.result.critical_issues
        assert MSG_NO_EXPERIENCE not in self.result.critical_issues
        assert self.result.detailed_metrics.section_completeness == 100
        assert self.result.breakdown.structure == MAX_STRUCTURE


def test_recommendation_buckets_have_no_duplicates(full_resume, empty_resume):
    for resume in (full_resume, empty_resume):
        recs = _evaluate(resume).recommendations
        for bucket in (recs.high, recs.medium, recs.low):
            assert len(bucket) == len(set(bucket))


class TestQuickCheck:
    def test_empty_is_poor(self, empty_resume):
        result = quick_ats_check(empty_resume)
        assert result.status == "poor"
        assert result.top_issue is not None

    def test_status_matches_score(self, full_resume):
        result = quick_ats_check(full_resume)
        assert result.score == _evaluate(full_resume).score
        if result.score >= 80:
            assert result.status == "excellent"
        elif result.score >= 60:
            assert result.status == "good"
        elif result.score >= 40:
            assert result.status == "needs-work"
        else:
            assert result.status == "poor"

    def test_top_issue_prefers_high(self, empty_resume):
        result = quick_ats_check(empty_resume)
        assert result.top_issue == _evaluate(empty_resume).recommendations.high[0]
