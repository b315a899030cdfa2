"""Tests for the basic ATS scorer used by the live feedback panel."""

from conftest import make_full_resume
from models.schemas.ats_evaluation import BasicResumeScore
from models.schemas.resume_data import ResumeData
from services.ats.basic import (
    calculate_ats_score,
    calculate_completeness,
    calculate_resume_score,
    get_target_keywords,
    keyword_density,
    readability_grade,
    tokenize,
)
from services.ats.basic_keywords import (
    ACTION_VERBS,
    SOFT_SKILLS,
    count_impact_statements,
    get_keywords_for_industry,
    get_keywords_for_role,
    normalize_keyword,
)


def test_tokenize_strips_symbols_and_short_tokens():
    assert tokenize("Node.js & C++ developer!") == ["node.js", "developer"]


def test_keyword_density_is_unique_ratio():
    assert keyword_density([]) == 0
    assert keyword_density(["python", "python"]) == 50
    assert keyword_density(["python", "react", "docker"]) == 100


def test_readability_grade_bounds():
    assert readability_grade([], []) == 0
    assert 0 <= readability_grade(["a sentence here"], ["extraordinarily"] * 200) <= 20


def test_role_lookup_uses_hyphen_slug():
    assert "react" in get_keywords_for_role("Software Engineer")
    assert get_keywords_for_role("Senior Software Engineer") == []


def test_industry_lookup_flattens_groups():
    keywords = get_keywords_for_industry("Finance")
    assert "fintech" in keywords
    assert "kyc" in keywords
    assert get_keywords_for_industry("aerospace") == []


def test_target_keywords_fallback():
    keywords = get_target_keywords(None, None)
    all_verbs = [v for verbs in ACTION_VERBS.values() for v in verbs]
    assert keywords[:10] == list(SOFT_SKILLS[:10])
    assert len(keywords) == len(set(keywords))
    assert set(keywords) == set(SOFT_SKILLS[:10]) | set(all_verbs[:20])


def test_normalize_keyword():
    assert normalize_keyword("CI/CD") == "cicd"
    assert normalize_keyword("Node.js") == "node.js"


def test_impact_statements():
    assert count_impact_statements("") == 0
    assert count_impact_statements("Managed 12 clients and saved $5k") >= 2


class TestEmptyResume:
    def setup_method(self):
        self.evaluation = calculate_ats_score(ResumeData())

    def test_breakdown_floors(self):
        bd = self.evaluation.breakdown
        assert bd.structure == 50
        assert bd.keywords == 40
        assert bd.readability == 60
        assert bd.impact == 30

    def test_overall(self):
        assert self.evaluation.score == 45

    def test_sections_missing(self):
        metrics = self.evaluation.detailed_metrics
        assert metrics.sections_found == []
        assert metrics.sections_missing == ["contact", "summary", "experience", "education", "skills"]

    def test_issues(self):
        assert self.evaluation.critical_issues == [
            "No email address provided",
            "No phone number provided",
            "No work experience listed",
            "Resume content is too sparse",
        ]
        assert self.evaluation.recommendations.high == self.evaluation.critical_issues[:3]

    def test_improvements_split_across_buckets(self):
        improvements = self.evaluation.improvements
        recs = self.evaluation.recommendations
        assert len(improvements) == 5
        assert recs.medium == improvements[:3]
        assert recs.low == improvements[3:]

    def test_missing_keywords_truncated(self):
        assert len(self.evaluation.missing_keywords) == 10
        assert self.evaluation.matched_keywords == []


class TestFullResume:
    def setup_method(self):
        self.score = calculate_resume_score(make_full_resume(), "Software Engineer")

    def test_shape(self):
        assert isinstance(self.score, BasicResumeScore)
        assert not hasattr(self.score.breakdown, "modernization")

    def test_structure_full(self):
        assert self.score.breakdown.structure == 100
        assert self.score.detailed_metrics.sections_missing == []

    def test_completeness_full(self):
        assert self.score.completeness == 100

    def test_quantified_achievements(self):
        assert self.score.detailed_metrics.quantified_achievements == 5

    def test_ats_and_impact_mirror_evaluation(self):
        assert self.score.ats == self.score.overall
        assert self.score.impact == self.score.breakdown.impact

    def test_suggestions_are_high_priority(self):
        assert self.score.suggestions == self.score.recommendations.high[:5]

    def test_role_bonus(self):
        untargeted = calculate_resume_score(make_full_resume())
        assert self.score.breakdown.keywords >= untargeted.breakdown.keywords

    def test_bounds(self):
        assert 0 <= self.score.overall <= 100
        for value in self.score.breakdown.model_dump().values():
            assert 0 <= value <= 100


def test_completeness_weights():
    resume = ResumeData.model_validate({
        "personal_info": {"full_name": "Ann", "email": "ann@example.com", "summary": "Short"},
        "experience": [{"company": "Acme"}],
    })
    # name 10 + email 10 + experience 25; summary too short to count
    assert calculate_completeness(resume) == 45


def test_summary_threshold_for_section():
    short = calculate_ats_score({"personal_info": {"summary": "Engineer"}})
    long = calculate_ats_score({"personal_info": {"summary": "Engineer with a decade of backend experience"}})
    assert "summary" not in short.detailed_metrics.sections_found
    assert "summary" in long.detailed_metrics.sections_found
    assert long.breakdown.structure - short.breakdown.structure == 5


def test_does_not_mutate_input(full_resume):
    before = full_resume.model_dump()
    calculate_resume_score(full_resume, "Software Engineer", "technology")
    assert full_resume.model_dump() == before
