from models.schemas.ats_evaluation import DetailedMetrics, EnhancedBreakdown
from models.schemas.resume_data import ResumeData
from services.ats.subscores import (
    MAX_CONTENT,
    MAX_FORMATTING,
    calculate_overall_score,
    score_content,
    score_formatting,
    score_impact,
    score_keywords,
    score_modernization,
    score_readability,
    score_structure,
)
from services.ats.text import tokenize


class TestStructure:
    def test_empty(self, empty_resume):
        assert score_structure(empty_resume) == 0

    def test_full(self, full_resume):
        assert score_structure(full_resume) == 50

    def test_summary_adds_five(self):
        without = ResumeData()
        with_summary = ResumeData.model_validate({"personal_info": {"summary": "Engineer"}})
        assert score_structure(with_summary) - score_structure(without) == 5


class TestContent:
    def test_word_band(self):
        assert score_content(DetailedMetrics(word_count=500, industry_alignment=0)) == 15
        assert score_content(DetailedMetrics(word_count=700, industry_alignment=0)) == 10
        assert score_content(DetailedMetrics(word_count=250, industry_alignment=0)) == 5
        assert score_content(DetailedMetrics(word_count=100, industry_alignment=0)) == 0

    def test_neutral_alignment_adds_five(self):
        assert score_content(DetailedMetrics()) == 5

    def test_technical_bonus_depends_on_industry(self):
        metrics = DetailedMetrics(technical_terms=12, industry_alignment=0)
        assert score_content(metrics, "technology") == 10
        assert score_content(metrics, "finance") == 5

    def test_capped(self):
        metrics = DetailedMetrics(
            word_count=500, professional_language=10, technical_terms=20, industry_alignment=100,
        )
        assert score_content(metrics, "technology") == MAX_CONTENT


class TestKeywords:
    def test_density_bands(self):
        assert score_keywords(DetailedMetrics(keyword_density=3)) == 20
        assert score_keywords(DetailedMetrics(keyword_density=7)) == 15
        assert score_keywords(DetailedMetrics(keyword_density=0.6)) == 10
        assert score_keywords(DetailedMetrics(keyword_density=0.2)) == 0

    def test_action_verb_bands(self):
        assert score_keywords(DetailedMetrics(action_verb_usage=80)) == 15
        assert score_keywords(DetailedMetrics(action_verb_usage=45)) == 10
        assert score_keywords(DetailedMetrics(action_verb_usage=20)) == 5

    def test_max(self):
        assert score_keywords(DetailedMetrics(keyword_density=4, action_verb_usage=90)) == 35


class TestFormatting:
    def test_clean_text(self):
        assert score_formatting("Jane Doe Python developer") == MAX_FORMATTING

    def test_pipe_or_tab(self):
        assert score_formatting("Python | Django") == 20
        assert score_formatting("Python\tDjango") == 20

    def test_special_characters(self):
        assert score_formatting("★" * 21) == 20
        assert score_formatting("★" * 20) == MAX_FORMATTING

    def test_excessive_whitespace(self):
        assert score_formatting("Python     Django") == 25

    def test_long_paragraph(self):
        assert score_formatting("x" * 501) == 25
        assert score_formatting("x" * 300 + "\n\n" + "y" * 300) == MAX_FORMATTING

    def test_floor(self):
        text = "|" * 30 + "     " + "x" * 600
        assert score_formatting(text) >= 0


class TestReadability:
    def test_no_sentences(self):
        assert score_readability("", []) == 20

    def test_ideal_length(self):
        text = " ".join(["word"] * 15) + "."
        assert score_readability(text, tokenize(text)) == 35

    def test_variance_bonus(self):
        text = "Short one. " + " ".join(["word"] * 14) + "."
        # avg 8 tokens per sentence, lengths 2 and 14 give variance 36
        assert score_readability(text, tokenize(text)) == 40


class TestImpact:
    def test_zero(self):
        assert score_impact(DetailedMetrics(), "") == 0

    def test_formula(self):
        metrics = DetailedMetrics(quantification_score=50, action_verb_usage=50)
        assert score_impact(metrics, "Achieved goals and reduced costs") == 20 + 15 + 10

    def test_capped_at_100(self):
        metrics = DetailedMetrics(quantification_score=100, action_verb_usage=400)
        assert score_impact(metrics, "") == 100


class TestModernization:
    def test_empty(self, empty_resume):
        assert score_modernization(empty_resume, "") == 0

    def test_terms_capped_at_thirty(self, empty_resume):
        text = "cloud machine learning blockchain devops"
        assert score_modernization(empty_resume, text) == 30

    def test_github_only_counts_for_technology(self):
        resume = ResumeData.model_validate({"personal_info": {"github": "github.com/x"}})
        assert score_modernization(resume, "", "technology") == 15
        assert score_modernization(resume, "", "finance") == 0

    def test_profile_links_and_certifications(self, full_resume):
        # linkedin 20 + github 15 + certification 15, plus serverless/cloud/microservices terms
        assert score_modernization(full_resume, "", "technology") == 50
        assert score_modernization(full_resume, "cloud serverless microservices", "technology") == 75


def test_overall_of_maxima():
    breakdown = EnhancedBreakdown(
        structure=50, content=50, keywords=35, formatting=30,
        readability=45, impact=100, modernization=75,
    )
    assert calculate_overall_score(breakdown) == 50


def test_overall_of_zeros():
    assert calculate_overall_score(EnhancedBreakdown()) == 0
