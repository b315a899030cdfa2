"""Rule-based ATS scoring engines.

Pure functions of their arguments: no I/O, no shared state, safe to call
from any number of request handlers at once.
"""

from services.ats.basic import calculate_ats_score, calculate_resume_score
from services.ats.checker import (
    calculate_ats_compatibility_score,
    check_ats_compatibility,
    check_file_type_compatibility,
    run_full_ats_check,
)
from services.ats.enhanced import (
    EnhancedAtsScorer,
    calculate_enhanced_ats_score,
    quick_ats_check,
)
from services.ats.feedback import generate_feedback
from services.ats.text_checker import (
    evaluate_ats_compatibility_from_resume,
    evaluate_ats_compatibility_from_text,
)

__all__ = [
    "EnhancedAtsScorer",
    "calculate_enhanced_ats_score",
    "quick_ats_check",
    "calculate_ats_score",
    "calculate_resume_score",
    "generate_feedback",
    "evaluate_ats_compatibility_from_text",
    "evaluate_ats_compatibility_from_resume",
    "check_ats_compatibility",
    "calculate_ats_compatibility_score",
    "check_file_type_compatibility",
    "run_full_ats_check",
]
