from typing import Dict, List, Optional, Tuple

from matcher.analyzer import ResumeAnalyzer
from matcher.frequency_matcher import round_half_up
from matcher.suggestions import STRONG_TIER_FLOOR

_analyzer = ResumeAnalyzer()


def rank_resumes(jd_text: str, resumes: List[Dict]) -> List[Dict]:
    """Analyze each {"id", "text"} resume against the JD, best match first."""
    scored = []
    for r in resumes:
        result = _analyzer.analyze(r.get("text", "") or "", jd_text)
        scored.append({"id": r["id"], "resume": r, "analysis": result})
    # stable: ties keep the order the caller sent
    return sorted(scored, key=lambda x: x["analysis"].match_percentage, reverse=True)


def select_best_resume(jd_text: str, resumes: List[Dict]) -> Tuple[Optional[Dict], List[Tuple[str, int]]]:
    if not resumes:
        return None, []
    ranked = rank_resumes(jd_text, resumes)
    best = ranked[0]["resume"]
    ranking = [(entry["id"], entry["analysis"].match_percentage) for entry in ranked]
    return best, ranking


def summarize_comparisons(scores: List[int]) -> Dict[str, int]:
    """Dashboard numbers for a set of past match percentages."""
    if not scores:
        return {"count": 0, "average_score": 0, "top_score": 0, "strong_matches": 0}
    return {
        "count": len(scores),
        "average_score": int(round_half_up(sum(scores) / len(scores))),
        "top_score": max(scores),
        "strong_matches": sum(1 for s in scores if s >= STRONG_TIER_FLOOR),
    }
