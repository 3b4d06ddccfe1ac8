"""
Resume Analyzer
---------------

Compares a resume against a job description and returns:
- match percentage (0-100, cosine similarity of term frequencies)
- matched skills (resume skills also asked for in the job description)
- missing skills (job description skills the resume doesn't mention)
- top keywords (10 heaviest job description terms)
- suggestions (2-4 tips for improving the resume)

Everything is computed from the two strings passed in; nothing is stored
between calls, so one analyzer can be shared across threads.
"""

from dataclasses import dataclass

from matcher.frequency_matcher import cosine_similarity, round_half_up, vectorize
from matcher.suggestions import generate_suggestions, score_tier
from ml.preprocess import tokenize
from ml.skills import extract_skills

TOP_KEYWORDS = 10
KEYWORD_SCORE_DIGITS = 3


@dataclass(frozen=True)
class KeywordScore:
    word: str
    score: float


@dataclass(frozen=True)
class AnalysisResult:
    match_percentage: int
    matched_skills: tuple
    missing_skills: tuple
    top_keywords: tuple
    suggestions: tuple

    @property
    def score_tier(self) -> str:
        return score_tier(self.match_percentage)

    def to_dict(self) -> dict:
        """JSON-ready shape returned by the API."""
        return {
            "match_percentage": self.match_percentage,
            "matched_skills": list(self.matched_skills),
            "missing_skills": list(self.missing_skills),
            "top_keywords": [{"word": k.word, "score": k.score} for k in self.top_keywords],
            "suggestions": list(self.suggestions),
            "score_tier": self.score_tier,
        }


class ResumeAnalyzer:
    def __init__(self, top_keywords: int = TOP_KEYWORDS):
        self.top_keywords = top_keywords

    def analyze(self, resume_text: str, job_desc: str) -> AnalysisResult:
        """
        Steps:
        1. Extract skills from both texts.
        2. Split them into matched (resume order) and missing (job description order).
        3. Tokenize both texts.
        4. Turn tokens into relative term frequency vectors.
        5. Cosine similarity -> percentage, rounded half up.
        6. Top keywords = heaviest job description terms.
        7. Suggestions from the skill overlap and the score.
        """
        resume_skills = extract_skills(resume_text)
        job_skills = extract_skills(job_desc)

        job_skill_set = set(job_skills)
        resume_skill_set = set(resume_skills)
        matched = tuple(s for s in resume_skills if s in job_skill_set)
        missing = tuple(s for s in job_skills if s not in resume_skill_set)

        resume_vector = vectorize(tokenize(resume_text))
        job_vector = vectorize(tokenize(job_desc))

        similarity = cosine_similarity(resume_vector, job_vector)
        match_percentage = int(round_half_up(similarity * 100))

        keywords = tuple(self._top_keywords(job_vector))
        suggestions = tuple(generate_suggestions(matched, missing, match_percentage))

        return AnalysisResult(
            match_percentage=match_percentage,
            matched_skills=matched,
            missing_skills=missing,
            top_keywords=keywords,
            suggestions=suggestions,
        )

    def _top_keywords(self, job_vector: dict):
        # sorted() is stable, so equal weights keep first-seen order
        ranked = sorted(job_vector.items(), key=lambda x: x[1], reverse=True)
        return [
            KeywordScore(word, round_half_up(weight, KEYWORD_SCORE_DIGITS))
            for word, weight in ranked[: self.top_keywords]
        ]


_default_analyzer = ResumeAnalyzer()


def analyze(resume_text: str, job_desc: str) -> AnalysisResult:
    """Module-level shortcut using a shared analyzer."""
    return _default_analyzer.analyze(resume_text, job_desc)


# === Example usage ===
if __name__ == "__main__":
    resume = "Experienced React and TypeScript developer with AWS and Docker skills"
    jd = "Looking for a React, TypeScript, and AWS engineer"

    result = analyze(resume, jd)
    print("Match:", result.match_percentage)          # e.g., 51
    print("Matched Skills:", result.matched_skills)   # e.g., ("typescript", "react", "aws")
    print("Suggestions:", result.suggestions)
