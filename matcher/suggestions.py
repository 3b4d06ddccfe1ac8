"""
Improvement suggestions
-----------------------

Fixed rule table that turns the match score and skill overlap into short,
human-readable tips. Deterministic: same inputs, same list, same order.
"""

# Score band messages (exactly one band applies)
LOW_MATCH_MESSAGES = (
    "Consider tailoring your resume more closely to this job description",
    "Add more relevant keywords from the job posting",
)
MEDIUM_MATCH_MESSAGE = "Good match! Consider highlighting more relevant experiences"
HIGH_MATCH_MESSAGE = "Excellent match! Your resume aligns well with this position"

LOW_BAND_CEILING = 30
MEDIUM_BAND_CEILING = 60

# How many skills to name in the missing/matched tips
SKILLS_PER_TIP = 3

# Thresholds the dashboard uses to color scores
STRONG_TIER_FLOOR = 70
MODERATE_TIER_FLOOR = 40


def generate_suggestions(matched, missing, percentage: int) -> list[str]:
    """
    Build the suggestion list:
      1. score band message(s)
      2. missing skills tip (first 3), if any are missing
      3. matched skills tip (first 3), if any matched
    Always 2 to 4 entries.
    """
    suggestions: list[str] = []

    if percentage < LOW_BAND_CEILING:
        suggestions.extend(LOW_MATCH_MESSAGES)
    elif percentage < MEDIUM_BAND_CEILING:
        suggestions.append(MEDIUM_MATCH_MESSAGE)
    else:
        suggestions.append(HIGH_MATCH_MESSAGE)

    if missing:
        top_missing = ", ".join(list(missing)[:SKILLS_PER_TIP])
        suggestions.append(f"Consider adding these skills to your resume: {top_missing}")

    if matched:
        top_matched = ", ".join(list(matched)[:SKILLS_PER_TIP])
        suggestions.append(f"Great! You have these relevant skills: {top_matched}")

    return suggestions


def score_tier(percentage: int) -> str:
    """'strong' (70+), 'moderate' (40-69) or 'weak' (below 40)."""
    if percentage >= STRONG_TIER_FLOOR:
        return "strong"
    if percentage >= MODERATE_TIER_FLOOR:
        return "moderate"
    return "weak"
