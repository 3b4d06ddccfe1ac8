"""
Text preprocessing for resume / job description matching
--------------------------------------------------------

Turns raw text into the word tokens the frequency matcher counts.

Steps:
  1. Convert to lowercase
  2. Treat anything that isn't a letter, digit or underscore as a separator
  3. Drop tokens of 2 characters or fewer ("go", "js", "a", ...)
  4. Drop stopwords like 'the', 'with', 'should'
"""

from nltk.tokenize import RegexpTokenizer

# Fixed stopword table. Kept small on purpose: the match score depends on
# exactly these words being removed, so don't swap in nltk's english list.
STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "as", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "do", "does", "did", "will", "would", "could", "should", "may", "might", "must",
        "can", "shall", "this", "that", "these", "those", "i", "you", "he", "she", "it",
        "we", "they", "me", "him", "her", "us", "them", "my", "your", "his", "its",
        "our", "their", "from", "up", "about", "into", "over", "after",
    }
)

MIN_TOKEN_LENGTH = 3

# ASCII word characters only; accented letters split words apart
_word_tokenizer = RegexpTokenizer(r"[a-z0-9_]+")


def tokenize(text: str) -> list[str]:
    """
    Split text into normalized word tokens.

    Example:
        "The QUICK brown fox, jumped over THE lazy dog!"
        -> ["quick", "brown", "fox", "jumped", "lazy", "dog"]

    Empty input gives an empty list.
    """
    tokens = _word_tokenizer.tokenize(text.lower())
    return [t for t in tokens if len(t) >= MIN_TOKEN_LENGTH and t not in STOP_WORDS]

