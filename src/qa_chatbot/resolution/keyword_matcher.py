"""
Keyword-overlap matching between a user utterance and cached questions.

Cheap, explainable lexical scoring: exact token equality or substring
containment earns credit, no external model involved.
"""
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from ..models import Entry

_NON_WORD = re.compile(r"[^\w\s]")

# Utterance tokens must be longer than this to count
UTTERANCE_MIN_TOKEN_LENGTH = 3
# Substring containment only applies to tokens longer than this
SUBSTRING_MIN_LENGTH = 4

OVERLAP_WEIGHT = 10
RATIO_WEIGHT = 5
MIN_ACCEPTED_SCORE = 5


@dataclass(frozen=True)
class KeywordMatch:
    entry: Entry
    score: float


def tokenize(text: str, min_length: int = 0) -> List[str]:
    """
    Lowercase, strip punctuation, split on whitespace.

    :param text: Text to tokenize
    :param min_length: Drop tokens shorter than this
    """
    cleaned = _NON_WORD.sub("", text.lower())
    return [token for token in cleaned.split() if len(token) >= min_length]


def count_overlap(utterance_tokens: Sequence[str], entry_tokens: Sequence[str]) -> int:
    """Credit each utterance token at most once against the entry tokens."""
    overlap = 0
    for user_token in utterance_tokens:
        for entry_token in entry_tokens:
            if (
                user_token == entry_token
                or (len(user_token) >= SUBSTRING_MIN_LENGTH and user_token in entry_token)
                or (len(entry_token) >= SUBSTRING_MIN_LENGTH and entry_token in user_token)
            ):
                overlap += 1
                break
    return overlap


def score_tokens(utterance_tokens: Sequence[str], entry_tokens: Sequence[str]) -> float:
    """
    Score = overlap * 10 + (overlap / max(len(u), len(e))) * 5.
    """
    overlap = count_overlap(utterance_tokens, entry_tokens)
    denominator = max(len(utterance_tokens), len(entry_tokens))
    match_ratio = overlap / denominator if denominator else 0.0
    return overlap * OVERLAP_WEIGHT + match_ratio * RATIO_WEIGHT


def match(utterance: str, entries: Iterable[Entry]) -> Optional[KeywordMatch]:
    """
    Find the best-scoring entry for an utterance.

    Ties keep the earliest entry in iteration order. Matches scoring 5 or
    less are rejected.

    :param utterance: Free-text user question
    :param entries: Candidate entries, in snapshot order
    :return: KeywordMatch or None
    """
    utterance_tokens = tokenize(utterance, min_length=UTTERANCE_MIN_TOKEN_LENGTH)

    best_entry: Optional[Entry] = None
    best_score = 0.0

    for entry in entries:
        score = score_tokens(utterance_tokens, tokenize(entry.question))
        if score > best_score:
            best_score = score
            best_entry = entry

    if best_entry is None or best_score <= MIN_ACCEPTED_SCORE:
        return None

    return KeywordMatch(entry=best_entry, score=best_score)
