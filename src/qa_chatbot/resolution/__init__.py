"""
Answer resolution engine.

Key components:
- EntryCache: atomically swapped snapshot of all entries
- keyword_matcher: lexical overlap scoring
- IntentResolver: intent label → entry lookup
- ResolutionPipeline: intent tier, keyword tier, fallback
"""
from .entry_cache import EntryCache
from .keyword_matcher import KeywordMatch, match, tokenize, score_tokens
from .intent_resolver import IntentResolver
from .resolution_pipeline import (
    FALLBACK_REPLY,
    ResolutionPipeline,
    classify_intent_confidence,
    classify_keyword_score,
)
from .sampling import get_random_samples

__all__ = [
    "EntryCache",
    "KeywordMatch",
    "match",
    "tokenize",
    "score_tokens",
    "IntentResolver",
    "FALLBACK_REPLY",
    "ResolutionPipeline",
    "classify_intent_confidence",
    "classify_keyword_score",
    "get_random_samples",
]
