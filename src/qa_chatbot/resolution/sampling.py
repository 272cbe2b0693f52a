import random
from typing import List, Optional, Sequence
from ..models import Entry


def get_random_samples(
    entries: Sequence[Entry],
    count: int,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Pick up to ``count`` distinct questions at random.

    Never repeats an entry and never returns more questions than entries.
    """
    if count <= 0 or not entries:
        return []

    rng = rng or random
    indices = rng.sample(range(len(entries)), min(count, len(entries)))
    return [entries[idx].question for idx in indices]
