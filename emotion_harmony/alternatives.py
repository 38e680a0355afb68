from __future__ import annotations

from typing import List, Optional, Set

from .constants import DEFAULT_ALTERNATIVE_COUNT
from .logger_config import logger
from .mappings import ALTERNATIVE_ROOTS, ALTERNATIVE_VOICING_STYLES
from .models import ChordOptions, ChordSuggestion, EmotionAnalysis
from .pipeline import run_pipeline
from .utils import RandomSource, choose, ensure_rng
from .voicing import VoicingSession


def generate_alternatives(
    emotion: EmotionAnalysis,
    count: int = DEFAULT_ALTERNATIVE_COUNT,
    rng: Optional[RandomSource] = None,
) -> List[ChordSuggestion]:
    rng = ensure_rng(rng)
    alternatives: List[ChordSuggestion] = []
    used_symbols: Set[str] = set()

    for index in range(max(count, 0)):
        style = ALTERNATIVE_VOICING_STYLES[index % len(ALTERNATIVE_VOICING_STYLES)]
        root = choose(rng, ALTERNATIVE_ROOTS)
        options = ChordOptions(preferred_root=root, voicing_style=style)
        suggestion = run_pipeline(emotion, options, rng, VoicingSession())
        if suggestion.symbol in used_symbols:
            logger.debug("Skipping duplicate alternative %s", suggestion.symbol)
            continue
        used_symbols.add(suggestion.symbol)
        alternatives.append(suggestion)

    logger.info("Generated %d of %d requested alternatives", len(alternatives), count)
    return alternatives
