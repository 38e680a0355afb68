from __future__ import annotations

from typing import Optional

from .constants import QUADRANT_THRESHOLD
from .logger_config import logger
from .mappings import AMBIGUOUS_ROOTS, BRIGHT_ROOTS, CULTURAL_ROOTS, DARK_ROOTS
from .models import ChordContext, ChordData, ChordOptions, EmotionAnalysis
from .music_theory import UnknownChordError, build_chord, normalize_note
from .utils import RandomSource, choose

FALLBACK_QUALITY = "maj"


def select_root(emotion: EmotionAnalysis, rng: RandomSource) -> str:
    if emotion.cultural_context == "indian":
        roots = CULTURAL_ROOTS["indian"]
        return roots["non_negative"] if emotion.valence >= 0 else roots["negative"]
    if emotion.cultural_context == "arabic":
        return CULTURAL_ROOTS["arabic"]["any"]

    if emotion.valence > QUADRANT_THRESHOLD:
        return choose(rng, BRIGHT_ROOTS)
    if emotion.valence < -QUADRANT_THRESHOLD:
        return choose(rng, DARK_ROOTS)
    return choose(rng, AMBIGUOUS_ROOTS)


def pick_root(emotion: EmotionAnalysis, options: Optional[ChordOptions], rng: RandomSource) -> str:
    if options is not None and options.preferred_root:
        return normalize_note(options.preferred_root)
    return select_root(emotion, rng)


def resolve_chord(
    root: str,
    quality: str,
    context: Optional[ChordContext] = None,
    cultural_reference: Optional[str] = None,
) -> ChordData:
    context = context or ChordContext()
    try:
        chord = build_chord(root, quality)
    except UnknownChordError as exc:
        logger.warning("Unresolvable chord %s%s (%s), falling back to %s major", root, quality, exc, root)
        chord = build_chord(root, FALLBACK_QUALITY)
        context = context.model_copy(update={"fallback": True})
        return ChordData(
            symbol=chord.root,
            chord=chord,
            context=context,
            cultural_reference=cultural_reference,
        )

    return ChordData(
        symbol=chord.root + quality,
        chord=chord,
        context=context,
        cultural_reference=cultural_reference,
    )
