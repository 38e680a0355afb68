from __future__ import annotations

from typing import Dict, Optional

from .chord_resolution import pick_root, resolve_chord
from .constants import ADVANCED_COMPLEXITY_THRESHOLD, HIGH_THRESHOLD, QUADRANT_THRESHOLD
from .logger_config import logger
from .mappings import GEMS_MAPPINGS, QUADRANT_QUALITIES, SPECIAL_QUALITIES
from .models import ChordContext, ChordData, ChordOptions, EmotionAnalysis
from .special_harmony import generate_advanced_harmony, generate_special_chord
from .utils import RandomSource, choose


def get_dominant_gems(gems: Optional[Dict[str, float]]) -> Optional[str]:
    if not gems:
        return None
    max_value = 0.0
    dominant = None
    for name, value in gems.items():
        if isinstance(value, (int, float)) and value > max_value:
            max_value = float(value)
            dominant = name
    return dominant


def quadrant_for(emotion: EmotionAnalysis) -> str:
    if emotion.valence > QUADRANT_THRESHOLD and emotion.arousal > QUADRANT_THRESHOLD:
        return "bright"
    if emotion.valence > QUADRANT_THRESHOLD:
        return "peaceful"
    if emotion.valence < -QUADRANT_THRESHOLD and emotion.arousal > QUADRANT_THRESHOLD:
        return "tense"
    return "minor"


def select_from_valence_arousal(
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions],
    rng: RandomSource,
) -> ChordData:
    root = pick_root(emotion, options, rng)
    quadrant = quadrant_for(emotion)
    quality = choose(rng, QUADRANT_QUALITIES[quadrant])
    logger.debug("Quadrant %s selected %s%s", quadrant, root, quality)
    return resolve_chord(root, quality)


def select_from_gems(
    dominant: str,
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions],
    rng: RandomSource,
) -> ChordData:
    quality = choose(rng, GEMS_MAPPINGS[dominant]["chord_qualities"])
    root = pick_root(emotion, options, rng)
    logger.debug("GEMS %s selected quality %s on %s", dominant, quality, root)
    if quality in SPECIAL_QUALITIES:
        return generate_special_chord(quality, root, emotion, rng, gems=dominant)
    return resolve_chord(root, quality, ChordContext(gems=dominant))


def select_from_emotion(
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions],
    rng: RandomSource,
) -> ChordData:
    if options is not None and options.preferred_quality:
        root = pick_root(emotion, options, rng)
        return resolve_chord(root, options.preferred_quality)

    dominant = get_dominant_gems(emotion.gems)
    if dominant is not None and dominant in GEMS_MAPPINGS:
        return select_from_gems(dominant, emotion, options, rng)

    if emotion.tension > HIGH_THRESHOLD and emotion.complexity > ADVANCED_COMPLEXITY_THRESHOLD:
        return generate_advanced_harmony(emotion, options, rng)

    return select_from_valence_arousal(emotion, options, rng)
