from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .constants import BEATS_PER_CHORD, DEFAULT_PROGRESSION_LENGTH, HIGH_THRESHOLD, QUADRANT_THRESHOLD
from .logger_config import logger
from .mappings import (
    EMOTIONAL_JOURNEYS,
    PROGRESSION_PATTERNS,
    PROGRESSION_ROMAN_NUMERALS,
    VOICE_LEADING_RULES,
    VOICE_LEADING_STYLE_FALLBACKS,
)
from .models import (
    ChordOptions,
    ChordProgression,
    EmotionAnalysis,
    ProgressionChord,
    VoiceLeadingInfo,
    VoiceMovement,
)
from .pipeline import run_pipeline
from .utils import RandomSource, ensure_rng
from .voicing import VoicingSession

PEACEFUL_AROUSAL_CEILING = 0.3
SAD_VALENCE_FLOOR = -0.5


def harmonic_function_at(position: int, length: int) -> str:
    if position == 0 or position == length - 1:
        return "tonic"
    if position == length // 2:
        return "dominant"
    return "subdominant"


def roman_numeral_at(position: int) -> str:
    return PROGRESSION_ROMAN_NUMERALS[position % len(PROGRESSION_ROMAN_NUMERALS)]


def describe_emotional_journey(emotion: EmotionAnalysis) -> str:
    if emotion.valence > QUADRANT_THRESHOLD:
        return EMOTIONAL_JOURNEYS["uplifting"]
    if emotion.valence < -QUADRANT_THRESHOLD:
        return EMOTIONAL_JOURNEYS["descending"]
    return EMOTIONAL_JOURNEYS["ambiguous"]


def get_progression_pattern(emotion: EmotionAnalysis) -> List[str]:
    if emotion.valence > HIGH_THRESHOLD:
        name = "happy"
    elif emotion.valence < SAD_VALENCE_FLOOR:
        name = "sad"
    elif emotion.tension > HIGH_THRESHOLD:
        name = "dramatic"
    elif emotion.arousal < PEACEFUL_AROUSAL_CEILING:
        name = "peaceful"
    elif emotion.complexity > HIGH_THRESHOLD:
        name = "mysterious"
    elif emotion.gems_value("nostalgia") > HIGH_THRESHOLD:
        name = "nostalgic"
    elif emotion.gems_value("transcendence") > HIGH_THRESHOLD:
        name = "transcendent"
    else:
        name = "peaceful"
    return list(PROGRESSION_PATTERNS[name])


def describe_tension_curve(values: Sequence[float]) -> str:
    if len(values) < 2 or max(values) == min(values):
        return "plateau"
    peak = max(range(len(values)), key=lambda index: values[index])
    if 0 < peak < len(values) - 1 and values[peak] > values[0] and values[peak] > values[-1]:
        return "arc"
    if values[-1] > values[0]:
        return "rising"
    if values[-1] < values[0]:
        return "falling"
    return "plateau"


def voice_leading_rules(emotion: EmotionAnalysis) -> Mapping[str, Any]:
    style = emotion.harmonic_style or "classical"
    style = VOICE_LEADING_STYLE_FALLBACKS.get(style, style)
    return VOICE_LEADING_RULES.get(style, VOICE_LEADING_RULES["classical"])


def count_large_leaps(movements: Sequence[VoiceMovement], max_interval: int) -> int:
    return sum(1 for movement in movements if abs(movement.interval) > max_interval)


def voice_movements(previous: Sequence[int], current: Sequence[int]) -> List[VoiceMovement]:
    return [
        VoiceMovement(voice=index, from_pitch=before, to_pitch=after, interval=after - before)
        for index, (before, after) in enumerate(zip(previous, current))
    ]


def generate_progression(
    emotion: EmotionAnalysis,
    length: int = DEFAULT_PROGRESSION_LENGTH,
    rng: Optional[RandomSource] = None,
    options: Optional[ChordOptions] = None,
) -> ChordProgression:
    if length < 1:
        raise ValueError(f"Progression length must be at least 1, got {length}")

    rng = ensure_rng(rng)
    session = VoicingSession()
    chords: List[ProgressionChord] = []
    voice_leading: List[VoiceLeadingInfo] = []
    dissonances: List[float] = []
    previous: Optional[Tuple[str, List[int]]] = None
    key = None
    max_interval = voice_leading_rules(emotion)["max_interval"]

    for position in range(length):
        suggestion = run_pipeline(emotion, options, rng, session)
        if key is None:
            key = suggestion.root
        chords.append(
            ProgressionChord(
                symbol=suggestion.symbol,
                duration=BEATS_PER_CHORD,
                tension=emotion.tension,
                function=harmonic_function_at(position, length),
            )
        )
        dissonances.append(suggestion.dissonance_level)
        if previous is not None:
            previous_symbol, previous_notes = previous
            movements = voice_movements(previous_notes, suggestion.voicing.notes)
            voice_leading.append(
                VoiceLeadingInfo(
                    from_chord=previous_symbol,
                    to_chord=suggestion.symbol,
                    voice_movements=movements,
                    smoothness=suggestion.voicing.voice_leading_score,
                    large_leaps=count_large_leaps(movements, max_interval),
                )
            )
        previous = (suggestion.symbol, suggestion.voicing.notes)

    progression = ChordProgression(
        chords=chords,
        key=key,
        mode=emotion.musical_mode,
        tempo=emotion.suggested_tempo,
        total_duration=length * BEATS_PER_CHORD,
        complexity=emotion.complexity,
        tension_curve=describe_tension_curve(dissonances),
        emotional_journey=describe_emotional_journey(emotion),
        roman_numerals=[roman_numeral_at(position) for position in range(length)],
        suggested_pattern=get_progression_pattern(emotion),
        voice_leading=voice_leading,
    )
    logger.info(
        "Assembled %d-chord progression in %s: %s",
        length,
        progression.key,
        " ".join(chord.symbol for chord in chords),
    )
    return progression
