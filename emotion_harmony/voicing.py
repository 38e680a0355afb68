from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .constants import (
    AROUSAL_OCTAVE_THRESHOLD,
    CLOSE_HIGH_OCTAVE,
    CLOSE_LOW_OCTAVE,
    CLUSTER_BASE_SIZE,
    CLUSTER_HIGH_OCTAVE,
    CLUSTER_LOW_OCTAVE,
    CLUSTER_TENSION_SPAN,
    CLUSTER_VOICE_LEADING_SCORE,
    DENSE_VOICE_COUNT,
    DROP_BASE_OCTAVE,
    FIRST_VOICING_SCORE,
    HIGH_THRESHOLD,
    MIN_VOICES_AFTER_AVOID,
    OPEN_VOICING_COMPLEXITY,
    PERFECT_FOURTH_SEMITONES,
    QUARTAL_BASE_OCTAVE,
    QUARTAL_STACK_SIZE,
    REDUCED_VOICE_COUNT,
    REGISTER_HIGH_FLOOR,
    REGISTER_LOW_CEILING,
    ROOTLESS_BASE_OCTAVE,
    ROOTLESS_BASS_OCTAVE,
    SEMITONES_PER_OCTAVE,
    SPREAD_BASE_OCTAVE,
    VOICING_FLOOR_MIDI,
)
from .logger_config import logger
from .mappings import (
    EXTENSION_PRIORITY,
    GEMS_VOICING_RULES,
    HARMONIC_STYLE_VOICINGS,
    TONE_PRIORITY_BY_NUMBER,
    VOICING_DENSITY,
    VOICING_STYLES,
)
from .models import ChordOptions, EmotionAnalysis, TheoreticalChord, VoicingInfo
from .music_theory import interval_number, note_pitch_class, pitch_to_note
from .utils import clamp_unit

FLOORED_STYLES = {"close", "open", "drop2", "drop3", "rootless"}


class VoicingSession:
    """Previous-voicing memory for one generation request or one progression."""

    def __init__(self) -> None:
        self.previous: Optional[List[int]] = None

    def score(self, notes: Sequence[int]) -> float:
        return calculate_voice_leading(notes, self.previous)

    def remember(self, notes: Sequence[int]) -> None:
        self.previous = list(notes)

    def reset(self) -> None:
        self.previous = None


def calculate_voice_leading(current: Sequence[int], previous: Optional[Sequence[int]]) -> float:
    if not previous:
        return FIRST_VOICING_SCORE
    voices = min(len(current), len(previous))
    if voices == 0:
        return FIRST_VOICING_SCORE
    movement = sum(abs(current[i] - previous[i]) for i in range(voices))
    return clamp_unit(1.0 - movement / (voices * SEMITONES_PER_OCTAVE))


def resolve_voicing_style(emotion: EmotionAnalysis, options: Optional[ChordOptions] = None) -> str:
    if options is not None and options.voicing_style:
        return options.voicing_style

    for gems_key, style in GEMS_VOICING_RULES:
        if emotion.gems_value(gems_key) > HIGH_THRESHOLD:
            return style

    if emotion.harmonic_style in HARMONIC_STYLE_VOICINGS:
        return HARMONIC_STYLE_VOICINGS[emotion.harmonic_style]

    return "open" if emotion.complexity > OPEN_VOICING_COMPLEXITY else "close"


def pitch_in_octave(pitch_class: int, octave: int) -> int:
    return (octave + 1) * SEMITONES_PER_OCTAVE + pitch_class


def tone_priority(interval: str) -> int:
    number = interval_number(interval)
    if number > 7:
        return EXTENSION_PRIORITY
    return TONE_PRIORITY_BY_NUMBER.get(number, EXTENSION_PRIORITY)


def chord_tones(chord: TheoreticalChord, emotion: EmotionAnalysis) -> List[int]:
    """Distinct pitch classes to voice in chord-formula order, root first, thinned for large chords."""
    root_pc = note_pitch_class(chord.root)
    tones: List[Tuple[int, int, int]] = []
    seen = set()
    for index, (note, interval) in enumerate(zip(chord.notes, chord.intervals)):
        pc = note_pitch_class(note)
        if pc in seen:
            continue
        seen.add(pc)
        priority = 0 if pc == root_pc else tone_priority(interval)
        tones.append((priority, index, pc))

    if len(tones) >= 5:
        limit = DENSE_VOICE_COUNT if emotion.tension > HIGH_THRESHOLD else REDUCED_VOICE_COUNT
        tones = sorted(tones)[:limit]
        tones.sort(key=lambda tone: tone[1])

    pcs = [pc for _, _, pc in tones]
    if root_pc in pcs:
        pcs.remove(root_pc)
        pcs.insert(0, root_pc)
    return pcs


def compact_order(pcs: Sequence[int]) -> List[int]:
    # Close position within one octave; drop voicings start from here.
    root_pc = pcs[0]
    return sorted(pcs, key=lambda pc: (pc - root_pc) % SEMITONES_PER_OCTAVE)


def stack_upwards(pcs: Sequence[int], octave: int) -> List[int]:
    notes: List[int] = []
    for pc in pcs:
        if not notes:
            notes.append(pitch_in_octave(pc, octave))
            continue
        pitch = notes[-1] - (notes[-1] % SEMITONES_PER_OCTAVE) + pc
        if pitch <= notes[-1]:
            pitch += SEMITONES_PER_OCTAVE
        notes.append(pitch)
    return notes


def apply_floor(notes: List[int], floor: int = VOICING_FLOOR_MIDI) -> List[int]:
    while notes and min(notes) < floor:
        notes = [pitch + SEMITONES_PER_OCTAVE for pitch in notes]
    return notes


def base_octave(emotion: EmotionAnalysis) -> int:
    return CLOSE_HIGH_OCTAVE if emotion.arousal > AROUSAL_OCTAVE_THRESHOLD else CLOSE_LOW_OCTAVE


def close_voicing(pcs: Sequence[int], emotion: EmotionAnalysis) -> List[int]:
    return stack_upwards(pcs, base_octave(emotion))


def open_voicing(pcs: Sequence[int], emotion: EmotionAnalysis) -> List[int]:
    notes = close_voicing(pcs, emotion)
    if len(notes) > 1:
        notes[1] += SEMITONES_PER_OCTAVE
    return sorted(notes)


def drop_voicing(pcs: Sequence[int], depth: int) -> List[int]:
    ordered = compact_order(pcs)
    # Rotate so the root sits `depth` voices from the top, then drop it.
    rotated = ordered[depth:] + ordered[:depth]
    stacked = stack_upwards(rotated, DROP_BASE_OCTAVE)
    root_index = len(stacked) - depth
    stacked[root_index] -= SEMITONES_PER_OCTAVE
    return sorted(stacked)


def rootless_voicing(pcs: Sequence[int]) -> Tuple[List[int], int]:
    upper = list(pcs[1:])
    notes = apply_floor(stack_upwards(upper, ROOTLESS_BASE_OCTAVE))
    bass = pitch_in_octave(pcs[0], ROOTLESS_BASS_OCTAVE)
    while bass > notes[0] - SEMITONES_PER_OCTAVE:
        bass -= SEMITONES_PER_OCTAVE
    return notes, bass


def cluster_voicing(root_pc: int, emotion: EmotionAnalysis) -> List[int]:
    octave = CLUSTER_HIGH_OCTAVE if emotion.arousal > AROUSAL_OCTAVE_THRESHOLD else CLUSTER_LOW_OCTAVE
    start = pitch_in_octave(root_pc, octave)
    size = CLUSTER_BASE_SIZE + int(emotion.tension * CLUSTER_TENSION_SPAN + 0.5)
    return [start + step for step in range(size)]


def quartal_voicing(root_pc: int) -> List[int]:
    start = pitch_in_octave(root_pc, QUARTAL_BASE_OCTAVE)
    return [start + step * PERFECT_FOURTH_SEMITONES for step in range(QUARTAL_STACK_SIZE + 1)]


def spread_voicing(pcs: Sequence[int]) -> List[int]:
    return [pitch_in_octave(pc, SPREAD_BASE_OCTAVE + index) for index, pc in enumerate(pcs)]


def remove_avoided(notes: List[int], avoid: Sequence[str], root_pc: int) -> List[int]:
    if not avoid:
        return notes
    avoided = {note_pitch_class(name) for name in avoid}
    avoided.discard(root_pc)
    kept = list(notes)
    for pitch in reversed(notes):
        if len(kept) <= MIN_VOICES_AFTER_AVOID:
            break
        if pitch % SEMITONES_PER_OCTAVE in avoided:
            kept.remove(pitch)
    return kept


def fit_range(notes: List[int], bass: Optional[int], low: int, high: int) -> Tuple[List[int], Optional[int]]:
    lowest = min(notes + ([bass] if bass is not None else []))
    shift = 0
    while lowest + shift < low and max(notes) + shift + SEMITONES_PER_OCTAVE <= high:
        shift += SEMITONES_PER_OCTAVE
    while max(notes) + shift > high and lowest + shift - SEMITONES_PER_OCTAVE >= low:
        shift -= SEMITONES_PER_OCTAVE
    if shift == 0:
        return notes, bass
    return [pitch + shift for pitch in notes], (bass + shift if bass is not None else None)


def register_for(notes: Sequence[int], style: str) -> str:
    if style == "spread":
        return "full"
    mean = sum(notes) / len(notes)
    if mean < REGISTER_LOW_CEILING:
        return "low"
    if mean > REGISTER_HIGH_FLOOR:
        return "high"
    return "mid"


def build_voicing_notes(
    style: str,
    pcs: Sequence[int],
    emotion: EmotionAnalysis,
) -> Tuple[str, List[int], Optional[int]]:
    root_pc = pcs[0]
    if style in ("drop2", "drop3", "rootless") and len(pcs) < 4:
        logger.debug("%s needs four tones, got %d; using close voicing", style, len(pcs))
        style = "close"

    if style == "open":
        return style, open_voicing(pcs, emotion), None
    if style == "drop2":
        return style, drop_voicing(pcs, 2), None
    if style == "drop3":
        return style, drop_voicing(pcs, 3), None
    if style == "rootless":
        notes, bass = rootless_voicing(pcs)
        return style, notes, bass
    if style == "cluster":
        return style, cluster_voicing(root_pc, emotion), None
    if style == "quartal":
        return style, quartal_voicing(root_pc), None
    if style == "spread":
        return style, spread_voicing(pcs), None
    return "close", close_voicing(pcs, emotion), None


def generate_voicing(
    chord: TheoreticalChord,
    emotion: EmotionAnalysis,
    session: VoicingSession,
    options: Optional[ChordOptions] = None,
    style: Optional[str] = None,
) -> VoicingInfo:
    requested = style or resolve_voicing_style(emotion, options)
    if requested not in VOICING_STYLES:
        logger.warning("Unknown voicing style %r, using close voicing", requested)
        requested = "close"

    pcs = chord_tones(chord, emotion)
    voicing_type, notes, bass = build_voicing_notes(requested, pcs, emotion)
    if voicing_type in FLOORED_STYLES:
        notes = apply_floor(notes)

    if options is not None:
        notes = remove_avoided(notes, options.avoid_notes, pcs[0])
        if options.instrument_range is not None:
            low, high = options.instrument_range
            notes, bass = fit_range(notes, bass, low, high)

    notes = sorted(notes)
    if voicing_type == "cluster" and session.previous is not None:
        score = CLUSTER_VOICE_LEADING_SCORE
    else:
        score = session.score(notes)
    session.remember(notes)
    logger.debug(
        "Voiced %s as %s: %s (score %.2f)",
        chord.root,
        voicing_type,
        " ".join(pitch_to_note(pitch) for pitch in notes),
        score,
    )

    return VoicingInfo(
        notes=notes,
        voicing_type=voicing_type,
        bass_note=bass,
        voice_leading_score=score,
        density=VOICING_DENSITY[voicing_type],
        register_range=register_for(notes, voicing_type),
    )
