from __future__ import annotations

from typing import List, Optional

from .chord_resolution import pick_root, resolve_chord
from .constants import ALTERED_TENSION_THRESHOLD, HIGH_THRESHOLD
from .logger_config import logger
from .mappings import (
    ALTERATION_FLAGS,
    ALTERED_DOMINANTS,
    EXTENDED_QUALITIES,
    MODAL_INTERCHANGE_BORROWINGS,
    POLYCHORD_MAP,
    POLYCHORD_REFERENCES,
    QUARTAL_INTERVALS,
    QUARTAL_REFERENCE,
    SPECTRAL_FUNDAMENTAL_OCTAVE,
    SPECTRAL_HARMONICS,
    SPECTRAL_LABELS_BY_SEMITONE,
    SPECTRAL_MAX_NOTES,
    SPECTRAL_REFERENCE,
)
from .models import ChordContext, ChordData, ChordOptions, EmotionAnalysis, TheoreticalChord
from .music_theory import (
    build_chord,
    frequency_to_midi,
    get_chord,
    midi_to_frequency,
    normalize_note,
    note_to_midi,
    transpose_note,
)
from .utils import RandomSource, choose


def generate_quartal_chord(root: str, gems: Optional[str] = None) -> ChordData:
    root = normalize_note(root)
    notes = [root]
    current = root
    for interval in QUARTAL_INTERVALS[1:]:
        current = transpose_note(current, interval)
        notes.append(current)

    return ChordData(
        symbol=f"{root}sus4(add11)",
        chord=TheoreticalChord(root=root, quality="quartal", notes=notes, intervals=list(QUARTAL_INTERVALS)),
        context=ChordContext(gems=gems, harmonic="quartal"),
        cultural_reference=QUARTAL_REFERENCE,
    )


def spectral_partials(root: str, upper: bool) -> List[int]:
    fundamental = note_to_midi(root, SPECTRAL_FUNDAMENTAL_OCTAVE)
    harmonics = SPECTRAL_HARMONICS[6:] if upper else SPECTRAL_HARMONICS[2:8]
    base_frequency = midi_to_frequency(fundamental)
    return [int(round(frequency_to_midi(base_frequency * harmonic))) for harmonic in harmonics]


def generate_spectral_chord(root: str, emotion: EmotionAnalysis, gems: Optional[str] = None) -> ChordData:
    root = normalize_note(root)
    fundamental = note_to_midi(root, SPECTRAL_FUNDAMENTAL_OCTAVE)
    upper = emotion.gems_value("transcendence") > HIGH_THRESHOLD

    notes: List[str] = []
    intervals: List[str] = []
    seen = set()
    for pitch in spectral_partials(root, upper):
        offset = (pitch - fundamental) % 12
        label = SPECTRAL_LABELS_BY_SEMITONE.get(offset)
        if label is None or offset in seen:
            continue
        seen.add(offset)
        notes.append(transpose_note(root, label))
        intervals.append(label)
        if len(notes) >= SPECTRAL_MAX_NOTES:
            break

    return ChordData(
        symbol=f"{root}spectral",
        chord=TheoreticalChord(root=root, quality="spectral", notes=notes, intervals=intervals),
        context=ChordContext(gems=gems, harmonic="spectral"),
        cultural_reference=SPECTRAL_REFERENCE,
    )


def classify_polychord(emotion: EmotionAnalysis) -> str:
    if emotion.tension > HIGH_THRESHOLD:
        return "dramatic"
    if emotion.gems_value("wonder") > HIGH_THRESHOLD:
        return "mystical"
    return "expansive"


def generate_polychord(emotion: EmotionAnalysis, rng: RandomSource, gems: Optional[str] = None) -> ChordData:
    kind = classify_polychord(emotion)
    selected = choose(rng, POLYCHORD_MAP[kind])
    bottom_symbol, top_symbol = selected.split("/")
    bottom = get_chord(bottom_symbol)
    top = get_chord(top_symbol)

    return ChordData(
        symbol=selected,
        chord=TheoreticalChord(
            root=bottom.root,
            quality="polychord",
            notes=bottom.notes + top.notes,
            intervals=bottom.intervals + top.intervals,
        ),
        context=ChordContext(gems=gems, harmonic="polychord"),
        cultural_reference=POLYCHORD_REFERENCES[kind],
    )


def build_altered_chord(root: str, quality: str) -> TheoreticalChord:
    base = build_chord(root, "7")
    notes = list(base.notes)
    intervals = list(base.intervals)
    for flag, step, label in ALTERATION_FLAGS:
        if flag in quality:
            notes.append(transpose_note(base.root, step))
            intervals.append(label)
    return TheoreticalChord(root=base.root, quality=quality, notes=notes, intervals=intervals)


def classify_modal_borrowing(emotion: EmotionAnalysis) -> str:
    if emotion.gems_value("sadness") > HIGH_THRESHOLD:
        return "melancholic"
    if emotion.gems_value("nostalgia") > HIGH_THRESHOLD:
        return "nostalgic"
    if emotion.tension > HIGH_THRESHOLD:
        return "dark"
    return "mystical"


def generate_modal_interchange(root: str, emotion: EmotionAnalysis) -> ChordData:
    borrowed = MODAL_INTERCHANGE_BORROWINGS[classify_modal_borrowing(emotion)]
    return resolve_chord(
        root,
        borrowed["chord"],
        ChordContext(harmonic="modal_interchange", borrowed_from=borrowed["mode"]),
        cultural_reference=borrowed["description"],
    )


def generate_advanced_harmony(
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions],
    rng: RandomSource,
) -> ChordData:
    root = pick_root(emotion, options, rng)

    if emotion.tension > ALTERED_TENSION_THRESHOLD:
        quality = choose(rng, ALTERED_DOMINANTS)
        logger.debug("Advanced harmony: altered dominant %s%s", root, quality)
        return ChordData(
            symbol=root + quality,
            chord=build_altered_chord(root, quality),
            context=ChordContext(harmonic="altered"),
        )

    if emotion.complexity > HIGH_THRESHOLD:
        logger.debug("Advanced harmony: modal interchange on %s", root)
        return generate_modal_interchange(root, emotion)

    quality = choose(rng, EXTENDED_QUALITIES)
    logger.debug("Advanced harmony: extended %s%s", root, quality)
    return resolve_chord(root, quality, ChordContext(harmonic="extended"))


def generate_special_chord(
    kind: str,
    root: str,
    emotion: EmotionAnalysis,
    rng: RandomSource,
    gems: Optional[str] = None,
) -> ChordData:
    if kind == "quartal":
        return generate_quartal_chord(root, gems)
    if kind == "spectral":
        return generate_spectral_chord(root, emotion, gems)
    if kind == "polychord":
        return generate_polychord(emotion, rng, gems)
    raise ValueError(f"Unknown special harmony: {kind!r}")
