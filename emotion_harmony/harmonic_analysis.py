from __future__ import annotations

from typing import Optional

from .constants import COMPLEXITY_EMOTION_WEIGHT, COMPLEXITY_NOTE_DIVISOR, DISSONANCE_STEP, SEMITONES_PER_OCTAVE
from .mappings import DISSONANT_INTERVALS
from .models import ChordData, EmotionAnalysis, HarmonicAnalysis, TheoreticalChord, TheoreticalContext, VoicingInfo
from .music_theory import note_pitch_class
from .utils import clamp_unit

EXTENSION_MARKERS = ("7", "9", "11", "13")
QUALITY_DIFFERENCE_PENALTY = 0.5


def harmonic_function(quality: str) -> str:
    if "7" in quality:
        return "dominant"
    if "maj" in quality:
        return "tonic"
    if "m" in quality:
        return "subdominant"
    return "color"


def analyze_chord(chord: TheoreticalChord, emotion: EmotionAnalysis) -> HarmonicAnalysis:
    dissonant = sum(1 for interval in chord.intervals if interval in DISSONANT_INTERVALS)
    complexity = len(chord.notes) / COMPLEXITY_NOTE_DIVISOR + emotion.complexity * COMPLEXITY_EMOTION_WEIGHT
    return HarmonicAnalysis(
        function=harmonic_function(chord.quality),
        complexity=clamp_unit(complexity),
        dissonance=clamp_unit(dissonant * DISSONANCE_STEP),
    )


def build_theoretical_context(chord_data: ChordData, voicing: Optional[VoicingInfo] = None) -> TheoreticalContext:
    harmonic = chord_data.context.harmonic
    return TheoreticalContext(
        is_polychord=harmonic == "polychord",
        is_quartal=harmonic == "quartal",
        is_cluster=voicing is not None and voicing.voicing_type == "cluster",
        is_spectral=harmonic == "spectral",
        modal_interchange=harmonic == "modal_interchange",
        chromatic_mediant=False,
        extended_harmony=any(marker in chord_data.symbol for marker in EXTENSION_MARKERS),
    )


def calculate_harmonic_distance(first: TheoreticalChord, second: TheoreticalChord) -> float:
    distance = abs(note_pitch_class(first.root) - note_pitch_class(second.root))
    root_distance = min(distance, SEMITONES_PER_OCTAVE - distance) / 6
    quality_distance = 0.0 if first.quality == second.quality else QUALITY_DIFFERENCE_PENALTY
    return clamp_unit(root_distance + quality_distance)
