from __future__ import annotations

from typing import Optional

from .chord_selection import select_from_emotion
from .constants import DEFAULT_MIDI_OCTAVE
from .harmonic_analysis import analyze_chord, build_theoretical_context
from .logger_config import logger
from .models import ChordData, ChordOptions, ChordSuggestion, EmotionAnalysis
from .music_theory import note_to_midi
from .rendering_hints import suggest_articulation, suggest_dynamics, suggest_timbre
from .scoring import calculate_resonance, generate_justification
from .utils import RandomSource, ensure_rng
from .voicing import VoicingSession, generate_voicing


def build_chord_suggestion(
    chord_data: ChordData,
    emotion: EmotionAnalysis,
    session: VoicingSession,
    options: Optional[ChordOptions] = None,
) -> ChordSuggestion:
    chord = chord_data.chord
    voicing = generate_voicing(chord, emotion, session, options)
    analysis = analyze_chord(chord, emotion)

    return ChordSuggestion(
        symbol=chord_data.symbol,
        root=chord.root,
        quality=chord.quality,
        notes=list(chord.notes),
        intervals=list(chord.intervals),
        midi_notes=[note_to_midi(note, DEFAULT_MIDI_OCTAVE) for note in chord.notes],
        voicing=voicing,
        harmonic_function=analysis.function,
        harmonic_complexity=analysis.complexity,
        dissonance_level=analysis.dissonance,
        theoretical_context=build_theoretical_context(chord_data, voicing),
        emotional_resonance=calculate_resonance(emotion, chord_data),
        emotional_justification=generate_justification(emotion, chord_data),
        cultural_reference=chord_data.cultural_reference,
        timbre=suggest_timbre(emotion),
        dynamics=suggest_dynamics(emotion),
        articulation=suggest_articulation(emotion),
    )


def run_pipeline(
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions],
    rng: RandomSource,
    session: VoicingSession,
) -> ChordSuggestion:
    chord_data = select_from_emotion(emotion, options, rng)
    return build_chord_suggestion(chord_data, emotion, session, options)


def generate_chord(
    emotion: EmotionAnalysis,
    options: Optional[ChordOptions] = None,
    rng: Optional[RandomSource] = None,
    session: Optional[VoicingSession] = None,
) -> ChordSuggestion:
    suggestion = run_pipeline(emotion, options, ensure_rng(rng), session or VoicingSession())
    logger.info(
        "Generated %s for %s (%s voicing)",
        suggestion.symbol,
        emotion.primary_emotion,
        suggestion.voicing.voicing_type,
    )
    return suggestion
