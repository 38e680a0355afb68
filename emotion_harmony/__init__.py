from .alternatives import generate_alternatives
from .models import (
    ChordOptions,
    ChordProgression,
    ChordSuggestion,
    EmotionAnalysis,
    EmotionChordResponse,
    VoicingInfo,
)
from .music_theory import UnknownChordError, get_chord
from .pipeline import generate_chord
from .progression import generate_progression, get_progression_pattern
from .service import build_emotion_chord_response
from .voicing import VoicingSession

__all__ = [
    "ChordOptions",
    "ChordProgression",
    "ChordSuggestion",
    "EmotionAnalysis",
    "EmotionChordResponse",
    "UnknownChordError",
    "VoicingInfo",
    "VoicingSession",
    "build_emotion_chord_response",
    "generate_alternatives",
    "generate_chord",
    "generate_progression",
    "get_chord",
    "get_progression_pattern",
]
