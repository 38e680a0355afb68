from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Tuple


def _frozen(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _frozen(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_frozen(item) for item in value)
    return value


SPECIAL_QUALITIES: Tuple[str, ...] = ("quartal", "spectral", "polychord")

GEMS_MAPPINGS: Mapping[str, Mapping[str, Any]] = _frozen({
    "joy": {
        "chord_qualities": ["maj7", "maj9", "maj13", "6/9", "add9", "maj7#11"],
        "voicing_preference": "open",
        "harmonic_features": ["bright", "consonant", "stable"],
    },
    "sadness": {
        "chord_qualities": ["m7", "m9", "m11", "m6", "mMaj7", "m7b5"],
        "voicing_preference": "close",
        "harmonic_features": ["dark", "introspective", "descending"],
    },
    "tension": {
        "chord_qualities": ["7alt", "7b9", "7#9", "dim7", "aug", "7#11", "13b9"],
        "voicing_preference": "cluster",
        "harmonic_features": ["dissonant", "unstable", "chromatic"],
    },
    "wonder": {
        "chord_qualities": ["maj7#11", "maj13#11", "sus", "quartal", "maj7/5"],
        "voicing_preference": "spread",
        "harmonic_features": ["ethereal", "floating", "modal"],
    },
    "peacefulness": {
        "chord_qualities": ["maj7", "add9", "sus2", "6", "maj9"],
        "voicing_preference": "open",
        "harmonic_features": ["consonant", "stable", "spacious"],
    },
    "power": {
        "chord_qualities": ["5", "sus4", "7", "maj", "m"],
        "voicing_preference": "dense",
        "harmonic_features": ["strong", "direct", "forceful"],
    },
    "tenderness": {
        "chord_qualities": ["maj7", "m7", "maj9", "m9", "6"],
        "voicing_preference": "close",
        "harmonic_features": ["gentle", "warm", "intimate"],
    },
    "nostalgia": {
        "chord_qualities": ["m6", "mMaj7", "maj6", "m7", "dim7"],
        "voicing_preference": "rootless",
        "harmonic_features": ["bittersweet", "yearning", "chromatic"],
    },
    "transcendence": {
        "chord_qualities": ["maj7#11", "spectral", "quartal", "polychord"],
        "voicing_preference": "spread",
        "harmonic_features": ["otherworldly", "expansive", "overtone-based"],
    },
})

CULTURAL_MAPPINGS: Mapping[str, Mapping[str, Mapping[str, Any]]] = _frozen({
    "indian": {
        "Hamsadhwani": {"emotion": "joy", "notes": ["C", "D", "E", "G", "B"]},
        "Gujari Todi": {"emotion": "compassion", "notes": ["C", "Db", "Eb", "F#", "G", "Ab", "B"]},
        "Bhairav": {"emotion": "austere", "notes": ["C", "Db", "E", "F", "G", "Ab", "B"]},
        "Yaman": {"emotion": "romantic", "notes": ["C", "D", "E", "F#", "G", "A", "B"]},
        "Marwa": {"emotion": "sunset_longing", "notes": ["C", "Db", "E", "F#", "G", "A", "B"]},
    },
    "arabic": {
        "Rast": {"emotion": "pride", "notes": ["C", "D", "Eb+", "F", "G", "A", "Bb"]},
        "Saba": {"emotion": "sadness", "notes": ["D", "Eb", "F", "Gb", "A", "Bb", "C"]},
        "Hijaz": {"emotion": "mystical", "notes": ["D", "Eb", "F#", "G", "A", "Bb", "C"]},
        "Bayati": {"emotion": "tender", "notes": ["D", "Eb+", "F", "G", "A", "Bb", "C"]},
    },
})

CULTURAL_ROOTS: Mapping[str, Any] = _frozen({
    "indian": {"non_negative": "C", "negative": "G"},
    "arabic": {"any": "D"},
})

BRIGHT_ROOTS: Tuple[str, ...] = ("C", "G", "D", "A", "E")
DARK_ROOTS: Tuple[str, ...] = ("F", "Bb", "Eb", "Ab", "Db")
AMBIGUOUS_ROOTS: Tuple[str, ...] = ("B", "F#", "C#")

QUADRANT_QUALITIES: Mapping[str, Tuple[str, ...]] = _frozen({
    "bright": ["maj7", "maj9", "6/9", "maj13"],
    "peaceful": ["maj7", "add9", "sus2", "6"],
    "tense": ["7b9", "m7b5", "dim7", "7alt"],
    "minor": ["m7", "m9", "m6", "mMaj7"],
})

ALTERED_DOMINANTS: Tuple[str, ...] = ("7b9", "7#9", "7alt", "13b9#11")

ALTERATION_FLAGS: Tuple[Tuple[str, str, str], ...] = (
    ("b9", "2m", "9m"),
    ("#9", "2A", "9A"),
    ("#11", "4A", "11A"),
    ("b13", "6m", "13m"),
)

EXTENDED_QUALITIES: Tuple[str, ...] = ("maj7#11", "m11", "maj13", "m13")

MODAL_INTERCHANGE_BORROWINGS: Mapping[str, Mapping[str, str]] = _frozen({
    "melancholic": {"chord": "m6", "mode": "dorian", "description": "Borrowed from dorian mode"},
    "nostalgic": {"chord": "mMaj7", "mode": "melodic minor", "description": "Borrowed from melodic minor"},
    "dark": {"chord": "dim7", "mode": "locrian", "description": "Borrowed from locrian mode"},
    "mystical": {"chord": "maj7#5", "mode": "lydian augmented", "description": "Borrowed from lydian augmented"},
})

POLYCHORD_MAP: Mapping[str, Tuple[str, ...]] = _frozen({
    "dramatic": ["C/F#", "Db/C", "Eb/E"],
    "mystical": ["D/Eb", "F/Gb", "E/F"],
    "expansive": ["C/G", "F/C", "Bb/F"],
})

POLYCHORD_REFERENCES: Mapping[str, str] = _frozen({
    "dramatic": "Stravinsky Rite of Spring",
    "mystical": "Modern film scoring",
    "expansive": "Modern film scoring",
})

QUARTAL_INTERVALS: Tuple[str, ...] = ("1P", "4P", "4P", "4P")
QUARTAL_REFERENCE = "McCoy Tyner/modern jazz quartal harmony"

SPECTRAL_HARMONICS: Tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13)
SPECTRAL_FUNDAMENTAL_OCTAVE = 2
SPECTRAL_MAX_NOTES = 6
SPECTRAL_REFERENCE = "Spectral music (Grisey/Murail)"

# Pitch-class distance from the fundamental to the label naming that partial.
SPECTRAL_LABELS_BY_SEMITONE: Mapping[int, str] = _frozen({
    0: "1P",
    7: "5P",
    4: "3M",
    10: "7m",
    2: "9M",
    6: "#11",
})

VOICING_STYLES: Tuple[str, ...] = (
    "close",
    "open",
    "drop2",
    "drop3",
    "rootless",
    "cluster",
    "quartal",
    "spread",
)

GEMS_VOICING_RULES: Tuple[Tuple[str, str], ...] = (
    ("tension", "cluster"),
    ("wonder", "quartal"),
    ("transcendence", "spread"),
    ("nostalgia", "rootless"),
)

HARMONIC_STYLE_VOICINGS: Mapping[str, str] = _frozen({
    "jazz": "drop2",
    "contemporary": "quartal",
    "experimental": "cluster",
})

DISSONANT_INTERVALS: Tuple[str, ...] = ("2m", "2A", "4A", "5d", "7M", "7d")

ALTERNATIVE_VOICING_STYLES: Tuple[str, ...] = ("drop2", "rootless", "quartal", "spread")
ALTERNATIVE_ROOTS: Tuple[str, ...] = ("C", "F", "G", "D", "A", "E", "B", "Bb", "Eb", "Ab")

PROGRESSION_ROMAN_NUMERALS: Tuple[str, ...] = ("I", "V", "vi", "IV", "ii", "iii", "vii°")

PROGRESSION_PATTERNS: Mapping[str, Tuple[str, ...]] = _frozen({
    "happy": ["I", "V", "vi", "IV"],
    "sad": ["vi", "IV", "I", "V"],
    "dramatic": ["i", "bVII", "bVI", "bVII"],
    "peaceful": ["I", "vi", "ii", "V"],
    "mysterious": ["i", "bII", "i", "V"],
    "nostalgic": ["I", "iii", "vi", "IV"],
    "transcendent": ["I", "bVII", "IV", "I"],
})

EMOTIONAL_JOURNEYS: Mapping[str, str] = _frozen({
    "uplifting": "Uplifting progression moving through bright harmonies",
    "descending": "Descending progression exploring darker territories",
    "ambiguous": "Ambiguous progression balancing light and shadow",
})

DYNAMICS_LEVELS: Tuple[Tuple[float, str], ...] = (
    (0.8, "ff"),
    (0.6, "f"),
    (0.4, "mf"),
    (0.2, "p"),
)

VOICING_DENSITY: Mapping[str, str] = _frozen({
    "close": "medium",
    "open": "medium",
    "drop2": "medium",
    "drop3": "medium",
    "rootless": "sparse",
    "cluster": "dense",
    "quartal": "medium",
    "spread": "sparse",
})

# Voice priority by interval number when thinning chords of five or more tones.
TONE_PRIORITY_BY_NUMBER: Mapping[int, int] = _frozen({
    1: 0,
    2: 1,
    3: 1,
    4: 1,
    6: 2,
    7: 2,
    5: 4,
})
EXTENSION_PRIORITY = 3

VOICE_LEADING_RULES: Mapping[str, Mapping[str, Any]] = _frozen({
    "classical": {"max_interval": 8, "preferred_interval": 4, "avoid_parallels": True, "smoothness": 0.8},
    "jazz": {"max_interval": 12, "preferred_interval": 7, "avoid_parallels": False, "smoothness": 0.6},
    "contemporary": {"max_interval": 24, "preferred_interval": 12, "avoid_parallels": False, "smoothness": 0.4},
})

VOICE_LEADING_STYLE_FALLBACKS: Mapping[str, str] = _frozen({
    "experimental": "contemporary",
})
