from __future__ import annotations

APP_NAME = "Emotion Harmony Engine"
LOGGER_NAME = "emotion_harmony"

DEFAULT_PITCH = 60
DEFAULT_MIDI_OCTAVE = 4
MIDI_MIN = 0
MIDI_MAX = 127
SEMITONES_PER_OCTAVE = 12
A4_MIDI = 69
A4_FREQUENCY = 440.0

VOICING_FLOOR_MIDI = 55
CLOSE_HIGH_OCTAVE = 4
CLOSE_LOW_OCTAVE = 3
DROP_BASE_OCTAVE = 4
ROOTLESS_BASE_OCTAVE = 3
ROOTLESS_BASS_OCTAVE = 2
SPREAD_BASE_OCTAVE = 2
QUARTAL_BASE_OCTAVE = 3
CLUSTER_HIGH_OCTAVE = 5
CLUSTER_LOW_OCTAVE = 4
CLUSTER_BASE_SIZE = 3
CLUSTER_TENSION_SPAN = 4
QUARTAL_STACK_SIZE = 3
PERFECT_FOURTH_SEMITONES = 5
REDUCED_VOICE_COUNT = 4
DENSE_VOICE_COUNT = 5
MIN_VOICES_AFTER_AVOID = 2

REGISTER_LOW_CEILING = 55
REGISTER_HIGH_FLOOR = 72

HIGH_THRESHOLD = 0.7
ALTERED_TENSION_THRESHOLD = 0.8
ADVANCED_COMPLEXITY_THRESHOLD = 0.6
QUADRANT_THRESHOLD = 0.5
AROUSAL_OCTAVE_THRESHOLD = 0.5
OPEN_VOICING_COMPLEXITY = 0.5

DISSONANCE_STEP = 0.2
COMPLEXITY_NOTE_DIVISOR = 7
COMPLEXITY_EMOTION_WEIGHT = 0.3

RESONANCE_BASE = 0.5
RESONANCE_GEMS_BONUS = 0.3
RESONANCE_CULTURAL_BONUS = 0.2
CLUSTER_VOICE_LEADING_SCORE = 0.2
FIRST_VOICING_SCORE = 1.0

DEFAULT_PROGRESSION_LENGTH = 4
DEFAULT_ALTERNATIVE_COUNT = 3
SERVICE_ALTERNATIVE_COUNT = 4
BEATS_PER_CHORD = 4

CLI_EXIT_INPUT_ERROR = 2
DEFAULT_JSON_INDENT = 2
