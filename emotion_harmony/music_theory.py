from __future__ import annotations

import math
import re
from typing import Dict, Tuple

from .constants import A4_FREQUENCY, A4_MIDI, DEFAULT_MIDI_OCTAVE, SEMITONES_PER_OCTAVE
from .models import TheoreticalChord

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

LETTERS = "CDEFGAB"

LETTER_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}

MAJOR_SCALE_STEPS = [0, 2, 4, 5, 7, 9, 11]

PERFECT_NUMBERS = {1, 4, 5}

ACCIDENTAL_TRANSLATION = str.maketrans({"♯": "#", "♭": "b"})

NOTE_RE = re.compile(r"^([A-Ga-g])([#b]*)$")
SYMBOL_RE = re.compile(r"^([A-Ga-g][#b]*)(.*)$")
INTERVAL_RE = re.compile(r"^(\d+)(P|M|m|A+|d+)$")

INTERVAL_SHORTHAND = {
    "b2": "2m", "#2": "2A", "b3": "3m", "#4": "4A", "b5": "5d", "#5": "5A",
    "b6": "6m", "b7": "7m", "b9": "9m", "#9": "9A", "#11": "11A", "b13": "13m",
}

CHORD_FORMULAS: Dict[str, Tuple[str, ...]] = {
    "": ("1P", "3M", "5P"),
    "m": ("1P", "3m", "5P"),
    "5": ("1P", "5P"),
    "sus2": ("1P", "2M", "5P"),
    "sus4": ("1P", "4P", "5P"),
    "dim": ("1P", "3m", "5d"),
    "aug": ("1P", "3M", "5A"),
    "6": ("1P", "3M", "5P", "6M"),
    "m6": ("1P", "3m", "5P", "6M"),
    "6/9": ("1P", "3M", "5P", "6M", "9M"),
    "add9": ("1P", "3M", "5P", "9M"),
    "madd9": ("1P", "3m", "5P", "9M"),
    "7": ("1P", "3M", "5P", "7m"),
    "maj7": ("1P", "3M", "5P", "7M"),
    "m7": ("1P", "3m", "5P", "7m"),
    "mMaj7": ("1P", "3m", "5P", "7M"),
    "m7b5": ("1P", "3m", "5d", "7m"),
    "dim7": ("1P", "3m", "5d", "7d"),
    "maj7#5": ("1P", "3M", "5A", "7M"),
    "7sus4": ("1P", "4P", "5P", "7m"),
    "7b9": ("1P", "3M", "5P", "7m", "9m"),
    "7#9": ("1P", "3M", "5P", "7m", "9A"),
    "7#11": ("1P", "3M", "5P", "7m", "11A"),
    "7alt": ("1P", "3M", "5d", "7m", "9m", "9A", "13m"),
    "maj7#11": ("1P", "3M", "5P", "7M", "11A"),
    "9": ("1P", "3M", "5P", "7m", "9M"),
    "maj9": ("1P", "3M", "5P", "7M", "9M"),
    "m9": ("1P", "3m", "5P", "7m", "9M"),
    "maj9#11": ("1P", "3M", "5P", "7M", "9M", "11A"),
    "11": ("1P", "5P", "7m", "9M", "11P"),
    "m11": ("1P", "3m", "5P", "7m", "9M", "11P"),
    "13": ("1P", "3M", "5P", "7m", "9M", "13M"),
    "13b9": ("1P", "3M", "5P", "7m", "9m", "13M"),
    "13b9#11": ("1P", "3M", "5P", "7m", "9m", "11A", "13M"),
    "maj13": ("1P", "3M", "5P", "7M", "9M", "13M"),
    "m13": ("1P", "3m", "5P", "7m", "9M", "11P", "13M"),
    "maj13#11": ("1P", "3M", "5P", "7M", "9M", "11A", "13M"),
}

QUALITY_ALIASES = {
    "M": "",
    "maj": "",
    "Maj": "",
    "major": "",
    "min": "m",
    "-": "m",
    "minor": "m",
    "sus": "sus4",
    "maj6": "6",
    "Maj6": "6",
    "MAJ6": "6",
    "69": "6/9",
    "6add9": "6/9",
    "M7": "maj7",
    "Maj7": "maj7",
    "min7": "m7",
    "-7": "m7",
    "mM7": "mMaj7",
    "mmaj7": "mMaj7",
    "m(maj7)": "mMaj7",
    "minmaj7": "mMaj7",
    "ø": "m7b5",
    "m7-5": "m7b5",
    "o": "dim",
    "o7": "dim7",
    "°7": "dim7",
    "+": "aug",
    "alt": "7alt",
    "M9": "maj9",
    "min9": "m9",
    "min11": "m11",
    "M13": "maj13",
    "min13": "m13",
}


class UnknownChordError(ValueError):
    pass


def normalize_accidentals(text: str) -> str:
    return text.strip().translate(ACCIDENTAL_TRANSLATION)


def parse_note(note: str) -> Tuple[str, int]:
    match = NOTE_RE.match(normalize_accidentals(note))
    if not match:
        raise ValueError(f"Invalid note name: {note!r}")
    letter, accidentals = match.groups()
    alteration = accidentals.count("#") - accidentals.count("b")
    return letter.upper(), alteration


def format_note(letter: str, alteration: int) -> str:
    if alteration > 0:
        return letter + "#" * alteration
    return letter + "b" * (-alteration)


def normalize_note(note: str) -> str:
    return format_note(*parse_note(note))


def note_pitch_class(note: str) -> int:
    letter, alteration = parse_note(note)
    return (LETTER_SEMITONES[letter] + alteration) % SEMITONES_PER_OCTAVE


def note_to_midi(note: str, octave: int = DEFAULT_MIDI_OCTAVE) -> int:
    letter, alteration = parse_note(note)
    return (octave + 1) * SEMITONES_PER_OCTAVE + LETTER_SEMITONES[letter] + alteration


def pitch_to_note(pitch: int) -> str:
    return NOTE_NAMES[pitch % 12] + str(pitch // 12 - 1)


def midi_to_frequency(pitch: float) -> float:
    return A4_FREQUENCY * math.pow(2, (pitch - A4_MIDI) / SEMITONES_PER_OCTAVE)


def frequency_to_midi(frequency: float) -> float:
    return A4_MIDI + SEMITONES_PER_OCTAVE * math.log2(frequency / A4_FREQUENCY)


def parse_interval(label: str) -> Tuple[int, int]:
    label = INTERVAL_SHORTHAND.get(label, label)
    match = INTERVAL_RE.match(label)
    if not match:
        raise ValueError(f"Invalid interval label: {label!r}")
    number = int(match.group(1))
    quality = match.group(2)
    if number < 1:
        raise ValueError(f"Invalid interval label: {label!r}")

    simple = (number - 1) % 7
    octaves = (number - 1) // 7
    semitones = MAJOR_SCALE_STEPS[simple] + octaves * SEMITONES_PER_OCTAVE
    perfect = (simple + 1) in PERFECT_NUMBERS

    if quality in ("P", "M"):
        if (quality == "P") != perfect:
            raise ValueError(f"Invalid interval quality: {label!r}")
    elif quality == "m":
        if perfect:
            raise ValueError(f"Invalid interval quality: {label!r}")
        semitones -= 1
    elif quality.startswith("A"):
        semitones += len(quality)
    else:
        semitones -= len(quality) if perfect else len(quality) + 1

    return number, semitones


def interval_number(label: str) -> int:
    return parse_interval(label)[0]


def transpose_note(note: str, interval: str) -> str:
    letter, alteration = parse_note(note)
    number, semitones = parse_interval(interval)
    target_letter = LETTERS[(LETTERS.index(letter) + number - 1) % 7]
    target_pc = (LETTER_SEMITONES[letter] + alteration + semitones) % 12
    offset = (target_pc - LETTER_SEMITONES[target_letter] + 6) % 12 - 6
    return format_note(target_letter, offset)


def split_symbol(symbol: str) -> Tuple[str, str]:
    match = SYMBOL_RE.match(normalize_accidentals(symbol))
    if not match:
        raise UnknownChordError(f"Chord symbol has no valid root: {symbol!r}")
    root, quality = match.groups()
    try:
        root = normalize_note(root)
    except ValueError as exc:
        raise UnknownChordError(f"Chord symbol has no valid root: {symbol!r}") from exc
    return root, quality.strip()


def canonical_quality(quality: str) -> str:
    if quality in CHORD_FORMULAS:
        return quality
    alias = QUALITY_ALIASES.get(quality)
    if alias is None:
        raise UnknownChordError(f"Unknown chord quality: {quality!r}")
    return alias


def build_chord(root: str, quality: str = "") -> TheoreticalChord:
    root = normalize_note(root)
    intervals = list(CHORD_FORMULAS[canonical_quality(quality)])
    notes = [transpose_note(root, interval) for interval in intervals]
    return TheoreticalChord(root=root, quality=quality, notes=notes, intervals=intervals)


def get_chord(symbol: str) -> TheoreticalChord:
    root, quality = split_symbol(symbol)
    return build_chord(root, quality)


def is_known_chord(symbol: str) -> bool:
    try:
        get_chord(symbol)
    except UnknownChordError:
        return False
    return True