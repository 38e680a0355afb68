import math

import pytest

from emotion_harmony.music_theory import (
    UnknownChordError,
    build_chord,
    get_chord,
    is_known_chord,
    midi_to_frequency,
    note_pitch_class,
    note_to_midi,
    parse_interval,
    pitch_to_note,
    transpose_note,
)


def test_get_chord_minor_ninth():
    chord = get_chord("Dm9")
    assert chord.root == "D"
    assert chord.quality == "m9"
    assert chord.notes == ["D", "F", "A", "C", "E"]
    assert chord.intervals == ["1P", "3m", "5P", "7m", "9M"]


def test_transpose_spells_by_letter():
    assert transpose_note("C", "7m") == "Bb"
    assert transpose_note("D", "3m") == "F"
    assert transpose_note("Eb", "7d") == "Dbb"
    assert transpose_note("F#", "3M") == "A#"
    assert transpose_note("C", "#11") == "F#"


def test_parse_interval():
    assert parse_interval("1P") == (1, 0)
    assert parse_interval("5d") == (5, 6)
    assert parse_interval("7d") == (7, 9)
    assert parse_interval("11A") == (11, 18)
    assert parse_interval("#11") == (11, 18)
    assert parse_interval("13m") == (13, 20)
    with pytest.raises(ValueError):
        parse_interval("3P")
    with pytest.raises(ValueError):
        parse_interval("x")


def test_note_to_midi_and_pitch_class():
    assert note_to_midi("C", 4) == 60
    assert note_to_midi("A", 4) == 69
    assert note_to_midi("Bb", 3) == 58
    assert note_to_midi("c♯", 4) == 61
    assert note_pitch_class("Cb") == 11
    assert pitch_to_note(70) == "A#4"
    assert pitch_to_note(55) == "G3"


def test_midi_to_frequency():
    assert math.isclose(midi_to_frequency(69), 440.0)
    assert math.isclose(midi_to_frequency(81), 880.0)


def test_quality_aliases_keep_literal_quality():
    chord = get_chord("Cmaj6")
    assert chord.quality == "maj6"
    assert chord.notes == ["C", "E", "G", "A"]
    assert build_chord("G", "mM7").notes == ["G", "Bb", "D", "F#"]
    assert get_chord("C♯m7").root == "C#"


def test_unknown_chords_raise():
    with pytest.raises(UnknownChordError):
        get_chord("Cmaj7/5")
    with pytest.raises(UnknownChordError):
        get_chord("H7")
    assert not is_known_chord("Cspectral")
    assert is_known_chord("Bb13b9#11")
