import random

import pytest

from conftest import make_emotion
from emotion_harmony import build_emotion_chord_response
from emotion_harmony.service import generate_acoustic_features, generate_cultural_alternatives, matches_emotion


def test_acoustic_features_from_axes():
    features = generate_acoustic_features(make_emotion(valence=0.6, arousal=0.8))
    assert features.energy == pytest.approx(0.8)
    assert features.valence == pytest.approx(0.8)
    assert features.danceability == pytest.approx(0.64)
    assert features.acousticness == pytest.approx(0.2)
    assert features.instrumentalness == pytest.approx(0.5)
    assert features.speechiness == pytest.approx(0.1)
    assert features.liveness == pytest.approx(0.2)


def test_acoustic_feature_adjustments():
    powerful = generate_acoustic_features(make_emotion(arousal=0.2, gems={"power": 0.9}))
    assert powerful.energy == pytest.approx(0.8)
    assert powerful.danceability == pytest.approx(0.7)

    peaceful = generate_acoustic_features(make_emotion(arousal=0.9, gems={"peacefulness": 0.9}))
    assert peaceful.energy == pytest.approx(0.4)
    assert peaceful.acousticness == pytest.approx(0.7)

    minor = generate_acoustic_features(make_emotion(valence=1.0, musical_mode="minor"))
    assert minor.valence == pytest.approx(0.6)
    major = generate_acoustic_features(make_emotion(valence=-1.0, musical_mode="major"))
    assert major.valence == pytest.approx(0.4)

    indian = generate_acoustic_features(make_emotion(arousal=0.9, cultural_context="indian"))
    assert indian.instrumentalness == pytest.approx(0.7)
    assert indian.acousticness == pytest.approx(0.6)


def test_cultural_alternatives_match_by_substring():
    joy = generate_cultural_alternatives(make_emotion(primary_emotion="Joy"))
    assert joy.indian.name == "Hamsadhwani"
    assert joy.indian.characteristic == "Raga Hamsadhwani for joy"
    assert joy.indian.notes == ["C", "D", "E", "G", "B"]
    assert joy.arabic is None

    tender = generate_cultural_alternatives(make_emotion(primary_emotion="tenderness"))
    assert tender.arabic.name == "Bayati"
    assert tender.arabic.characteristic == "Maqam Bayati for tender"

    assert generate_cultural_alternatives(make_emotion(primary_emotion="sadness")).arabic.name == "Saba"
    assert not matches_emotion("", "joy")


def test_response_attaches_features_without_mutating_input(joyful):
    response = build_emotion_chord_response(joyful, rng=random.Random(11))
    assert joyful.acoustic_features is None
    assert response.emotion.acoustic_features is not None
    assert response.emotion.primary_emotion == "joy"
    assert response.primary_chord.voicing.voice_leading_score == 1.0
    assert len(response.alternative_chords) <= 4
    assert response.chord_progression is None
    assert response.cultural_alternatives is None


def test_response_with_progression_and_cultural(joyful):
    response = build_emotion_chord_response(
        joyful,
        include_progression=True,
        include_cultural_alternatives=True,
        rng=random.Random(11),
    )
    assert len(response.chord_progression.chords) == 4
    assert len(response.chord_progression.voice_leading) == 3
    assert response.cultural_alternatives.indian.name == "Hamsadhwani"
    payload = response.model_dump(by_alias=True)
    assert set(payload) >= {"emotion", "primaryChord", "alternativeChords", "chordProgression"}
    assert "acousticFeatures" in payload["emotion"]


def test_response_is_reproducible(melancholic):
    first = build_emotion_chord_response(melancholic, True, True, rng=random.Random(5))
    second = build_emotion_chord_response(melancholic, True, True, rng=random.Random(5))
    assert first.model_dump() == second.model_dump()
