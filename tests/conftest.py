import random
from typing import Sequence

import pytest

from emotion_harmony.models import EmotionAnalysis


class SequenceRandom:
    """Stub random source that replays scripted values in a loop."""

    def __init__(self, values: Sequence[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def make_emotion(**fields) -> EmotionAnalysis:
    return EmotionAnalysis(**fields)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def joyful():
    return make_emotion(
        primary_emotion="joy",
        valence=0.8,
        arousal=0.8,
        tension=0.1,
        complexity=0.2,
        emotional_intensity=0.9,
        gems={"joy": 0.9},
    )


@pytest.fixture
def tense():
    return make_emotion(primary_emotion="anxiety", valence=-0.3, arousal=0.7, tension=0.95, complexity=0.8)


@pytest.fixture
def melancholic():
    return make_emotion(
        primary_emotion="sadness",
        valence=-0.7,
        arousal=0.3,
        tension=0.3,
        complexity=0.4,
        musical_mode="minor",
        gems={"sadness": 0.8, "nostalgia": 0.4},
    )


@pytest.fixture
def neutral():
    return make_emotion()


@pytest.fixture
def sample_emotions(joyful, tense, melancholic, neutral):
    return [
        joyful,
        tense,
        melancholic,
        neutral,
        make_emotion(primary_emotion="wonder", valence=0.3, arousal=0.4, gems={"wonder": 0.9}),
        make_emotion(
            primary_emotion="transcendence",
            valence=0.2,
            arousal=0.6,
            tension=0.8,
            gems={"transcendence": 0.95},
        ),
        make_emotion(primary_emotion="serenity", valence=0.7, arousal=0.2, harmonic_style="jazz"),
        make_emotion(primary_emotion="anger", valence=-0.8, arousal=0.9, tension=0.6, harmonic_style="experimental"),
        make_emotion(primary_emotion="devotion", valence=-0.2, cultural_context="indian", gems={"tenderness": 0.8}),
        make_emotion(primary_emotion="longing", valence=0.1, cultural_context="arabic", harmonic_style="contemporary"),
        make_emotion(primary_emotion="dread", valence=-0.4, tension=0.75, complexity=0.9),
        make_emotion(primary_emotion="unease", tension=0.75, complexity=0.65),
    ]
