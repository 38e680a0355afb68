import pytest

from conftest import make_emotion
from emotion_harmony.chord_resolution import resolve_chord
from emotion_harmony.models import ChordContext
from emotion_harmony.rendering_hints import suggest_articulation, suggest_dynamics, suggest_timbre
from emotion_harmony.scoring import calculate_resonance, generate_justification
from emotion_harmony.special_harmony import generate_modal_interchange, generate_quartal_chord


def test_resonance_bonuses(joyful, neutral):
    assert calculate_resonance(neutral, resolve_chord("C", "maj7")) == pytest.approx(0.5)
    gems_pick = resolve_chord("C", "maj7", ChordContext(gems="joy"))
    assert calculate_resonance(joyful, gems_pick) == pytest.approx(0.8)
    assert calculate_resonance(neutral, generate_quartal_chord("C")) == pytest.approx(0.7)
    assert calculate_resonance(joyful, generate_quartal_chord("C", gems="joy")) == 1.0


def test_justification_sentences(joyful, neutral):
    assert (
        generate_justification(joyful, resolve_chord("C", "maj7", ChordContext(gems="joy")))
        == "This maj7 reflects the joy emotion, emphasizing the joy quality."
    )
    wonder = make_emotion(primary_emotion="wonder", gems={"wonder": 0.9})
    assert generate_justification(wonder, generate_quartal_chord("C", gems="wonder")) == (
        "This quartal reflects the wonder emotion, using quartal harmony for modern, open sound, "
        "emphasizing the wonder quality."
    )
    sad = make_emotion(primary_emotion="sadness", gems={"sadness": 0.9})
    assert generate_justification(sad, generate_modal_interchange("A", sad)) == (
        "This m6 reflects the sadness emotion, borrowed from dorian, emphasizing the sadness quality."
    )
    assert generate_justification(neutral, resolve_chord("C", "")) == "This chord reflects the neutral emotion."


def test_timbre_hints():
    assert suggest_timbre(make_emotion(gems={"tenderness": 0.8, "power": 0.9})) == "strings"
    assert suggest_timbre(make_emotion(gems={"power": 0.9})) == "brass"
    assert suggest_timbre(make_emotion(gems={"wonder": 0.9})) == "synth_pad"
    assert suggest_timbre(make_emotion()) == "piano"


@pytest.mark.parametrize(
    "intensity, level",
    [(0.9, "ff"), (0.7, "f"), (0.5, "mf"), (0.3, "p"), (0.2, "pp"), (0.0, "pp")],
)
def test_dynamics_from_intensity(intensity, level):
    assert suggest_dynamics(make_emotion(emotional_intensity=intensity)) == level


def test_articulation_hints():
    assert suggest_articulation(make_emotion(gems={"tension": 0.8})) == "staccato"
    assert suggest_articulation(make_emotion(gems={"peacefulness": 0.8}, arousal=0.9)) == "legato"
    assert suggest_articulation(make_emotion(arousal=0.9)) == "marcato"
    assert suggest_articulation(make_emotion()) == "legato"
