import random

import pytest
from pydantic import ValidationError

from conftest import make_emotion
from emotion_harmony import generate_alternatives, generate_chord, generate_progression
from emotion_harmony.mappings import GEMS_MAPPINGS, QUADRANT_QUALITIES, VOICE_LEADING_RULES
from emotion_harmony.models import ChordOptions, VoicingInfo


def test_mapping_tables_reject_assignment():
    with pytest.raises(TypeError):
        GEMS_MAPPINGS["joy"] = {"chord_qualities": ["maj7"]}
    with pytest.raises(TypeError):
        GEMS_MAPPINGS["joy"]["chord_qualities"] = ("m7",)
    with pytest.raises(TypeError):
        QUADRANT_QUALITIES["bright"] = ("m7",)
    with pytest.raises(TypeError):
        VOICE_LEADING_RULES["jazz"]["max_interval"] = 2


def test_mapping_table_lists_are_tuples():
    assert all(isinstance(qualities, tuple) for qualities in QUADRANT_QUALITIES.values())
    assert all(isinstance(entry["chord_qualities"], tuple) for entry in GEMS_MAPPINGS.values())


def test_input_records_are_frozen():
    emotion = make_emotion(valence=0.4)
    with pytest.raises(ValidationError):
        emotion.valence = 0.9
    options = ChordOptions(preferred_root="D")
    with pytest.raises(ValidationError):
        options.preferred_root = "E"
    assert emotion.valence == 0.4
    assert options.preferred_root == "D"


def test_generation_leaves_caller_inputs_untouched():
    gems = {"joy": 0.9, "wonder": 0.3}
    emotion = make_emotion(valence=0.8, arousal=0.8, gems=gems)
    options = ChordOptions(preferred_root="F", avoid_notes=["A"], voicing_style="open")
    emotion_before = emotion.model_dump()
    options_before = options.model_dump()

    generate_chord(emotion, options, rng=random.Random(3))
    generate_progression(emotion, 4, rng=random.Random(3), options=options)
    generate_alternatives(emotion, 3, rng=random.Random(3))

    assert gems == {"joy": 0.9, "wonder": 0.3}
    assert emotion.model_dump() == emotion_before
    assert options.model_dump() == options_before


def test_voicing_register_keeps_its_json_key():
    voicing = VoicingInfo(notes=[60, 64, 67], register_range="high")
    dumped = voicing.model_dump(by_alias=True)
    assert dumped["register"] == "high"
    assert "registerRange" not in dumped
    assert VoicingInfo.model_validate({"notes": [48], "register": "low"}).register_range == "low"
