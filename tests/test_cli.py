import json

from emotion_harmony.__main__ import main

EMOTION = {
    "primaryEmotion": "joy",
    "valence": 0.8,
    "arousal": 0.7,
    "tension": 0.2,
    "complexity": 0.3,
    "emotionalIntensity": 0.8,
    "musicalMode": "major",
    "suggestedTempo": 128,
    "gems": {"joy": 0.9, "wonder": 0.3},
}


def write_emotion(tmp_path, payload):
    path = tmp_path / "emotion.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_cli_prints_camel_case_response(tmp_path, capsys):
    path = write_emotion(tmp_path, EMOTION)
    assert main([path, "--seed", "3", "--progression", "--cultural"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["emotion"]["primaryEmotion"] == "joy"
    assert payload["primaryChord"]["voicing"]["voiceLeadingScore"] == 1.0
    assert len(payload["alternativeChords"]) <= 4
    assert len(payload["chordProgression"]["chords"]) == 4
    assert payload["culturalAlternatives"]["indian"]["name"] == "Hamsadhwani"


def test_cli_is_deterministic_with_seed(tmp_path, capsys):
    path = write_emotion(tmp_path, EMOTION)
    main([path, "--seed", "9", "--alternatives", "2"])
    first = capsys.readouterr().out
    main([path, "--seed", "9", "--alternatives", "2"])
    second = capsys.readouterr().out
    assert first == second
    assert len(json.loads(first)["alternativeChords"]) <= 2


def test_cli_reads_stdin(monkeypatch, capsys):
    import io

    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(EMOTION)))
    assert main(["-", "--seed", "1", "--indent", "0"]) == 0
    assert "primaryChord" in json.loads(capsys.readouterr().out)


def test_cli_rejects_bad_input(tmp_path, capsys):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert main([str(broken)]) == 2
    assert "error" in capsys.readouterr().err

    invalid = write_emotion(tmp_path, {"valence": "very"})
    assert main([invalid]) == 2

    assert main([str(tmp_path / "missing.json")]) == 2
