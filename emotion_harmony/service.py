from __future__ import annotations

from typing import Any, Mapping, Optional

from .alternatives import generate_alternatives
from .constants import HIGH_THRESHOLD, SERVICE_ALTERNATIVE_COUNT
from .logger_config import logger
from .mappings import CULTURAL_MAPPINGS
from .models import (
    AcousticFeatures,
    CulturalAlternatives,
    CulturalSuggestion,
    EmotionAnalysis,
    EmotionChordResponse,
)
from .pipeline import generate_chord
from .progression import generate_progression
from .utils import RandomSource, clamp_unit, ensure_rng

CULTURAL_LABELS = {"indian": "Raga", "arabic": "Maqam"}


def generate_acoustic_features(emotion: EmotionAnalysis) -> AcousticFeatures:
    energy = emotion.arousal
    valence = (emotion.valence + 1) / 2
    danceability = emotion.arousal * 0.8
    acousticness = 1 - emotion.arousal
    instrumentalness = 0.5
    speechiness = 0.1
    liveness = 0.2

    if emotion.gems_value("power") > HIGH_THRESHOLD:
        energy = max(energy, 0.8)
        danceability = max(danceability, 0.7)
    if emotion.gems_value("peacefulness") > HIGH_THRESHOLD:
        energy = min(energy, 0.4)
        acousticness = max(acousticness, 0.7)
    if emotion.gems_value("tenderness") > HIGH_THRESHOLD:
        acousticness = max(acousticness, 0.6)
        energy = min(energy, 0.5)
    if emotion.gems_value("transcendence") > HIGH_THRESHOLD:
        instrumentalness = max(instrumentalness, 0.8)
        acousticness = max(acousticness, 0.6)

    if emotion.musical_mode in ("minor", "dorian"):
        valence = min(valence, 0.6)
    elif emotion.musical_mode == "major":
        valence = max(valence, 0.4)

    if emotion.cultural_context == "indian":
        instrumentalness = max(instrumentalness, 0.7)
        acousticness = max(acousticness, 0.6)
    elif emotion.cultural_context == "arabic":
        instrumentalness = max(instrumentalness, 0.6)

    return AcousticFeatures(
        energy=clamp_unit(energy),
        valence=clamp_unit(valence),
        danceability=clamp_unit(danceability),
        acousticness=clamp_unit(acousticness),
        instrumentalness=clamp_unit(instrumentalness),
        speechiness=clamp_unit(speechiness),
        liveness=clamp_unit(liveness),
    )


def matches_emotion(primary: str, target: str) -> bool:
    if not primary:
        return False
    primary = primary.lower()
    target = target.lower()
    return primary in target or target in primary


def find_cultural_suggestion(
    tradition: str,
    table: Mapping[str, Mapping[str, Any]],
    primary_emotion: str,
) -> Optional[CulturalSuggestion]:
    for name, info in table.items():
        if matches_emotion(primary_emotion, info["emotion"]):
            return CulturalSuggestion(
                name=name,
                emotion=info["emotion"],
                notes=list(info["notes"]),
                characteristic=f"{CULTURAL_LABELS[tradition]} {name} for {info['emotion']}",
            )
    return None


def generate_cultural_alternatives(emotion: EmotionAnalysis) -> CulturalAlternatives:
    return CulturalAlternatives(
        indian=find_cultural_suggestion("indian", CULTURAL_MAPPINGS["indian"], emotion.primary_emotion),
        arabic=find_cultural_suggestion("arabic", CULTURAL_MAPPINGS["arabic"], emotion.primary_emotion),
    )


def build_emotion_chord_response(
    emotion: EmotionAnalysis,
    include_progression: bool = False,
    include_cultural_alternatives: bool = False,
    rng: Optional[RandomSource] = None,
    alternative_count: int = SERVICE_ALTERNATIVE_COUNT,
) -> EmotionChordResponse:
    rng = ensure_rng(rng)
    enriched = emotion.model_copy(update={"acoustic_features": generate_acoustic_features(emotion)})
    logger.info(
        "Building chord response for %s (valence=%.2f arousal=%.2f)",
        enriched.primary_emotion,
        enriched.valence,
        enriched.arousal,
    )

    response = EmotionChordResponse(
        emotion=enriched,
        primary_chord=generate_chord(enriched, rng=rng),
        alternative_chords=generate_alternatives(enriched, alternative_count, rng=rng),
    )
    if include_progression:
        response.chord_progression = generate_progression(enriched, rng=rng)
    if include_cultural_alternatives:
        response.cultural_alternatives = generate_cultural_alternatives(enriched)
    return response
