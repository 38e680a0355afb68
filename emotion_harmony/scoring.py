from __future__ import annotations

from typing import List

from .chord_selection import get_dominant_gems
from .constants import RESONANCE_BASE, RESONANCE_CULTURAL_BONUS, RESONANCE_GEMS_BONUS
from .models import ChordData, EmotionAnalysis
from .utils import clamp_unit


def calculate_resonance(emotion: EmotionAnalysis, chord_data: ChordData) -> float:
    resonance = RESONANCE_BASE
    if emotion.gems and chord_data.context.gems:
        resonance += RESONANCE_GEMS_BONUS
    if chord_data.cultural_reference:
        resonance += RESONANCE_CULTURAL_BONUS
    return clamp_unit(resonance)


def generate_justification(emotion: EmotionAnalysis, chord_data: ChordData) -> str:
    quality = chord_data.chord.quality or "chord"
    parts: List[str] = [f"This {quality} reflects the {emotion.primary_emotion} emotion"]

    harmonic = chord_data.context.harmonic
    if harmonic == "quartal":
        parts.append("using quartal harmony for modern, open sound")
    elif harmonic == "polychord":
        parts.append("through polychordal tension")
    elif harmonic == "modal_interchange" and chord_data.context.borrowed_from:
        parts.append(f"borrowed from {chord_data.context.borrowed_from}")

    dominant = get_dominant_gems(emotion.gems)
    if dominant:
        parts.append(f"emphasizing the {dominant} quality")

    return ", ".join(parts) + "."
