from __future__ import annotations

from .constants import HIGH_THRESHOLD
from .mappings import DYNAMICS_LEVELS
from .models import EmotionAnalysis


def suggest_timbre(emotion: EmotionAnalysis) -> str:
    if emotion.gems_value("tenderness") > HIGH_THRESHOLD:
        return "strings"
    if emotion.gems_value("power") > HIGH_THRESHOLD:
        return "brass"
    if emotion.gems_value("wonder") > HIGH_THRESHOLD:
        return "synth_pad"
    return "piano"


def suggest_dynamics(emotion: EmotionAnalysis) -> str:
    for threshold, level in DYNAMICS_LEVELS:
        if emotion.emotional_intensity > threshold:
            return level
    return "pp"


def suggest_articulation(emotion: EmotionAnalysis) -> str:
    if emotion.gems_value("tension") > HIGH_THRESHOLD:
        return "staccato"
    if emotion.gems_value("peacefulness") > HIGH_THRESHOLD:
        return "legato"
    if emotion.arousal > HIGH_THRESHOLD:
        return "marcato"
    return "legato"
