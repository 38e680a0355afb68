from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AcousticFeatures(FrozenCamelModel):
    energy: float = 0.5
    valence: float = 0.5
    danceability: float = 0.5
    acousticness: float = 0.5
    instrumentalness: float = 0.5
    speechiness: float = 0.1
    liveness: float = 0.2


class EmotionAnalysis(FrozenCamelModel):
    primary_emotion: str = "neutral"
    secondary_emotions: List[str] = Field(default_factory=list)
    emotional_intensity: float = 0.5
    valence: float = 0.0
    arousal: float = 0.5
    tension: float = 0.0
    complexity: float = 0.0
    musical_mode: str = "major"
    suggested_tempo: int = 120
    gems: Optional[Dict[str, float]] = None
    cultural_context: Optional[str] = None
    harmonic_style: Optional[str] = None
    acoustic_features: Optional[AcousticFeatures] = None

    def gems_value(self, name: str) -> float:
        if not self.gems:
            return 0.0
        return float(self.gems.get(name) or 0.0)


class ChordOptions(FrozenCamelModel):
    preferred_root: Optional[str] = None
    preferred_quality: Optional[str] = None
    voicing_style: Optional[str] = None
    avoid_notes: List[str] = Field(default_factory=list)
    instrument_range: Optional[Tuple[int, int]] = None


class TheoreticalChord(CamelModel):
    root: str
    quality: str
    notes: List[str] = Field(default_factory=list)
    intervals: List[str] = Field(default_factory=list)


class ChordContext(CamelModel):
    gems: Optional[str] = None
    harmonic: Optional[str] = None
    borrowed_from: Optional[str] = None
    fallback: bool = False


class ChordData(CamelModel):
    symbol: str
    chord: TheoreticalChord
    context: ChordContext = Field(default_factory=ChordContext)
    cultural_reference: Optional[str] = None


class VoicingInfo(CamelModel):
    notes: List[int] = Field(default_factory=list)
    voicing_type: str = "close"
    bass_note: Optional[int] = None
    voice_leading_score: float = 1.0
    density: str = "medium"
    register_range: str = Field(default="mid", alias="register")


class TheoreticalContext(CamelModel):
    is_polychord: bool = False
    is_quartal: bool = False
    is_cluster: bool = False
    is_spectral: bool = False
    modal_interchange: bool = False
    chromatic_mediant: bool = False
    extended_harmony: bool = False


class HarmonicAnalysis(CamelModel):
    function: str = "color"
    complexity: float = 0.0
    dissonance: float = 0.0


class ChordSuggestion(CamelModel):
    symbol: str
    root: str
    quality: str
    notes: List[str] = Field(default_factory=list)
    intervals: List[str] = Field(default_factory=list)
    midi_notes: List[int] = Field(default_factory=list)
    voicing: VoicingInfo
    harmonic_function: str = "color"
    harmonic_complexity: float = 0.0
    dissonance_level: float = 0.0
    theoretical_context: TheoreticalContext = Field(default_factory=TheoreticalContext)
    emotional_resonance: float = 0.5
    emotional_justification: str = ""
    cultural_reference: Optional[str] = None
    timbre: Optional[str] = None
    dynamics: Optional[str] = None
    articulation: Optional[str] = None


class ProgressionChord(CamelModel):
    symbol: str
    duration: int = 4
    tension: float = 0.0
    function: str = "tonic"


class VoiceMovement(CamelModel):
    voice: int
    from_pitch: int = Field(alias="from")
    to_pitch: int = Field(alias="to")
    interval: int


class VoiceLeadingInfo(CamelModel):
    from_chord: str
    to_chord: str
    voice_movements: List[VoiceMovement] = Field(default_factory=list)
    smoothness: float = 0.0
    large_leaps: int = 0


class ChordProgression(CamelModel):
    chords: List[ProgressionChord] = Field(default_factory=list)
    key: str = "C"
    mode: str = "major"
    tempo: int = 120
    total_duration: int = 0
    complexity: float = 0.0
    tension_curve: str = "plateau"
    emotional_journey: str = ""
    roman_numerals: List[str] = Field(default_factory=list)
    suggested_pattern: List[str] = Field(default_factory=list)
    voice_leading: List[VoiceLeadingInfo] = Field(default_factory=list)


class CulturalSuggestion(CamelModel):
    name: str
    emotion: str
    notes: List[str] = Field(default_factory=list)
    characteristic: str = ""


class CulturalAlternatives(CamelModel):
    indian: Optional[CulturalSuggestion] = None
    arabic: Optional[CulturalSuggestion] = None


class EmotionChordResponse(CamelModel):
    emotion: EmotionAnalysis
    primary_chord: ChordSuggestion
    alternative_chords: List[ChordSuggestion] = Field(default_factory=list)
    chord_progression: Optional[ChordProgression] = None
    cultural_alternatives: Optional[CulturalAlternatives] = None
