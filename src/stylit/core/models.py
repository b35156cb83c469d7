"""
Data model for the Stylit engine.

Color records are frozen once computed. Fit records are plain dataclasses
that the engine turns into dictionaries at its boundary with to_dict().
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ColorSample:
    """A hex color with its derived Lab coordinates."""

    hex: str
    L: float
    a: float
    b: float

    @property
    def lab(self) -> Tuple[float, float, float]:
        return (self.L, self.a, self.b)


@dataclass(frozen=True)
class PaletteColor:
    """One swatch of the seasonal palette catalog."""

    name: str
    hex: str
    lab: Tuple[float, float, float]
    season: str
    group: str


@dataclass(frozen=True)
class NamedColorMatch:
    hex: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {'hex': self.hex, 'name': self.name}


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one garment color against the season palettes."""

    status: str  # 'ok' | 'unclassified' | 'ambiguous'
    dominant_hex: str
    lab: Optional[Tuple[float, float, float]] = None
    season_tag: Optional[str] = None
    group_tag: Optional[str] = None
    nearest_palette_color: Optional[PaletteColor] = None
    min_delta_e: Optional[float] = None
    runner_up_delta_e: Optional[float] = None

    @property
    def is_ok(self) -> bool:
        return self.status == 'ok'

    def to_dict(self) -> Dict[str, Any]:
        nearest = None
        if self.nearest_palette_color is not None:
            nearest = {
                'name': self.nearest_palette_color.name,
                'hex': self.nearest_palette_color.hex,
                'season': self.nearest_palette_color.season,
                'group': self.nearest_palette_color.group,
            }
        return {
            'status': self.status,
            'season_tag': self.season_tag,
            'group_tag': self.group_tag,
            'dominant_hex': self.dominant_hex,
            'lab': _rounded(self.lab),
            'nearest_palette_color': nearest,
            'min_delta_e': _round_or_none(self.min_delta_e),
            'runner_up_delta_e': _round_or_none(self.runner_up_delta_e),
        }


BODY_ZONES = ('height', 'chest', 'bust', 'waist', 'hips', 'shoulder', 'inseam', 'sleeve')

CHART_FIELDS = ('chest', 'shoulder', 'sleeve', 'top_length', 'waist', 'hips',
                'inseam', 'outseam', 'rise', 'dress_length')


@dataclass
class BodyMeasurementSet:
    """Body measurements in inches; every zone is independently optional."""

    height: Optional[float] = None
    chest: Optional[float] = None
    bust: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    shoulder: Optional[float] = None
    inseam: Optional[float] = None
    sleeve: Optional[float] = None
    weight: Optional[float] = None

    def get(self, zone: str) -> Optional[float]:
        return getattr(self, zone, None)

    def missing(self, zones) -> List[str]:
        return [zone for zone in zones if self.get(zone) is None]

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


@dataclass
class GarmentSizeRow:
    """One size-chart row with garment measurements in inches."""

    size_label: str
    position: int
    measurements: Dict[str, Optional[float]] = field(default_factory=dict)

    def get(self, field_name: str) -> Optional[float]:
        return self.measurements.get(field_name)


@dataclass(frozen=True)
class EaseProfile:
    """Target ease (inches) per body zone for one category and fit intent."""

    category: str
    fit_intent: str
    fabric_stretch: bool
    deltas: Dict[str, float]

    def target_for(self, zone: str, body: Optional[float]) -> Optional[float]:
        if body is None:
            return None
        return body + self.deltas.get(zone, 0.0)


@dataclass
class ZoneScore:
    zone: str
    score: float
    valid: bool
    garment: Optional[float] = None
    target: Optional[float] = None
    body: Optional[float] = None
    too_tight: bool = False

    @property
    def ease(self) -> Optional[float]:
        if self.garment is None or self.body is None:
            return None
        return self.garment - self.body

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': round(self.score, 4),
            'valid': self.valid,
            'garment': _round_or_none(self.garment),
            'target': _round_or_none(self.target),
            'body': _round_or_none(self.body),
            'ease': _round_or_none(self.ease),
            'too_tight': self.too_tight,
        }


@dataclass
class SizeScore:
    """Aggregate score of one size-chart candidate."""

    size_label: str
    position: int
    aggregate_score: float
    zones: Dict[str, ZoneScore] = field(default_factory=dict)
    missing_fields: List[str] = field(default_factory=list)

    @property
    def too_tight_flags(self) -> List[str]:
        return [name for name, zone in self.zones.items() if zone.too_tight]

    @property
    def complete(self) -> bool:
        """Row carries every chart measurement its category requires."""
        return not self.missing_fields

    def to_dict(self) -> Dict[str, Any]:
        return {
            'size_label': self.size_label,
            'aggregate_score': round(self.aggregate_score, 4),
            'too_tight_flags': self.too_tight_flags,
            'missing_fields': list(self.missing_fields),
            'zones': {name: zone.to_dict() for name, zone in self.zones.items()},
        }


@dataclass
class FitRecommendation:
    status: str  # 'OK' | 'INSUFFICIENT_DATA'
    risk: str
    confidence: int
    recommended_size: Optional[str] = None
    backup_size: Optional[str] = None
    insights: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    category: Optional[str] = None
    fit_intent: Optional[str] = None
    fabric_stretch: Optional[bool] = None
    scores: List[SizeScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status,
            'recommended_size': self.recommended_size,
            'backup_size': self.backup_size,
            'risk': self.risk,
            'confidence': self.confidence,
            'insights': list(self.insights),
            'missing': list(self.missing),
            'category': self.category,
            'fit_intent': self.fit_intent,
            'fabric_stretch': self.fabric_stretch,
            'scores': [score.to_dict() for score in self.scores],
        }


@dataclass
class SuitabilityVerdict:
    color: Optional[Dict[str, Any]]
    body: Optional[Dict[str, Any]]
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'color': self.color,
            'body': self.body,
            'summary': self.summary,
        }


def _round_or_none(value: Optional[float], digits: int = 4) -> Optional[float]:
    return None if value is None else round(float(value), digits)


def _rounded(lab: Optional[Tuple[float, float, float]]) -> Optional[Dict[str, float]]:
    if lab is None:
        return None
    return {'L': round(lab[0], 4), 'a': round(lab[1], 4), 'b': round(lab[2], 4)}
