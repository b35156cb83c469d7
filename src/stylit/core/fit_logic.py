"""
Fit & Size Logic

Recommends a catalog size from body measurements and the product's size
chart, without guessing:

- EaseProfileEngine: category x fit intent x stretch -> target ease per zone
- SizeScorer: per-zone banded scores with an unbounded too-small penalty,
  weighted into one aggregate per chart row
- RiskEstimator: risk tier, capped confidence and a backup size

Missing user or chart measurements end the pipeline with INSUFFICIENT_DATA
and the exact list of missing fields.
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .fabric_logic import has_stretch, product_material
from .measurements import format_inches_as_fraction
from .models import (BodyMeasurementSet, EaseProfile, FitRecommendation,
                     GarmentSizeRow, SizeScore, ZoneScore)
from .rules.ease_profiles import (CATEGORIES, DEFAULT_CATEGORY, EASE_TABLE, FIT_INTENTS,
                                  FIT_KEYWORDS, REQUIRED_CHART_FIELDS,
                                  REQUIRED_USER_FIELDS, SCORED_ZONES, STRETCH_EASE)

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = 'INSUFFICIENT_DATA'

# (max |garment - target| in inches, score); anything looser scores LOOSE_SCORE.
# Limits are 2, 5 and 9 cm rounded to the quarter inch.
DEFAULT_SCORE_BANDS = ((0.75, 6.0), (2.0, 4.0), (3.5, 2.0))
LOOSE_SCORE = 1.0


class EaseProfileEngine:
    """Resolves category, fit intent and stretch into an EaseProfile."""

    def __init__(self, stretch_detector: Callable[[str], bool] = has_stretch,
                 default_fit_intent: str = 'regular'):
        """
        Args:
            stretch_detector: material text -> bool, used when a product has
                no explicit stretch flag
            default_fit_intent: intent used when neither product nor caller says
        """
        if default_fit_intent not in FIT_INTENTS:
            raise ValueError(f"Unknown fit intent: {default_fit_intent}")
        self.stretch_detector = stretch_detector
        self.default_fit_intent = default_fit_intent

    @staticmethod
    def resolve_category(category: Optional[str]) -> str:
        """Known categories pass through; anything else is treated as a top."""
        if isinstance(category, str) and category.strip().lower() in CATEGORIES:
            return category.strip().lower()
        return DEFAULT_CATEGORY

    def resolve_fit_intent(self, fit_type: Optional[str] = None,
                           requested: Optional[str] = None) -> str:
        """
        Resolve the fit intent to score against.

        The garment's own fit type wins over the caller's requested intent.
        Free text is matched by substring ("Relaxed Fit" -> relaxed,
        "slim" -> snug); unmatched text falls back to regular.
        """
        raw = fit_type if isinstance(fit_type, str) and fit_type.strip() else requested
        if not isinstance(raw, str) or not raw.strip():
            return self.default_fit_intent

        text = raw.strip().lower()
        for keyword, intent in FIT_KEYWORDS:
            if keyword in text:
                return intent
        return 'regular'

    def resolve_fabric_stretch(self, product: Optional[Dict]) -> bool:
        """Explicit fabric_stretch flag first, then the material text."""
        if not isinstance(product, dict):
            return False
        for key in ('fabric_stretch', 'fabricStretch'):
            if isinstance(product.get(key), bool):
                return product[key]
        material = product_material(product)
        return bool(material) and bool(self.stretch_detector(material))

    def get_ease_profile(self, category: str, fit_intent: str = 'regular',
                         fabric_stretch: bool = False) -> EaseProfile:
        """
        Look up per-zone ease for a category.

        Args:
            category: upper_body, lower_body or dresses (unknown -> upper_body)
            fit_intent: snug, regular, relaxed or oversized
            fabric_stretch: use the reduced stretch rows for chest/bust/waist

        Returns:
            EaseProfile with zone -> ease in inches
        """
        category = self.resolve_category(category)
        if fit_intent not in FIT_INTENTS:
            fit_intent = self.resolve_fit_intent(requested=fit_intent)

        table = dict(EASE_TABLE[category])
        if fabric_stretch:
            table.update(STRETCH_EASE.get(category, {}))

        deltas = {zone: row[fit_intent] for zone, row in table.items()}
        return EaseProfile(category=category, fit_intent=fit_intent,
                           fabric_stretch=bool(fabric_stretch), deltas=deltas)


class SizeScorer:
    """Scores and ranks size-chart rows against a body and ease profile."""

    def __init__(self, score_bands: Sequence[Tuple[float, float]] = DEFAULT_SCORE_BANDS,
                 loose_score: float = LOOSE_SCORE,
                 tight_multiplier: float = 1.5):
        self.score_bands = tuple((float(limit), float(score)) for limit, score in score_bands)
        self.loose_score = float(loose_score)
        self.tight_multiplier = float(tight_multiplier)
        self.top_band_score = max([score for _, score in self.score_bands] + [self.loose_score])

    def missing_fields(self, category: str, body: BodyMeasurementSet,
                       rows: List[GarmentSizeRow]) -> List[str]:
        """
        Names of the measurements the category needs but does not have.

        User fields are listed by zone name, chart fields as 'sizeChart.<field>',
        and an empty chart as 'sizeChart'. When every field appears somewhere
        but no single row carries all of them, the fields some row lacks are
        listed.
        """
        missing = body.missing(REQUIRED_USER_FIELDS[category])
        if not rows:
            missing.append('sizeChart')
            return missing
        required = REQUIRED_CHART_FIELDS[category]
        chart_missing = [name for name in required
                         if not any(row.get(name) is not None for row in rows)]
        if not chart_missing and all(self.row_missing(row, category) for row in rows):
            chart_missing = [name for name in required
                             if any(row.get(name) is None for row in rows)]
        missing.extend(f"sizeChart.{name}" for name in chart_missing)
        return missing

    @staticmethod
    def row_missing(row: GarmentSizeRow, category: str) -> List[str]:
        """Required chart fields this row does not carry."""
        return [name for name in REQUIRED_CHART_FIELDS[category] if row.get(name) is None]

    def score_metric(self, garment: Optional[float], target: Optional[float],
                     body: Optional[float], hard_penalty: float, zone: str = '') -> ZoneScore:
        """
        Score one zone of one chart row.

        Negative ease (garment smaller than body) scores
        -(hard_penalty + 1.5 x shortfall), with no lower bound. Otherwise the
        score is banded on the distance from the target measurement.
        """
        if garment is None or target is None or body is None:
            return ZoneScore(zone=zone, score=0.0, valid=False,
                             garment=garment, target=target, body=body)

        ease = garment - body
        if ease < 0:
            return ZoneScore(zone=zone, score=-(hard_penalty + self.tight_multiplier * abs(ease)),
                             valid=True, garment=garment, target=target, body=body,
                             too_tight=True)

        distance = abs(garment - target)
        score = self.loose_score
        for limit, band_score in self.score_bands:
            if distance <= limit:
                score = band_score
                break
        return ZoneScore(zone=zone, score=score, valid=True,
                         garment=garment, target=target, body=body)

    def score_row(self, row: GarmentSizeRow, body: BodyMeasurementSet,
                  profile: EaseProfile) -> SizeScore:
        zones = {}
        total = 0.0
        for zone, chart_field, weight, penalty in SCORED_ZONES[profile.category]:
            body_value = body.get(zone)
            garment_value = row.get(chart_field)
            if zone == 'shoulder' and (body_value is None or garment_value is None):
                zone_score = ZoneScore(zone=zone, score=0.0, valid=False,
                                       garment=garment_value, body=body_value)
            else:
                zone_score = self.score_metric(garment_value,
                                               profile.target_for(zone, body_value),
                                               body_value, penalty, zone)
            zones[zone] = zone_score
            total += zone_score.score * weight
        return SizeScore(size_label=row.size_label, position=row.position,
                         aggregate_score=total, zones=zones,
                         missing_fields=self.row_missing(row, profile.category))

    def score_chart(self, rows: List[GarmentSizeRow], body: BodyMeasurementSet,
                    profile: EaseProfile) -> List[SizeScore]:
        return [self.score_row(row, body, profile) for row in rows]

    @staticmethod
    def rank(scores: List[SizeScore]) -> List[SizeScore]:
        """
        Best first; equal aggregates keep chart order.

        Rows missing a required chart field rank after every complete row,
        whatever their score.
        """
        return sorted(scores, key=lambda s: (not s.complete, -s.aggregate_score, s.position))

    def max_possible_score(self, category: str) -> float:
        return self.top_band_score * sum(weight for _, _, weight, _ in SCORED_ZONES[category])


class RiskEstimator:
    """Risk tier, confidence and backup size for a ranked chart."""

    def __init__(self, medium_risk_floor: float = 8.0,
                 high_risk_confidence_cap: int = 45,
                 medium_risk_confidence_cap: int = 70):
        self.medium_risk_floor = medium_risk_floor
        self.confidence_caps = {
            'high': high_risk_confidence_cap,
            'medium': medium_risk_confidence_cap,
        }

    def assess_risk(self, best: SizeScore) -> str:
        if best.too_tight_flags:
            return 'high'
        if best.aggregate_score < self.medium_risk_floor:
            return 'medium'
        return 'low'

    def confidence(self, best: SizeScore, max_score: float, risk: str) -> int:
        """round(best / max x 100) clamped to 0..100, then capped by risk tier."""
        if max_score <= 0:
            return 0
        raw = int(math.floor(best.aggregate_score / max_score * 100 + 0.5))
        raw = max(0, min(100, raw))
        return min(raw, self.confidence_caps.get(risk, 100))

    @staticmethod
    def backup_size(ranked: List[SizeScore], rows: List[GarmentSizeRow],
                    risk: str) -> Optional[str]:
        """
        Second choice to offer next to the recommendation.

        High risk means the best row is already too small, so only the next
        larger chart entry is offered. Otherwise the score runner-up, then the
        next and previous chart entries. A runner-up missing required chart
        fields is never offered.
        """
        position = ranked[0].position

        def neighbour(step: int) -> Optional[str]:
            index = position + step
            if 0 <= index < len(rows):
                return rows[index].size_label
            return None

        if risk == 'high':
            return neighbour(+1)
        if len(ranked) > 1 and ranked[1].complete:
            return ranked[1].size_label
        return neighbour(+1) or neighbour(-1)


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------

def _fmt(inches: float) -> str:
    return format_inches_as_fraction(abs(inches))


def describe_top_length(garment_length: float, height: float) -> str:
    ratio = garment_length / height
    if ratio < 0.28:
        return "Top length looks cropped (higher than typical hip length)."
    if ratio < 0.33:
        return "Top length looks standard (around hip)."
    if ratio < 0.37:
        return "Top length looks longer (covers more of hip/upper thigh)."
    return "Top length looks very long/oversized (likely covers upper thigh)."


def describe_inseam(garment_inseam: float, body_inseam: float, tolerance: float = 0.75) -> str:
    diff = garment_inseam - body_inseam
    if abs(diff) <= tolerance:
        return "Inseam length should hit close to your usual length."
    if diff > 0:
        return f"Inseam is about {_fmt(diff)} longer than your usual, expect extra length at the bottom."
    return f"Inseam is about {_fmt(diff)} shorter than your usual, expect a shorter/ankle look."


def describe_dress_length(dress_length: float, height: float) -> str:
    ratio = dress_length / height
    if ratio < 0.45:
        return "Dress length reads as mini/above-knee on most people."
    if ratio < 0.55:
        return "Dress length reads as around-knee to midi."
    if ratio < 0.65:
        return "Dress length reads as midi (below knee)."
    return "Dress length reads as maxi/near ankle."


# zone -> (tight message, roomy message)
_EASE_MESSAGES = {
    ('upper_body', 'chest'): ("Chest will feel tight (about {} smaller than your chest).",
                              "Chest ease about {} (how roomy it will feel)."),
    ('upper_body', 'shoulder'): ("Shoulders may pull/feel narrow (about {}).",
                                 "Shoulders look okay (about +{})."),
    ('lower_body', 'waist'): ("Waist will be tight (about {} smaller than your waist).",
                              "Waist room about +{}."),
    ('lower_body', 'hips'): ("Hip area may feel tight (about {}).",
                             "Hip room about +{}."),
    ('dresses', 'bust'): ("Bust will be tight (about {}).", "Bust ease about +{}."),
    ('dresses', 'waist'): ("Waist will be tight (about {}).", "Waist ease about +{}."),
    ('dresses', 'hips'): ("Hip area may feel tight (about {}).", "Hip ease about +{}."),
}


def build_fit_insights(best: SizeScore, row: GarmentSizeRow, body: BodyMeasurementSet,
                       profile: EaseProfile) -> List[str]:
    """Stylist-style notes about the recommended row."""
    insights = [f"Fit intent: {profile.fit_intent}"
                f"{' (stretch fabric)' if profile.fabric_stretch else ''}."]

    for zone, zone_score in best.zones.items():
        messages = _EASE_MESSAGES.get((profile.category, zone))
        ease = zone_score.ease
        if messages is None or ease is None:
            continue
        tight, roomy = messages
        insights.append((tight if ease < 0 else roomy).format(_fmt(ease)))

    height = body.height
    if profile.category == 'upper_body' and row.get('top_length') is not None and height:
        insights.append(describe_top_length(row.get('top_length'), height))
    elif profile.category == 'lower_body' and row.get('inseam') is not None and body.inseam is not None:
        insights.append(describe_inseam(row.get('inseam'), body.inseam))
    elif profile.category == 'dresses' and row.get('dress_length') is not None and height:
        insights.append(describe_dress_length(row.get('dress_length'), height))

    return insights


def recommend_size(body: BodyMeasurementSet, rows: List[GarmentSizeRow], category: str,
                   fit_intent: str, fabric_stretch: bool,
                   ease_engine: EaseProfileEngine, scorer: SizeScorer,
                   risk_estimator: RiskEstimator) -> FitRecommendation:
    """
    Run the fit pipeline for one product.

    Args:
        body: normalized body measurements
        rows: normalized size chart, in chart order
        category: resolved product category
        fit_intent: resolved fit intent
        fabric_stretch: whether the stretch ease rows apply

    Returns:
        FitRecommendation with status OK or INSUFFICIENT_DATA
    """
    missing = scorer.missing_fields(category, body, rows)
    if missing:
        if not rows:
            insights = [
                "No size chart found for this product. For accuracy, garment measurements (size chart) are needed.",
                "Tip: try another product link that includes a size chart, or add your usual brand size in your Fit Profile.",
            ]
        else:
            insights = [
                "Not enough measurement data to give a safe recommendation.",
                "Add the missing Fit Profile fields and/or use a product link with a proper size chart.",
            ]
        logger.info(f"Insufficient data for {category} fit: missing {missing}")
        return FitRecommendation(status=INSUFFICIENT_DATA, risk='high', confidence=0,
                                 insights=insights, missing=missing, category=category,
                                 fit_intent=fit_intent, fabric_stretch=fabric_stretch)

    profile = ease_engine.get_ease_profile(category, fit_intent, fabric_stretch)
    ranked = scorer.rank(scorer.score_chart(rows, body, profile))
    best = ranked[0]

    risk = risk_estimator.assess_risk(best)
    confidence = risk_estimator.confidence(best, scorer.max_possible_score(category), risk)
    backup = risk_estimator.backup_size(ranked, rows, risk)

    logger.debug(f"Fit ranking ({category}, {profile.fit_intent}): "
                 + ", ".join(f"{s.size_label}={s.aggregate_score:.2f}" for s in ranked))

    return FitRecommendation(
        status='OK',
        recommended_size=best.size_label,
        backup_size=backup,
        risk=risk,
        confidence=confidence,
        insights=build_fit_insights(best, rows[best.position], body, profile),
        missing=[],
        category=category,
        fit_intent=profile.fit_intent,
        fabric_stretch=profile.fabric_stretch,
        scores=ranked,
    )
