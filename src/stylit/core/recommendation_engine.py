"""
Stylit Fit & Color Recommendation Engine

This is the main entry point that answers, for one user and one garment:
- Which catalog size to buy, with risk, confidence and a backup size
- Whether the garment color suits the user's seasonal palette
- How the silhouette reads on the user's body shape
- How comfortable the fabric is likely to feel

Key Features:
- One engine object owns every catalog, cache and calibration value
- Collaborators (naming ΔE metric, stretch detector) injected at construction
- Missing inputs come back as INSUFFICIENT_DATA with the exact missing fields,
  never as a guessed answer
- Deterministic: identical inputs give identical outputs, cache or not
"""

import logging
from typing import Callable, Dict, Optional

from config import recommendation_config as calibration

from .color_logic import PaletteClassifier
from .color_naming import NamedColorResolver
from .color_space import delta_e_2000_many, delta_e_76_many
from .fabric_logic import analyze_fabric_comfort, has_stretch
from .fit_logic import EaseProfileEngine, RiskEstimator, SizeScorer, recommend_size
from .measurements import normalize_body_profile, normalize_size_chart
from .rules.brand_size_charts import get_brand_size_chart
from .suitability import SuitabilitySynthesizer, build_summary

logger = logging.getLogger(__name__)

NAMING_METRICS = {
    'ciede2000': delta_e_2000_many,
    'cie76': delta_e_76_many,
}


def _first(mapping: Dict, *keys: str):
    for key in keys:
        value = mapping.get(key)
        if value is not None and value != '':
            return value
    return None


class StylitEngine:
    """
    Fit and color recommendation engine.

    Build one per process and share it: the palette catalog and named-color
    dataset are read-only after construction, and the name cache is locked.
    """

    def __init__(self,
                 config=None,
                 naming_metric: Optional[Callable] = None,
                 stretch_detector: Callable[[str], bool] = has_stretch):
        """
        Initialize the recommendation engine.

        Args:
            config: RecommendationConfig calibration (default preset if None)
            naming_metric: Vectorized ΔE f(lab, labs) for color naming;
                defaults to the metric named in the config
            stretch_detector: material text -> bool for products without
                an explicit stretch flag
        """
        self.config = config if config is not None else calibration.RecommendationConfig()

        self.classifier = PaletteClassifier(
            unclassified_delta_e=self.config.unclassified_delta_e,
            ambiguity_margin=self.config.ambiguity_margin,
        )
        self.resolver = NamedColorResolver(
            cache_size=self.config.name_cache_size,
            metric=naming_metric or NAMING_METRICS[self.config.naming_metric],
        )
        self.ease_engine = EaseProfileEngine(
            stretch_detector=stretch_detector,
            default_fit_intent=self.config.default_fit_intent,
        )
        self.scorer = SizeScorer(
            score_bands=self.config.score_bands,
            loose_score=self.config.loose_score,
            tight_multiplier=self.config.tight_multiplier,
        )
        self.risk_estimator = RiskEstimator(
            medium_risk_floor=self.config.medium_risk_floor,
            high_risk_confidence_cap=self.config.high_risk_confidence_cap,
            medium_risk_confidence_cap=self.config.medium_risk_confidence_cap,
        )
        self.synthesizer = SuitabilitySynthesizer(
            self.classifier,
            resolver=self.resolver,
            color_thresholds=self.config.color_thresholds,
            deep_color_thresholds=self.config.deep_color_thresholds,
            deep_color_lightness=self.config.deep_color_lightness,
            palette_match_delta_e=self.config.palette_match_delta_e,
        )

        logger.info(f"StylitEngine initialized")
        logger.info(f"Naming metric: {self.config.naming_metric}, "
                    f"default fit intent: {self.config.default_fit_intent}, "
                    f"brand chart fallback: {self.config.brand_chart_fallback}")

    # ------------------------------------------------------------------
    # Color
    # ------------------------------------------------------------------

    def classify_garment(self, hex_code: str) -> Dict:
        """Palette classification of a garment hex color."""
        return self.classifier.classify(hex_code).to_dict()

    def get_nearest_color_name(self, hex_code: str) -> Dict:
        """Nearest human color name: {'hex', 'name'}."""
        return self.resolver.get_nearest_color_name(hex_code).to_dict()

    def color_suitability(self, user: Optional[Dict], garment: Optional[Dict]) -> Dict:
        return self.synthesizer.color_suitability(user, garment)

    def body_shape_suitability(self, user: Optional[Dict], garment: Optional[Dict]) -> Dict:
        return self.synthesizer.body_shape_suitability(user, garment)

    def fabric_comfort(self, product: Optional[Dict]) -> Dict:
        return analyze_fabric_comfort(product)

    # ------------------------------------------------------------------
    # Fit
    # ------------------------------------------------------------------

    def _size_chart(self, product: Dict, category: str):
        """Normalized chart rows and where they came from ('product', 'brand' or None)."""
        raw = _first(product, 'size_chart', 'sizeChart')
        unit = _first(product, 'size_chart_unit', 'sizeChartUnit', 'unit')
        rows = normalize_size_chart(raw, unit)
        if rows:
            return rows, 'product'

        brand = _first(product, 'brand')
        if self.config.brand_chart_fallback and brand:
            brand_rows = get_brand_size_chart(brand, category)
            if brand_rows:
                logger.info(f"Using published {brand} chart for {category}")
                return normalize_size_chart(brand_rows, 'in'), 'brand'
        return rows, None

    def recommend_size(self, profile: Optional[Dict], product: Optional[Dict],
                       fit_intent: Optional[str] = None) -> Dict:
        """
        Recommend a size for one product.

        Args:
            profile: user fit profile (measurements with unit suffixes or a 'unit')
            product: {'category', 'size_chart', 'fit_type'?, 'material'?,
                      'fabric_stretch'?, 'brand'?}
            fit_intent: the user's preferred fit; the product's fit type wins

        Returns:
            FitRecommendation as a dict, plus 'size_chart_source'
        """
        product = product or {}
        body = normalize_body_profile(profile)
        category = self.ease_engine.resolve_category(product.get('category'))
        intent = self.ease_engine.resolve_fit_intent(_first(product, 'fit_type', 'fitType'), fit_intent)
        stretch = self.ease_engine.resolve_fabric_stretch(product)
        rows, source = self._size_chart(product, category)

        result = recommend_size(body, rows, category, intent, stretch,
                                self.ease_engine, self.scorer, self.risk_estimator).to_dict()
        result['size_chart_source'] = source
        if source == 'brand' and result['status'] == 'OK':
            result['insights'].append(
                f"No size chart on this product; used {product['brand']}'s published "
                f"{category.replace('_', ' ')} chart instead.")
        return result

    # ------------------------------------------------------------------
    # Full recommendation
    # ------------------------------------------------------------------

    def evaluate(self, profile: Optional[Dict], product: Optional[Dict],
                 fit_intent: Optional[str] = None) -> Dict:
        """
        Full recommendation for one user and one product.

        The profile carries measurements plus the color and shape profile
        (season, undertone, depth, clarity, body_shape); the product carries
        its category, size chart, color and material.

        Returns:
            {'status', 'fit', 'color', 'body', 'fabric', 'summary'}; an
            unexpected internal fault returns the error response instead
        """
        try:
            profile = profile or {}
            product = product or {}
            fit = self.recommend_size(profile, product, fit_intent)
            color = self.color_suitability(profile, product)
            body = self.body_shape_suitability(profile, product)
            fabric = self.fabric_comfort(product)

            size_bit = (f"Size: {fit['recommended_size']} ({fit['confidence']}%)"
                        if fit['status'] == 'OK' else "Size: needs setup")
            summary = " • ".join(bit for bit in (size_bit, build_summary(color, body)) if bit)

            return {
                'status': 'OK',
                'fit': fit,
                'color': color,
                'body': body,
                'fabric': fabric,
                'summary': summary,
            }
        except Exception as e:
            logger.error(f"Evaluation failed: {e}", exc_info=True)
            return self._error_response(f"Evaluation failed: {str(e)}")

    def _error_response(self, error_message: str) -> Dict:
        """Generate error response."""
        return {
            'status': 'ERROR',
            'error': error_message,
            'fit': None,
            'color': None,
            'body': None,
            'fabric': None,
            'summary': None,
        }

    def get_statistics(self) -> Dict:
        """Catalog sizes, cache usage and active calibration."""
        return {
            'palette': self.classifier.get_statistics(),
            'named_colors': self.resolver.get_statistics(),
            'calibration': self.config.to_dict(),
        }
