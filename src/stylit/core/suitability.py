"""
Suitability Synthesizer

Turns a classified garment color and the user's season profile into a
verdict (great / good / ok / risky) with rationale, applies the body-shape
silhouette rules, and pairs both into a one-line summary.

Rating order for color:
1. Base rating from ΔE to the closest swatch of the user's season
   (deep garments, L* < 40, get relaxed thresholds)
2. A true warm/cool undertone conflict is always risky
3. Clarity caps for muted users in vivid colors and clear users in muted ones
4. A palette match (ΔE <= 4.5, undertone allowed) is at least good
5. An allowed undertone within the ok threshold is never risky
6. A garment the classifier places in another season, or cannot place
   confidently, is never great
"""

import logging
from typing import Any, Dict, Iterable, Optional

from .color_logic import (PaletteClassifier, chroma_level, garment_attributes,
                          is_true_undertone_conflict, season_undertone, undertone_allowed)
from .color_naming import NamedColorResolver
from .color_space import chroma, hex_to_lab, normalize_hex
from .models import SuitabilityVerdict
from .rules.body_shape_rules import BODY_SHAPE_RULES, FIT_TYPE_KEYWORDS, VERSATILE_RULE
from .rules.palettes import SEASONS

logger = logging.getLogger(__name__)

INSUFFICIENT = 'INSUFFICIENT_DATA'

DEFAULT_COLOR_THRESHOLDS = {'great': 6.0, 'good': 12.0, 'ok': 22.0}
DEEP_COLOR_THRESHOLDS = {'great': 8.0, 'good': 16.0, 'ok': 30.0}

SEASON_ALIASES = {'fall': 'autumn'}

_RANK = {'risky': 0, 'ok': 1, 'good': 2, 'great': 3}
_DEPTH_VALUE = {'light': 0, 'medium': 1, 'deep': 2}


def _first(mapping: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = mapping.get(key)
        if value is not None and value != '':
            return value
    return None


def _norm(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip().lower()


def _insufficient_color(summary: str, bullets) -> Dict[str, Any]:
    return {
        'status': INSUFFICIENT,
        'verdict': 'insufficient_data',
        'summary': summary,
        'bullets': list(bullets),
        'delta_e': None,
        'nearest_palette_color': None,
        'classification': None,
        'garment_attributes': None,
    }


def attribute_compatibility(garment_undertone: str, garment_depth: str, garment_clarity: str,
                            user_undertone: str, user_depth: str, user_clarity: str) -> Dict[str, Any]:
    """
    Score how the garment's attributes sit against the user's.

    Priority is undertone, then clarity, then depth. A negative total means
    at least one attribute works against the user.
    """
    if garment_undertone == user_undertone:
        undertone_score = 1.0
    elif garment_undertone == 'olive' and user_undertone == 'warm':
        undertone_score = 0.8
    elif garment_undertone == 'neutral':
        undertone_score = 0.5
    elif undertone_allowed(garment_undertone, user_undertone):
        undertone_score = 0.3
    elif is_true_undertone_conflict(garment_undertone, user_undertone):
        undertone_score = -2.0
    else:
        undertone_score = -0.5

    if garment_clarity == user_clarity:
        clarity_score = 1.0
    elif 'medium' in (garment_clarity, user_clarity):
        clarity_score = 0.0
    else:
        clarity_score = -1.5

    depth_gap = abs(_DEPTH_VALUE.get(garment_depth, 1) - _DEPTH_VALUE.get(user_depth, 1))
    depth_score = {0: 0.5, 1: 0.25}.get(depth_gap, -1.0)

    return {
        'undertone_score': undertone_score,
        'clarity_score': clarity_score,
        'depth_score': depth_score,
        'total_score': undertone_score + clarity_score + depth_score,
        'true_conflict': is_true_undertone_conflict(garment_undertone, user_undertone),
        'clarity_mismatch': clarity_score < 0,
    }


def explain_color_verdict(verdict: str, user_undertone: str, true_conflict: bool,
                          too_vivid: bool, too_soft: bool, clarity_capped: bool,
                          level: str, clarity_mismatch: bool) -> Dict[str, Any]:
    """Summary sentence and three bullets (face impact, what happens, how to wear)."""
    if verdict == 'great':
        return {
            'summary': "This color matches your undertone and clarity very well.",
            'bullets': [
                "It brightens your features and blends naturally with your own coloring.",
                "The warmth and softness align with your natural coloring, so it won't create shadows or wash you out.",
                "Especially flattering near your face: perfect for tops, scarves, or accessories.",
            ],
        }

    if verdict == 'good':
        if too_vivid and level in ('vivid', 'very_vivid', 'neon'):
            return {
                'summary': "This color works for you, but it's bold.",
                'bullets': [
                    "The saturation is higher than your natural coloring prefers.",
                    "Works well as a statement piece or in small doses.",
                    "Balance with softer colors in your palette near the face, or use as an accent.",
                ],
            }
        if too_soft:
            return {
                'summary': "This color is close to your palette but softer than ideal.",
                'bullets': [
                    "It may look slightly muted against your vibrant coloring.",
                    "You'll still look good wearing it.",
                    "Add brighter accessories or makeup to maintain your natural vibrancy.",
                ],
            }
        return {
            'summary': "This color is close to your palette.",
            'bullets': [
                "It works well overall, but is slightly off in clarity or depth.",
                "You'll still look good wearing it near the face.",
                "Works best as a top with a neckline opening or layered with a color that matches your season.",
            ],
        }

    if verdict == 'ok':
        if clarity_capped and too_vivid:
            intensity = {'neon': 'very intense', 'very_vivid': 'quite saturated'}.get(level, 'bold')
            return {
                'summary': f"This color is {intensity} for your muted coloring.",
                'bullets': [
                    "High saturation can overpower your natural softness.",
                    "May create visual competition near your face.",
                    "Best worn away from the face (pants, skirt, bag) or as a small accent.",
                ],
            }
        if too_soft:
            return {
                'summary': "This color may look washed out on you.",
                'bullets': [
                    "The muted tone doesn't match your natural vibrancy.",
                    "Can make you look less energetic or vibrant.",
                    "Best for layering under brighter pieces or worn away from the face.",
                ],
            }
        return {
            'summary': "Not a perfect match, but wearable.",
            'bullets': [
                "It may create mild shadowing or reduce brightness.",
                "Better with styling: open neckline, layers, makeup, accessories.",
                "Best worn away from the face (pants, skirt) or layered with a color from your palette.",
            ],
        }

    if true_conflict:
        return {
            'summary': f"This color conflicts strongly with your {user_undertone} undertone.",
            'bullets': [
                "The undertone clashes strongly with your skin's natural coloring.",
                "The undertone mismatch can make skin look tired, grey, or sallow.",
                "Best avoided near the face. If wearing, keep it far from your face (pants, skirt, shoes).",
            ],
        }
    if too_vivid and level == 'neon':
        return {
            'summary': "This color is too intense for your muted coloring.",
            'bullets': [
                "This intensity level can overpower your natural softness.",
                "Very saturated colors can make you look washed out or create visual competition.",
                "Best as a small accent only. Avoid wearing it as a top or near your face.",
            ],
        }
    issue = 'conflicts with your clarity' if clarity_mismatch else 'is far from your palette'
    return {
        'summary': f"This color {issue}.",
        'bullets': [
            "It may create dullness, greyness, or heavy contrast near the face.",
            "The mismatch can emphasize shadows and reduce brightness.",
            "If you still want to wear it, use it away from the face or add a layer in your season's colors near your face.",
        ],
    }


def _fit_key(fit_type: Any) -> str:
    text = _norm(fit_type) or 'regular'
    for keyword, key in FIT_TYPE_KEYWORDS:
        if keyword in text:
            return key
    return 'regular'


def body_shape_suitability(user: Optional[Dict[str, Any]],
                           garment: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Silhouette verdict for a body shape and garment.

    Args:
        user: profile with 'body_shape' (or 'bodyShape')
        garment: descriptor with 'category' and optional 'fit_type'

    Returns:
        {'status', 'verdict', 'rule', 'reasons', 'alternatives'}
    """
    user = user or {}
    garment = garment or {}
    shape = _norm(_first(user, 'body_shape', 'bodyShape'))
    if shape is None:
        return {
            'status': INSUFFICIENT,
            'verdict': None,
            'rule': None,
            'reasons': ["Set your body shape in Fit Profile to get silhouette advice."],
            'alternatives': [],
        }

    category = _norm(garment.get('category'))
    fit = _fit_key(_first(garment, 'fit_type', 'fitType'))

    for rule in BODY_SHAPE_RULES:
        if not any(keyword in shape for keyword in rule['shapes']):
            continue
        if rule['categories'] is not None and category not in rule['categories']:
            continue
        if rule['fits'] is not None and fit not in rule['fits']:
            continue
        logger.debug(f"Body shape rule {rule['rule']} matched ({shape}, {category}, {fit})")
        return {
            'status': 'OK',
            'verdict': rule['verdict'],
            'rule': rule['rule'],
            'reasons': list(rule['reasons']),
            'alternatives': list(rule['alternatives']),
        }

    return {
        'status': 'OK',
        'verdict': VERSATILE_RULE['verdict'],
        'rule': VERSATILE_RULE['rule'],
        'reasons': list(VERSATILE_RULE['reasons']),
        'alternatives': list(VERSATILE_RULE['alternatives']),
    }


def build_summary(color: Optional[Dict[str, Any]], body: Optional[Dict[str, Any]]) -> str:
    """'Color: good • Silhouette: flattering'; a missing profile reads 'needs setup'."""
    bits = []
    if color is not None:
        bits.append(f"Color: {color['verdict']}" if color.get('status') == 'OK' else "Color: needs setup")
    if body is not None:
        bits.append(f"Silhouette: {body['verdict']}" if body.get('status') == 'OK' else "Silhouette: needs setup")
    return " • ".join(bits)


class SuitabilitySynthesizer:
    """
    Color and silhouette verdicts for a user and a garment.

    Holds references to the shared classifier and resolver; it keeps no
    state of its own between calls.
    """

    def __init__(self, classifier: PaletteClassifier,
                 resolver: Optional[NamedColorResolver] = None,
                 color_thresholds: Optional[Dict[str, float]] = None,
                 deep_color_thresholds: Optional[Dict[str, float]] = None,
                 deep_color_lightness: float = 40.0,
                 palette_match_delta_e: float = 4.5):
        self.classifier = classifier
        self.resolver = resolver
        self.color_thresholds = dict(color_thresholds or DEFAULT_COLOR_THRESHOLDS)
        self.deep_color_thresholds = dict(deep_color_thresholds or DEEP_COLOR_THRESHOLDS)
        self.deep_color_lightness = deep_color_lightness
        self.palette_match_delta_e = palette_match_delta_e

    def garment_hex(self, garment: Dict[str, Any]) -> Optional[str]:
        """Garment hex, or the hex of its color name when only a name is known."""
        hex_code = _first(garment, 'hex', 'color_hex', 'colorHex', 'dominant_hex')
        if hex_code is not None:
            return hex_code
        name = _first(garment, 'color_name', 'colorName', 'primary_color', 'primaryColor', 'color')
        if name is not None and self.resolver is not None:
            if normalize_hex(name) is not None:
                return name
            return self.resolver.hex_for_name(name)
        return None

    def color_suitability(self, user: Optional[Dict[str, Any]],
                          garment: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Rate how well a garment color suits a user's season profile.

        Args:
            user: {'season', 'undertone'?, 'depth'?, 'clarity'?}
            garment: {'hex' or color name, 'category'?, 'near_face'?}

        Returns:
            {'status', 'verdict', 'summary', 'bullets', 'delta_e',
             'nearest_palette_color', 'classification', 'garment_attributes', ...}
        """
        user = user or {}
        garment = garment or {}

        season = _norm(_first(user, 'season', 'color_season', 'colorSeason'))
        season = SEASON_ALIASES.get(season, season)
        hex_code = self.garment_hex(garment)

        if season not in SEASONS or hex_code is None:
            return _insufficient_color("Need color information to analyze.",
                                       ["Please provide both garment color hex and user season."])

        lab = hex_to_lab(hex_code)
        if lab is None:
            return _insufficient_color("Could not analyze color.",
                                       [f"Invalid color hex code: {hex_code}"])

        user_undertone = _norm(user.get('undertone'))
        if user_undertone not in ('warm', 'cool', 'neutral'):
            user_undertone = season_undertone(season)
        user_depth = _norm(user.get('depth')) or 'medium'
        user_clarity = _norm(user.get('clarity')) or 'muted'
        if user_clarity == 'vivid':
            user_clarity = 'clear'

        near_face = garment.get('near_face', garment.get('nearFace'))
        if not isinstance(near_face, bool):
            near_face = _norm(garment.get('category')) != 'lower_body'

        classification = self.classifier.classify(hex_code)
        attrs = garment_attributes(lab)
        garment_chroma = chroma(lab)
        level = chroma_level(garment_chroma)
        nearest, delta_e = self.classifier.nearest_in_season(lab, season)

        thresholds = self.deep_color_thresholds if lab[0] < self.deep_color_lightness else self.color_thresholds
        if delta_e <= thresholds['great']:
            base = 'great'
        elif delta_e <= thresholds['good']:
            base = 'good'
        elif delta_e <= thresholds['ok']:
            base = 'ok'
        else:
            base = 'risky'

        compatibility = attribute_compatibility(attrs['undertone'], attrs['depth'], attrs['clarity'],
                                                user_undertone, user_depth, user_clarity)
        allowed = undertone_allowed(attrs['undertone'], user_undertone)
        too_vivid = user_clarity == 'muted' and (attrs['clarity'] == 'clear' or garment_chroma >= 45)
        too_soft = user_clarity == 'clear' and (attrs['clarity'] == 'muted' or garment_chroma < 20)
        neon_near_face = level == 'neon' and near_face

        verdict = base
        caps = []
        clarity_capped = False

        if compatibility['true_conflict']:
            verdict = 'risky'
            caps.append('undertone_conflict')
        else:
            if too_vivid:
                if neon_near_face:
                    if verdict in ('great', 'good'):
                        verdict = 'ok'
                        clarity_capped = True
                        caps.append('neon_near_face_cap_ok')
                elif level in ('very_vivid', 'vivid') and near_face:
                    if verdict == 'great':
                        verdict = 'good'
                        clarity_capped = True
                        caps.append('vivid_near_face_cap_good')
                elif verdict == 'great':
                    verdict = 'good'
                    clarity_capped = True
                    caps.append('clarity_mismatch_cap_good')

            if too_soft and verdict == 'great':
                verdict = 'good'
                clarity_capped = True
                caps.append('too_soft_cap_good')

            if allowed and delta_e <= self.palette_match_delta_e and not neon_near_face \
                    and verdict in ('ok', 'risky'):
                verdict = 'good'
                caps.append('palette_match_upgrade_good')

            if allowed and verdict == 'risky' and delta_e <= thresholds['ok']:
                verdict = 'ok'
                caps.append('undertone_protection_ok')

        if verdict == 'great' and (classification.status == 'ambiguous' or
                                   (classification.is_ok and classification.season_tag != season)):
            verdict = 'good'
            caps.append('classification_cap_good')

        explanation = explain_color_verdict(verdict, user_undertone, compatibility['true_conflict'],
                                            too_vivid, too_soft, clarity_capped, level,
                                            compatibility['clarity_mismatch'])

        logger.debug(f"Color {classification.dominant_hex} for {season}: base {base}, "
                     f"final {verdict}, ΔE={delta_e:.2f}, caps={caps}")

        return {
            'status': 'OK',
            'verdict': verdict,
            'base_verdict': base,
            'summary': explanation['summary'],
            'bullets': explanation['bullets'],
            'delta_e': round(delta_e, 4),
            'nearest_palette_color': {
                'name': nearest.name,
                'hex': nearest.hex,
                'season': nearest.season,
                'group': nearest.group,
            },
            'classification': classification.to_dict(),
            'garment_attributes': attrs,
            'compatibility': compatibility,
            'caps_applied': caps,
            'near_face': near_face,
            'user': {
                'season': season,
                'undertone': user_undertone,
                'depth': user_depth,
                'clarity': user_clarity,
            },
        }

    def body_shape_suitability(self, user: Optional[Dict[str, Any]],
                               garment: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return body_shape_suitability(user, garment)

    def evaluate_suitability(self, user: Optional[Dict[str, Any]],
                             garment: Optional[Dict[str, Any]],
                             include: Iterable[str] = ('color', 'body')) -> Dict[str, Any]:
        """Color and/or silhouette verdicts with a joined one-line summary."""
        include = tuple(include)
        color = self.color_suitability(user, garment) if 'color' in include else None
        body = self.body_shape_suitability(user, garment) if 'body' in include else None
        return SuitabilityVerdict(color=color, body=body, summary=build_summary(color, body)).to_dict()
