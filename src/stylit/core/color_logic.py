"""
Color Classification Logic for Garment Recommendations

This module places a garment color inside the seasonal palette catalog:
- Lab coordinates via the color_space converters
- ΔE76 nearest-neighbour scan over all 80 palette swatches
- Dual-threshold gating (unclassified / ambiguous / ok)
- Garment undertone, depth and clarity derived from Lab alone
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .color_space import chroma, delta_e_76_many, hex_to_lab, hue_angle, normalize_hex
from .exceptions import CatalogError
from .models import ClassificationResult, PaletteColor
from .rules.palettes import SEASON_UNDERTONE, SEASONS, iter_palette

logger = logging.getLogger(__name__)

DEFAULT_UNCLASSIFIED_DELTA_E = 12.0
DEFAULT_AMBIGUITY_MARGIN = 2.0


class PaletteClassifier:
    """
    Nearest-swatch classifier over the fixed seasonal palette.

    The catalog is converted to Lab once at construction and never mutated,
    so a single instance can be shared by concurrent callers.
    """

    def __init__(self,
                 unclassified_delta_e: float = DEFAULT_UNCLASSIFIED_DELTA_E,
                 ambiguity_margin: float = DEFAULT_AMBIGUITY_MARGIN):
        """
        Initialize the classifier.

        Args:
            unclassified_delta_e: Best ΔE above this means no palette fits (default 12)
            ambiguity_margin: Cross-group runner-up closer than this means ambiguous (default 2)
        """
        self.unclassified_delta_e = float(unclassified_delta_e)
        self.ambiguity_margin = float(ambiguity_margin)

        swatches = []
        for season, group, name, hex_code in iter_palette():
            lab = hex_to_lab(hex_code)
            if lab is None:
                raise CatalogError(f"Palette swatch {name!r} has invalid hex {hex_code!r}")
            swatches.append(PaletteColor(name=name, hex=normalize_hex(hex_code),
                                         lab=lab, season=season, group=group))

        self.swatches: Tuple[PaletteColor, ...] = tuple(swatches)
        self._labs = np.array([s.lab for s in self.swatches], dtype=float)
        self._labs.setflags(write=False)
        self._categories = [(s.season, s.group) for s in self.swatches]

        logger.info(f"PaletteClassifier initialized with {len(self.swatches)} swatches "
                    f"(unclassified > {self.unclassified_delta_e}, "
                    f"ambiguity < {self.ambiguity_margin})")

    def classify(self, hex_code: str) -> ClassificationResult:
        """
        Classify a garment hex color against the season palettes.

        Args:
            hex_code: Garment color, '#RGB' or '#RRGGBB'

        Returns:
            ClassificationResult; malformed hex yields status 'unclassified'
            with no Lab or nearest swatch
        """
        lab = hex_to_lab(hex_code)
        if lab is None:
            logger.debug(f"Unparseable garment hex: {hex_code!r}")
            return ClassificationResult(status='unclassified',
                                        dominant_hex=str(hex_code) if hex_code is not None else '')
        return self.classify_lab(lab, dominant_hex=normalize_hex(hex_code))

    def classify_lab(self, lab: Sequence[float],
                     dominant_hex: Optional[str] = None) -> ClassificationResult:
        """
        Classify a Lab color.

        The best match is the first minimum in catalog order. The runner-up
        is the closest swatch whose (season, group) differs from the best's,
        so near-duplicates inside one group never make a color ambiguous.
        """
        lab = tuple(float(v) for v in lab)
        distances = delta_e_76_many(lab, self._labs)

        best_index = int(np.argmin(distances))
        best = self.swatches[best_index]
        best_delta = float(distances[best_index])

        other_group = np.array([cat != (best.season, best.group) for cat in self._categories])
        runner_up_delta = float(distances[other_group].min())

        if best_delta > self.unclassified_delta_e:
            status = 'unclassified'
        elif runner_up_delta - best_delta < self.ambiguity_margin:
            status = 'ambiguous'
        else:
            status = 'ok'

        logger.debug(f"Classified {dominant_hex or lab}: {status} "
                     f"(best {best.name} ΔE={best_delta:.2f}, runner-up ΔE={runner_up_delta:.2f})")

        return ClassificationResult(
            status=status,
            dominant_hex=dominant_hex or '',
            lab=lab,
            season_tag=best.season if status == 'ok' else None,
            group_tag=best.group if status == 'ok' else None,
            nearest_palette_color=best,
            min_delta_e=best_delta,
            runner_up_delta_e=runner_up_delta,
        )

    def nearest_in_season(self, lab: Sequence[float],
                          season: str) -> Tuple[Optional[PaletteColor], Optional[float]]:
        """Closest swatch of one season and its ΔE; (None, None) for an unknown season."""
        indices = [i for i, s in enumerate(self.swatches) if s.season == season]
        if not indices:
            return None, None
        distances = delta_e_76_many(lab, self._labs[indices])
        position = int(np.argmin(distances))
        return self.swatches[indices[position]], float(distances[position])

    def palette_for(self, season: str) -> List[PaletteColor]:
        return [s for s in self.swatches if s.season == season]

    def get_statistics(self) -> Dict:
        return {
            'swatches': len(self.swatches),
            'seasons': {season: len(self.palette_for(season)) for season in SEASONS},
            'unclassified_delta_e': self.unclassified_delta_e,
            'ambiguity_margin': self.ambiguity_margin,
        }


# ---------------------------------------------------------------------------
# Garment color attributes
# ---------------------------------------------------------------------------

def garment_undertone(lab: Sequence[float]) -> str:
    """
    Undertone of a garment color: 'warm', 'cool', 'neutral' or 'olive'.

    Olive (khaki, sage, artichoke) is yellow-dominant with a slight green
    tint and is kept apart from cool so warm users can wear it.
    """
    c = chroma(lab)
    h = hue_angle(lab)
    a, b = lab[1], lab[2]

    if c < 10:
        return 'neutral'
    if b > 8 and a < 0 and abs(a) <= 12:
        return 'olive'
    if 90 <= h <= 140 and b > 0:
        return 'olive'
    if h <= 110 or h >= 320:
        return 'warm'
    return 'cool'


def garment_depth(lab: Sequence[float]) -> str:
    L = lab[0]
    if L > 70:
        return 'light'
    if L > 45:
        return 'medium'
    return 'deep'


def garment_clarity(lab: Sequence[float]) -> str:
    c = chroma(lab)
    if c < 20:
        return 'muted'
    if c <= 30:
        return 'medium'
    return 'clear'


def chroma_level(c: float) -> str:
    """Intensity band of a chroma value, from 'soft' up to 'neon'."""
    if c >= 70:
        return 'neon'
    if c >= 55:
        return 'very_vivid'
    if c >= 45:
        return 'vivid'
    if c >= 30:
        return 'mild'
    return 'soft'


def garment_attributes(lab: Sequence[float]) -> Dict:
    c = chroma(lab)
    return {
        'undertone': garment_undertone(lab),
        'depth': garment_depth(lab),
        'clarity': garment_clarity(lab),
        'chroma': round(c, 2),
        'chroma_level': chroma_level(c),
        'hue_angle': round(hue_angle(lab), 1),
    }


# Which garment undertones each user undertone can wear
ALLOWED_UNDERTONES = {
    'warm': ('warm', 'neutral', 'olive'),
    'cool': ('cool', 'neutral'),
    'neutral': ('warm', 'cool', 'neutral', 'olive'),
}


def undertone_allowed(garment: str, user: str) -> bool:
    return garment in ALLOWED_UNDERTONES.get(user, ALLOWED_UNDERTONES['neutral'])


def is_true_undertone_conflict(garment: str, user: str) -> bool:
    """Only warm against cool is a real clash; olive counts as warm, neutral never clashes."""
    if garment == 'neutral' or user == 'neutral':
        return False
    garment_warm = garment in ('warm', 'olive')
    garment_cool = garment == 'cool'
    return (garment_warm and user == 'cool') or (garment_cool and user == 'warm')


def season_undertone(season: str) -> str:
    return SEASON_UNDERTONE.get(season, 'neutral')
