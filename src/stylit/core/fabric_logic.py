"""
Fabric elasticity and comfort heuristics.

Keyword rules over a product's free-text material description, e.g.
"95% Cotton, 5% Elastane". Used to decide whether the stretch ease table
applies and to add a comfort verdict to the full recommendation.
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Checked in order; the first material found in the description decides.
MATERIAL_ELASTICITY = {
    # High stretch
    'spandex': True,
    'elastane': True,
    'lycra': True,
    'elastodiene': True,
    'elasterell-p': True,

    # Medium stretch
    'jersey': True,
    'knit': True,
    'ribbed': True,

    # Low or no stretch
    'cotton': False,
    'polyester': False,
    'nylon': False,
    'silk': False,
    'wool': False,
    'cashmere': False,
    'linen': False,
    'denim': False,
    'canvas': False,
    'twill': False,
    'poplin': False,
    'satin': False,
    'velvet': False,
    'chiffon': False,
    'organza': False,
    'tulle': False,
    'leather': False,
    'suede': False,
    'faux leather': False,
    'pleather': False,
    'vinyl': False,
}

HIGH_STRETCH = ('spandex', 'elastane', 'lycra')
MEDIUM_STRETCH = ('stretch', 'jersey', 'knit', 'ribbed')

NATURAL_FIBERS = ('cotton', 'linen', 'silk', 'wool', 'cashmere', 'bamboo', 'modal')
SYNTHETIC_FIBERS = ('polyester', 'nylon', 'acrylic', 'polyamide')

# (keywords, insight, excluded keyword)
FABRIC_NOTES = [
    (('wool',), "Wool may feel itchy on sensitive skin", 'merino'),
    (('linen',), "Linen wrinkles easily but stays cool", None),
    (('silk', 'satin'), "Silk/satin feels luxurious but can be delicate", None),
    (('denim',), "Denim may feel stiff initially, softens with wear", None),
    (('leather', 'pleather'), "Leather/pleather may not breathe well", None),
    (('sheer', 'mesh', 'chiffon'), "Sheer fabric - may need layering", None),
]


def _material_text(material: Any) -> Optional[str]:
    if not isinstance(material, str):
        return None
    text = material.strip().lower()
    return text or None


def has_stretch(material: Any) -> bool:
    """True when a material description implies stretch."""
    text = _material_text(material)
    if text is None:
        return False
    if 'stretch' in text or 'elastic' in text:
        return True
    for name, stretchy in MATERIAL_ELASTICITY.items():
        if name in text:
            return stretchy
    return False


def stretch_level(material: Any) -> str:
    """'high', 'medium' or 'none'."""
    text = _material_text(material)
    if text is None:
        return 'none'
    if any(k in text for k in HIGH_STRETCH):
        return 'high'
    if any(k in text for k in MEDIUM_STRETCH) or has_stretch(text):
        return 'medium'
    return 'none'


def product_material(product: Optional[Dict[str, Any]]) -> Optional[str]:
    if not isinstance(product, dict):
        return None
    return product.get('material') or product.get('fabric')


def analyze_fabric_comfort(product: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Comfort verdict for a product's material.

    Args:
        product: descriptor with a 'material' or 'fabric' string

    Returns:
        {'status', 'verdict', 'stretch_level', 'insights'}; verdict is one of
        'comfortable', 'ok', 'risky', or None when no material is given
    """
    text = _material_text(product_material(product))
    if text is None:
        return {
            'status': 'INSUFFICIENT_DATA',
            'verdict': None,
            'stretch_level': None,
            'insights': ["Fabric information not available. Add material details for comfort analysis."],
        }

    insights = []
    comfort = 0

    stretchy = any(k in text for k in ('stretch', 'elastic') + HIGH_STRETCH)
    if stretchy:
        comfort += 2
        insights.append("Stretch fabric offers flexibility and comfort")
    else:
        insights.append("No stretch detected - may feel restrictive")

    natural = any(fiber in text for fiber in NATURAL_FIBERS)
    if natural:
        comfort += 1
        insights.append("Natural fibers typically feel soft and breathable")

    if not natural and any(fiber in text for fiber in SYNTHETIC_FIBERS):
        comfort -= 1
        insights.append("Synthetic fabric may be less breathable - watch for sweat")

    for keywords, note, unless in FABRIC_NOTES:
        if any(k in text for k in keywords) and not (unless and unless in text):
            insights.append(note)

    if comfort >= 2:
        verdict = 'comfortable'
    elif comfort >= 0:
        verdict = 'ok'
    else:
        verdict = 'risky'

    logger.debug(f"Fabric comfort for {text!r}: {verdict} (score {comfort})")
    return {
        'status': 'OK',
        'verdict': verdict,
        'stretch_level': stretch_level(text),
        'insights': insights,
    }
