"""
Body Shape Silhouette Rules

Conservative heuristics: each rule only explains the likely silhouette
effect of a garment, it never says a body shape "can't" wear something.

Rules are checked top to bottom and the first match wins. A rule matches
when the user's body-shape text contains one of its keywords, the garment
category is in its categories (None = any) and the garment fit is in its
fits (None = any).

Verdicts: flattering, ok, neutral, risky.
"""

BODY_SHAPE_RULES = [
    {
        'rule': 'pear_roomy_top',
        'shapes': ('pear',),
        'categories': ('upper_body',),
        'fits': ('oversized', 'relaxed'),
        'verdict': 'flattering',
        'reasons': ["A roomier top can balance hips by adding volume up top."],
        'alternatives': [],
    },
    {
        'rule': 'pear_slim_bottom',
        'shapes': ('pear',),
        'categories': ('lower_body',),
        'fits': ('slim',),
        'verdict': 'neutral',
        'reasons': ["Slim-fit bottoms may emphasize hip/thigh area (could be desired or not)."],
        'alternatives': ["If you want balance, try straight-leg or wide-leg."],
    },
    {
        'rule': 'apple_dress',
        'shapes': ('apple', 'oval'),
        'categories': ('dresses',),
        'fits': None,
        'verdict': 'flattering',
        'reasons': ["Structured or A-line dresses usually create a smoother line through the midsection."],
        'alternatives': ["Avoid very tight waist seams if you want comfort."],
    },
    {
        'rule': 'apple_slim_top',
        'shapes': ('apple', 'oval'),
        'categories': ('upper_body',),
        'fits': ('slim',),
        'verdict': 'risky',
        'reasons': ["Very slim tops can cling around the midsection."],
        'alternatives': ["Try regular/relaxed fits or layering pieces."],
    },
    {
        'rule': 'rectangle_dress',
        'shapes': ('rectangle',),
        'categories': ('dresses',),
        'fits': None,
        'verdict': 'ok',
        'reasons': ["Belts, wrap styles, or defined waists can create more shape if you want it."],
        'alternatives': ["If you prefer minimal, straight silhouettes also work."],
    },
    {
        'rule': 'hourglass_defined_dress',
        'shapes': ('hourglass',),
        'categories': ('dresses',),
        'fits': ('regular', 'slim'),
        'verdict': 'flattering',
        'reasons': ["Waist definition typically highlights your natural proportions."],
        'alternatives': [],
    },
    {
        'rule': 'hourglass_oversized',
        'shapes': ('hourglass',),
        'categories': None,
        'fits': ('oversized',),
        'verdict': 'neutral',
        'reasons': ["Oversized fits may hide waist definition (could be a vibe, but less 'shaped')."],
        'alternatives': [],
    },
    {
        'rule': 'inverted_oversized_top',
        'shapes': ('inverted',),
        'categories': ('upper_body',),
        'fits': ('oversized',),
        'verdict': 'risky',
        'reasons': ["Extra volume up top can exaggerate shoulder width."],
        'alternatives': ["If you want balance, try cleaner tops + wider/looser bottoms."],
    },
    {
        'rule': 'inverted_roomy_bottom',
        'shapes': ('inverted',),
        'categories': ('lower_body',),
        'fits': ('relaxed', 'oversized'),
        'verdict': 'flattering',
        'reasons': ["More volume on the lower body can balance broader shoulders."],
        'alternatives': [],
    },
]

VERSATILE_RULE = {
    'rule': 'versatile',
    'verdict': 'ok',
    'reasons': ["This fit should work for most body types; tweak with styling (tuck, belt, layering)."],
    'alternatives': [],
}

# Garment fit text -> fit key used by the rules above
FIT_TYPE_KEYWORDS = [
    ('over', 'oversized'),
    ('relax', 'relaxed'),
    ('slim', 'slim'),
    ('skinny', 'slim'),
    ('snug', 'slim'),
]
