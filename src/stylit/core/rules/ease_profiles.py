"""
Ease Profiles for Size Recommendations

Target garment measurement = body measurement + ease. Values are inches,
indexed by fit intent. Circumference ease is never negative; length zones
(inseam, rise) always target the body value directly.

Key Principles:
1. Stretch fabric can run closer to the body on chest, bust and waist
2. Oversized ease is the same with or without stretch
3. Waist is weighted above hips on bottoms, chest above shoulder on tops
"""

FIT_INTENTS = ('snug', 'regular', 'relaxed', 'oversized')

CATEGORIES = ('upper_body', 'lower_body', 'dresses')

DEFAULT_CATEGORY = 'upper_body'

# category -> zone -> intent -> ease (inches)
EASE_TABLE = {
    'upper_body': {
        'chest': {'snug': 2.5, 'regular': 4.0, 'relaxed': 6.25, 'oversized': 9.5},
        'shoulder': {'snug': 0.25, 'regular': 0.5, 'relaxed': 1.25, 'oversized': 2.0},
        'sleeve': {'snug': 0.0, 'regular': 0.25, 'relaxed': 0.5, 'oversized': 0.75},
        'length': {'snug': 0.0, 'regular': 0.0, 'relaxed': 0.5, 'oversized': 0.75},
    },
    'lower_body': {
        'waist': {'snug': 0.5, 'regular': 0.75, 'relaxed': 1.5, 'oversized': 2.25},
        'hips': {'snug': 0.75, 'regular': 2.0, 'relaxed': 3.25, 'oversized': 4.75},
        'inseam': {'snug': 0.0, 'regular': 0.0, 'relaxed': 0.0, 'oversized': 0.0},
        'rise': {'snug': 0.0, 'regular': 0.0, 'relaxed': 0.0, 'oversized': 0.0},
    },
    'dresses': {
        'bust': {'snug': 2.5, 'regular': 4.0, 'relaxed': 5.5, 'oversized': 7.0},
        'waist': {'snug': 0.75, 'regular': 1.5, 'relaxed': 2.25, 'oversized': 4.0},
        'hips': {'snug': 0.75, 'regular': 2.25, 'relaxed': 4.0, 'oversized': 5.5},
        'length': {'snug': 0.0, 'regular': 0.0, 'relaxed': 0.5, 'oversized': 0.75},
    },
}

# Replacement rows used when the fabric stretches
STRETCH_EASE = {
    'upper_body': {
        'chest': {'snug': 1.5, 'regular': 3.0, 'relaxed': 5.25, 'oversized': 9.5},
    },
    'lower_body': {
        'waist': {'snug': 0.0, 'regular': 0.5, 'relaxed': 0.75, 'oversized': 2.25},
    },
    'dresses': {
        'bust': {'snug': 1.5, 'regular': 3.0, 'relaxed': 4.5, 'oversized': 7.0},
        'waist': {'snug': 0.0, 'regular': 0.75, 'relaxed': 2.25, 'oversized': 4.0},
    },
}

# Zones scored per category: (zone, chart field, weight, hard too-small penalty)
SCORED_ZONES = {
    'upper_body': [
        ('chest', 'chest', 2.0, 10.0),
        ('shoulder', 'shoulder', 1.0, 6.0),
    ],
    'lower_body': [
        ('waist', 'waist', 2.0, 12.0),
        ('hips', 'hips', 1.5, 10.0),
    ],
    'dresses': [
        ('bust', 'chest', 1.5, 10.0),
        ('waist', 'waist', 1.5, 12.0),
        ('hips', 'hips', 1.5, 10.0),
    ],
}

# Minimum user measurements per category
REQUIRED_USER_FIELDS = {
    'upper_body': ('chest', 'shoulder', 'height'),
    'lower_body': ('waist', 'hips', 'inseam', 'height'),
    'dresses': ('bust', 'waist', 'hips', 'height'),
}

# Minimum chart measurements per category (present on at least one row)
REQUIRED_CHART_FIELDS = {
    'upper_body': ('chest',),
    'lower_body': ('waist', 'hips'),
    'dresses': ('chest', 'waist', 'hips'),
}

# Free-text fit keywords, checked in order against the lowercased fit string
FIT_KEYWORDS = [
    ('over', 'oversized'),
    ('relax', 'relaxed'),
    ('slim', 'snug'),
    ('snug', 'snug'),
    ('regular', 'regular'),
]
