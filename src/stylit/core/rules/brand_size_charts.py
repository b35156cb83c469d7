"""
Brand Size Charts

Published garment measurements (inches) for brands whose product pages
often omit a chart. Only used when brand-chart fallback is switched on.
"""

from typing import Dict, List, Optional

_UPPER_FIELDS = ('chest', 'waist', 'length', 'sleeve', 'shoulder')
_LOWER_FIELDS = ('waist', 'hips', 'inseam', 'rise')
_DRESS_FIELDS = ('chest', 'waist', 'hips', 'length')


def _chart(fields, rows):
    return {size: dict(zip(fields, values)) for size, values in rows}


BRAND_SIZE_CHARTS = {
    'H&M': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (34, 28, 24, 30, 16)),
            ('S', (36, 30, 25, 31, 16.5)),
            ('M', (40, 34, 26, 32, 17.5)),
            ('L', (44, 38, 27, 33, 18.5)),
            ('XL', (48, 42, 28, 34, 19.5)),
            ('XXL', (52, 46, 29, 35, 20.5)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (28, 36, 30, 9)),
            ('S', (30, 38, 30, 9.5)),
            ('M', (34, 42, 31, 10)),
            ('L', (38, 46, 31, 10.5)),
            ('XL', (42, 50, 32, 11)),
            ('XXL', (46, 54, 32, 11.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (34, 28, 36, 36)),
            ('S', (36, 30, 38, 37)),
            ('M', (40, 34, 42, 38)),
            ('L', (44, 38, 46, 39)),
            ('XL', (48, 42, 50, 40)),
            ('XXL', (52, 46, 54, 41)),
        ]),
    },
    'Zara': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (33, 27, 23, 29, 15.5)),
            ('S', (35, 29, 24, 30, 16)),
            ('M', (39, 33, 25, 31, 17)),
            ('L', (43, 37, 26, 32, 18)),
            ('XL', (47, 41, 27, 33, 19)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (27, 35, 30, 8.5)),
            ('S', (29, 37, 30, 9)),
            ('M', (33, 41, 31, 9.5)),
            ('L', (37, 45, 31, 10)),
            ('XL', (41, 49, 32, 10.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (33, 27, 35, 35)),
            ('S', (35, 29, 37, 36)),
            ('M', (39, 33, 41, 37)),
            ('L', (43, 37, 45, 38)),
            ('XL', (47, 41, 49, 39)),
        ]),
    },
    'Nike': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (35, 29, 25, 31, 16)),
            ('S', (37, 31, 26, 32, 16.5)),
            ('M', (41, 35, 27, 33, 17.5)),
            ('L', (45, 39, 28, 34, 18.5)),
            ('XL', (49, 43, 29, 35, 19.5)),
            ('XXL', (53, 47, 30, 36, 20.5)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (29, 37, 30, 9)),
            ('S', (31, 39, 30, 9.5)),
            ('M', (35, 43, 31, 10)),
            ('L', (39, 47, 31, 10.5)),
            ('XL', (43, 51, 32, 11)),
            ('XXL', (47, 55, 32, 11.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (35, 29, 37, 36)),
            ('S', (37, 31, 39, 37)),
            ('M', (41, 35, 43, 38)),
            ('L', (45, 39, 47, 39)),
            ('XL', (49, 43, 51, 40)),
            ('XXL', (53, 47, 55, 41)),
        ]),
    },
    'Adidas': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (34, 28, 24, 30, 15.5)),
            ('S', (36, 30, 25, 31, 16)),
            ('M', (40, 34, 26, 32, 17)),
            ('L', (44, 38, 27, 33, 18)),
            ('XL', (48, 42, 28, 34, 19)),
            ('XXL', (52, 46, 29, 35, 20)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (28, 36, 30, 9)),
            ('S', (30, 38, 30, 9.5)),
            ('M', (34, 42, 31, 10)),
            ('L', (38, 46, 31, 10.5)),
            ('XL', (42, 50, 32, 11)),
            ('XXL', (46, 54, 32, 11.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (34, 28, 36, 36)),
            ('S', (36, 30, 38, 37)),
            ('M', (40, 34, 42, 38)),
            ('L', (44, 38, 46, 39)),
            ('XL', (48, 42, 50, 40)),
            ('XXL', (52, 46, 54, 41)),
        ]),
    },
    'Uniqlo': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (35, 29, 24, 30, 16)),
            ('S', (37, 31, 25, 31, 16.5)),
            ('M', (41, 35, 26, 32, 17.5)),
            ('L', (45, 39, 27, 33, 18.5)),
            ('XL', (49, 43, 28, 34, 19.5)),
            ('XXL', (53, 47, 29, 35, 20.5)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (29, 37, 30, 9)),
            ('S', (31, 39, 30, 9.5)),
            ('M', (35, 43, 31, 10)),
            ('L', (39, 47, 31, 10.5)),
            ('XL', (43, 51, 32, 11)),
            ('XXL', (47, 55, 32, 11.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (35, 29, 37, 36)),
            ('S', (37, 31, 39, 37)),
            ('M', (41, 35, 43, 38)),
            ('L', (45, 39, 47, 39)),
            ('XL', (49, 43, 51, 40)),
            ('XXL', (53, 47, 55, 41)),
        ]),
    },
    'Banana Republic': {
        'upper_body': _chart(_UPPER_FIELDS, [
            ('XS', (34, 28, 24, 30, 15.5)),
            ('S', (36, 30, 25, 31, 16)),
            ('M', (40, 34, 26, 32, 17)),
            ('L', (44, 38, 27, 33, 18)),
            ('XL', (48, 42, 28, 34, 19)),
            ('XXL', (52, 46, 29, 35, 20)),
        ]),
        'lower_body': _chart(_LOWER_FIELDS, [
            ('XS', (28, 36, 30, 9)),
            ('S', (30, 38, 30, 9.5)),
            ('M', (34, 42, 31, 10)),
            ('L', (38, 46, 31, 10.5)),
            ('XL', (42, 50, 32, 11)),
            ('XXL', (46, 54, 32, 11.5)),
        ]),
        'dresses': _chart(_DRESS_FIELDS, [
            ('XS', (34, 28, 36, 36)),
            ('S', (36, 30, 38, 37)),
            ('M', (40, 34, 42, 38)),
            ('L', (44, 38, 46, 39)),
            ('XL', (48, 42, 50, 40)),
            ('XXL', (52, 46, 54, 41)),
        ]),
    },
}

_CATEGORY_ALIASES = {
    'upper': 'upper_body',
    'upper_body': 'upper_body',
    'lower': 'lower_body',
    'lower_body': 'lower_body',
    'dress': 'dresses',
    'dresses': 'dresses',
}


def get_available_brands() -> List[str]:
    return list(BRAND_SIZE_CHARTS.keys())


def get_brand_size_chart(brand: Optional[str], category: Optional[str]) -> Optional[List[Dict]]:
    """
    Size chart rows for a brand and category.

    Brand matching ignores case and surrounding whitespace. Returns rows as
    [{'size_label', 'measurements'}] in size order, or None when unknown.
    """
    if not isinstance(brand, str) or not isinstance(category, str):
        return None
    category = _CATEGORY_ALIASES.get(category.strip().lower())
    wanted = brand.strip().lower()
    for name, charts in BRAND_SIZE_CHARTS.items():
        if name.lower() == wanted and category in charts:
            return [{'size_label': size, 'measurements': dict(measurements)}
                    for size, measurements in charts[category].items()]
    return None
