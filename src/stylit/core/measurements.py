"""
Measurement Normalization

Body profiles and size charts arrive from many sources: scraped product
pages, OCR'd charts, hand-entered fit profiles. This module maps all of them
onto one canonical schema in inches:

- to_inches: numbers, unit-suffixed strings, fractions ("32 1/2")
- parse_height_to_inches: 5'8", 5 ft 8, 170 cm, feet-point-inches (5.4)
- normalize_chart_row / normalize_size_chart: alias spellings -> GarmentSizeRow
- normalize_body_profile: suffixed or bare keys -> BodyMeasurementSet

Anything unparseable becomes None and is later reported as missing; it is
never coerced to zero.
"""

import logging
import math
import re
from typing import Any, Dict, List, Optional

from .models import CHART_FIELDS, BodyMeasurementSet, GarmentSizeRow

logger = logging.getLogger(__name__)

CM_PER_INCH = 2.54

# Bare heights above this many inches are read as centimeters
MAX_PLAIN_HEIGHT_INCHES = 96

# Feet accepted in a feet-point-inches height such as 5.4
FEET_RANGE = (3, 8)

_NUMBER_RE = re.compile(r'^\+?(\d+(?:\.\d*)?|\.\d+)$')
_MIXED_FRACTION_RE = re.compile(r'^(\d+)\s+(\d+)\s*/\s*(\d+)$')
_FRACTION_RE = re.compile(r'^(\d+)\s*/\s*(\d+)$')
_UNIT_RE = re.compile(r'^(.*?)\s*(cm|centimeters?|centimetres?|inches|inch|in|"|″)$')
_FEET_RE = re.compile(
    r'^(\d+)\s*(?:\'|′|ft\.?|feet|foot)\s*'
    r'(?:(\d+(?:\.\d+)?)\s*(?:"|″|\'\'|in\.?|inch|inches)?)?$'
)


def cm_to_inches(cm: Optional[float]) -> Optional[float]:
    if cm is None:
        return None
    return cm / CM_PER_INCH


def inches_to_cm(inches: Optional[float]) -> Optional[float]:
    if inches is None:
        return None
    return inches * CM_PER_INCH


def _finite(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _parse_number(text: str) -> Optional[float]:
    """Parse '32', '32.5', '32 1/2' or '3/4'."""
    text = text.strip()
    match = _MIXED_FRACTION_RE.match(text)
    if match:
        whole, num, den = (int(g) for g in match.groups())
        return whole + num / den if den else None
    match = _FRACTION_RE.match(text)
    if match:
        num, den = (int(g) for g in match.groups())
        return num / den if den else None
    if _NUMBER_RE.match(text):
        return float(text)
    return None


def to_inches(value: Any, unit: Optional[str] = None) -> Optional[float]:
    """
    Convert a measurement to inches.

    Args:
        value: number, or string such as "32", "32 in", '32"', "81 cm", "32 1/2"
        unit: unit for values without their own suffix ('in' default, or 'cm')

    Returns:
        Inches as float, or None when the value cannot be read
    """
    if value is None:
        return None

    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            return None
        match = _UNIT_RE.match(text)
        if match:
            number = _parse_number(match.group(1))
            if number is None:
                return None
            return cm_to_inches(number) if _is_cm(match.group(2)) else number
        number = _parse_number(text)
    else:
        number = _finite(value)

    if number is None:
        return None
    return cm_to_inches(number) if _is_cm(unit) else number


_CM_UNITS = ('cm', 'centimeter', 'centimeters', 'centimetre', 'centimetres', 'metric')


def _is_cm(unit: Optional[str]) -> bool:
    return isinstance(unit, str) and unit.strip().lower() in _CM_UNITS


def _feet_point_inches(text: str) -> Optional[float]:
    """'5.4' -> 64, '5.11' -> 71, '5' -> 60; feet 3-8, inches part below 12."""
    feet_part, _, inch_part = text.partition('.')
    if not feet_part.isdigit() or (inch_part and not inch_part.isdigit()):
        return None
    if not FEET_RANGE[0] <= int(feet_part) <= FEET_RANGE[1]:
        return None
    inches = int(inch_part) if inch_part else 0
    if inches >= 12:
        return None
    return int(feet_part) * 12 + inches


def parse_height_to_inches(value: Any, unit: Optional[str] = None) -> Optional[float]:
    """
    Parse a height into inches.

    Accepts 5'8", 5 ft 8, "170 cm", feet-point-inches decimals (5.4 means
    5'4"), plain inches, and plain centimeters above 96.

    Feet-point-inches needs 3 to 8 feet, so 11.5 is rejected. A float cannot
    tell 5.1 from 5.10, so numeric heights ending in .1 are rejected; pass
    the string "5.1" or "5.10" instead.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = _finite(value)
        if number is None:
            return None
        if _is_cm(unit):
            return cm_to_inches(number)
        if number < 12:
            text = repr(number)
            # 5.1 may have been 5.10; only a string keeps the trailing zero
            if text.endswith('.1'):
                return None
            return _feet_point_inches(text)
        if number > MAX_PLAIN_HEIGHT_INCHES:
            return cm_to_inches(number)
        return number

    if not isinstance(value, str):
        return None

    text = value.strip().lower()
    if not text:
        return None

    match = _FEET_RE.match(text)
    if match:
        feet = int(match.group(1))
        inches = float(match.group(2)) if match.group(2) else 0.0
        if inches >= 12:
            return None
        return feet * 12 + inches

    unit_match = _UNIT_RE.match(text)
    if unit_match:
        return to_inches(text)

    number = _parse_number(text)
    if number is None:
        return None
    if _is_cm(unit):
        return cm_to_inches(number)
    if number < 12:
        return _feet_point_inches(text)
    if number > MAX_PLAIN_HEIGHT_INCHES:
        return cm_to_inches(number)
    return number


def format_inches_as_fraction(inches: Optional[float], precision: int = 8) -> str:
    """
    Format inches to the nearest 1/precision, reduced: "32 1/2 in", "3/4 in", "33 in".

    Returns an empty string for None or NaN.
    """
    if inches is None or not math.isfinite(inches):
        return ''

    sign = '-' if inches < 0 else ''
    inches = abs(inches)
    whole = int(math.floor(inches))
    parts = int(round((inches - whole) * precision))

    if parts == 0:
        return f"{sign}{whole} in"
    if parts == precision:
        return f"{sign}{whole + 1} in"

    divisor = math.gcd(parts, precision)
    num, den = parts // divisor, precision // divisor
    if whole == 0:
        return f"{sign}{num}/{den} in"
    return f"{sign}{whole} {num}/{den} in"


def format_measurement(inches: Optional[float], display_unit: str = 'in',
                       use_fraction: bool = True) -> str:
    if inches is None or not math.isfinite(inches):
        return ''
    if display_unit == 'cm':
        return f"{inches_to_cm(inches):.1f} cm"
    if use_fraction:
        return format_inches_as_fraction(inches)
    return f"{inches:.2f} in"


# ---------------------------------------------------------------------------
# Size charts
# ---------------------------------------------------------------------------

# Canonical chart field -> accepted spellings, in priority order. A tuple
# entry is (spelling, factor, unit): flat half-circumference measurements are
# doubled, and bare *_width values from stored charts are centimeters.
CHART_ALIASES = {
    'chest': ('chest circumference', 'chest', 'bust', 'bust/chest', 'chest/bust',
              ('pit to pit', 2, None), ('chest width', 2, 'cm')),
    'shoulder': ('shoulder', 'shoulders', 'shoulder width'),
    'sleeve': ('sleeve', 'sleeve length', 'arm'),
    'top_length': ('length', 'top length', 'shirt length', 'toplength', 'garment length'),
    'waist': ('waist circumference', 'waist', ('waist width', 2, 'cm')),
    'hips': ('hip circumference', 'hips circumference', 'hips', 'hip', ('hip width', 2, 'cm')),
    'inseam': ('inseam', 'in seam', 'inside leg'),
    'outseam': ('outseam', 'out seam', 'outside leg'),
    'rise': ('rise', 'front rise'),
    'dress_length': ('dress length', 'dresslength', 'length', 'full length', 'garment length'),
}

_LABEL_KEYS = ('size_label', 'sizeLabel', 'size', 'label', 'name')

# 'shoulder_width_in' -> ('shoulder width', 'in')
_UNIT_SUFFIX_RE = re.compile(r'^(.*\S)\s+(in|cm)$')


def _alias_key(key: Any) -> str:
    return re.sub(r'[_\-]+', ' ', str(key)).strip().lower()


def _alias_spec(alias):
    if isinstance(alias, tuple):
        return alias
    return alias, 1, None


def normalize_chart_row(row: Dict[str, Any], unit: Optional[str] = None) -> Dict[str, Optional[float]]:
    """
    Map one size-chart row onto the canonical chart schema.

    Measurements may sit under 'measurements', 'measurement' or on the row
    itself. A 'unit' key on the row (or the measurements) overrides the
    chart-level unit for bare numbers. Keys ending in '_in' or '_cm'
    (garment_length_in, inseam_cm) carry their own unit and win over the
    bare spelling.

    Returns:
        Dict with every CHART_FIELDS key, each a float in inches or None
    """
    if not isinstance(row, dict):
        return {name: None for name in CHART_FIELDS}

    source = row.get('measurements') or row.get('measurement') or row
    if not isinstance(source, dict):
        source = {}

    row_unit = source.get('unit') or row.get('unit') or unit
    lookup = {}
    for key, value in source.items():
        if value is None or value == '':
            continue
        name = _alias_key(key)
        suffix = _UNIT_SUFFIX_RE.match(name)
        if suffix:
            lookup[suffix.group(1)] = (value, suffix.group(2))
        else:
            lookup.setdefault(name, (value, None))

    normalized = {}
    for name in CHART_FIELDS:
        value = None
        for alias in CHART_ALIASES[name]:
            spelling, factor, alias_unit = _alias_spec(alias)
            if spelling not in lookup:
                continue
            raw, key_unit = lookup[spelling]
            value = to_inches(raw, key_unit or alias_unit or row_unit)
            if value is not None:
                value *= factor
            break
        normalized[name] = value
    return normalized


def _row_label(row: Dict[str, Any]) -> Optional[str]:
    for key in _LABEL_KEYS:
        label = row.get(key)
        if label is not None and str(label).strip():
            return str(label).strip()
    return None


def normalize_size_chart(chart: Any, unit: Optional[str] = None) -> List[GarmentSizeRow]:
    """
    Normalize a size chart into ordered GarmentSizeRow objects.

    Args:
        chart: list of rows, or a {size_label: measurements} mapping
        unit: chart-wide unit for bare numbers ('in' default)

    Returns:
        Rows in chart order; rows without a size label are dropped
    """
    if isinstance(chart, dict):
        entries = [{'size_label': label, 'measurements': measurements}
                   for label, measurements in chart.items()]
    elif isinstance(chart, (list, tuple)):
        entries = list(chart)
    else:
        return []

    rows = []
    for entry in entries:
        if not isinstance(entry, dict):
            logger.warning(f"Skipping size-chart row that is not a mapping: {entry!r}")
            continue
        label = _row_label(entry)
        if label is None:
            logger.warning(f"Skipping size-chart row without a size label: {entry!r}")
            continue
        rows.append(GarmentSizeRow(size_label=label, position=len(rows),
                                   measurements=normalize_chart_row(entry, unit)))
    return rows


# ---------------------------------------------------------------------------
# Body profiles
# ---------------------------------------------------------------------------

# Zone -> profile key stems; stored profiles use chest_circ_in, shoulder_width_in, ...
_ZONE_ALIASES = {
    'height': ('height',),
    'chest': ('chest', 'chest_circ', 'chest_circumference'),
    'bust': ('bust', 'bust_circ', 'bust_circumference'),
    'waist': ('waist', 'waist_circ', 'waist_circumference'),
    'hips': ('hips', 'hip', 'hip_circ', 'hips_circ', 'hip_circumference'),
    'shoulder': ('shoulder', 'shoulders', 'shoulder_width'),
    'inseam': ('inseam', 'inseam_length'),
    'sleeve': ('sleeve', 'sleeve_length'),
}


def _profile_value(profile: Dict[str, Any], names, profile_unit: Optional[str]):
    """First populated key for a zone as (raw value, unit)."""
    for name in names:
        for key, key_unit in ((f"{name}_in", 'in'), (f"{name}In", 'in'),
                              (f"{name}_cm", 'cm'), (f"{name}Cm", 'cm'),
                              (name, profile_unit)):
            value = profile.get(key)
            if value is not None and value != '':
                return value, key_unit
    return None, profile_unit


def normalize_body_profile(profile: Optional[Dict[str, Any]]) -> BodyMeasurementSet:
    """
    Build a BodyMeasurementSet from a user fit profile.

    Keys may carry a unit suffix (chest_in, chestCm, ...) or be bare, in which
    case the profile's 'unit' applies (inches by default). A nested
    'measurements' dict is merged under the top-level keys. Bust falls back
    to chest.
    """
    if not isinstance(profile, dict):
        return BodyMeasurementSet()

    merged = dict(profile.get('measurements') or {})
    merged.update({k: v for k, v in profile.items() if k != 'measurements'})
    profile_unit = merged.get('unit')

    values = {}
    for zone, names in _ZONE_ALIASES.items():
        raw, unit = _profile_value(merged, names, profile_unit)
        if zone == 'height':
            values[zone] = parse_height_to_inches(raw, unit)
        else:
            values[zone] = to_inches(raw, unit)

    if values['bust'] is None:
        values['bust'] = values['chest']

    weight = None
    for key in ('weight', 'weight_kg', 'weightKg'):
        if merged.get(key) is not None:
            raw = merged[key]
            weight = _parse_number(raw) if isinstance(raw, str) else _finite(raw)
            break

    measurements = BodyMeasurementSet(weight=weight, **values)
    logger.debug(f"Normalized body profile: {measurements.to_dict()}")
    return measurements
