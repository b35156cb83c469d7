"""
Stylit command line.

Usage:
    stylit classify "#FF6F61"
    stylit name "#FF6F61"
    stylit color --hex "#FF6F61" --season spring --clarity clear
    stylit fit --profile profile.json --product product.json --fit-intent relaxed
    stylit evaluate --profile profile.json --product product.json

Every command prints one JSON document on stdout.
"""

import argparse
import json
import logging
import sys

from config.recommendation_config import RecommendationConfig, get_config
from config.settings import config as settings

from .core.recommendation_engine import StylitEngine

logger = logging.getLogger(__name__)


def _load_json(path: str) -> dict:
    with open(path, 'r') as f:
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='stylit',
        description='Garment size and color recommendations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--calibration', type=str, default=None,
                        help='Calibration preset (default, strict, lenient)')
    parser.add_argument('--calibration-file', type=str, default=None,
                        help='JSON calibration file')
    parser.add_argument('--indent', type=int, default=2, help='JSON indent (0 for compact)')

    commands = parser.add_subparsers(dest='command', required=True)

    classify = commands.add_parser('classify', help='Classify a hex color against the season palettes')
    classify.add_argument('hex', type=str)

    name = commands.add_parser('name', help='Nearest human color name for a hex color')
    name.add_argument('hex', type=str)

    color = commands.add_parser('color', help='Color suitability for a season profile')
    color.add_argument('--hex', type=str, required=True, help='Garment color hex')
    color.add_argument('--season', type=str, required=True, help='spring, summer, autumn or winter')
    color.add_argument('--undertone', type=str, default=None, help='warm, cool or neutral')
    color.add_argument('--depth', type=str, default=None, help='light, medium or deep')
    color.add_argument('--clarity', type=str, default=None, help='clear or muted')
    color.add_argument('--category', type=str, default=None, help='Garment category')

    for command, help_text in (('fit', 'Size recommendation'),
                               ('evaluate', 'Full size, color, silhouette and fabric recommendation')):
        sub = commands.add_parser(command, help=help_text)
        sub.add_argument('--profile', type=str, required=True, help='User fit profile JSON file')
        sub.add_argument('--product', type=str, required=True, help='Product JSON file')
        sub.add_argument('--fit-intent', type=str, default=None,
                         help='snug, regular, relaxed or oversized')

    return parser


def _calibration(args) -> RecommendationConfig:
    if args.calibration_file:
        return RecommendationConfig.from_json_file(args.calibration_file)
    if args.calibration:
        return get_config(args.calibration)
    return settings.recommendation_config()


def run(args) -> dict:
    engine = StylitEngine(config=_calibration(args))

    if args.command == 'classify':
        return engine.classify_garment(args.hex)
    if args.command == 'name':
        return engine.get_nearest_color_name(args.hex)
    if args.command == 'color':
        user = {'season': args.season, 'undertone': args.undertone,
                'depth': args.depth, 'clarity': args.clarity}
        return engine.color_suitability(user, {'hex': args.hex, 'category': args.category})

    profile = _load_json(args.profile)
    product = _load_json(args.product)
    if args.command == 'fit':
        return engine.recommend_size(profile, product, args.fit_intent)
    return engine.evaluate(profile, product, args.fit_intent)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = run(args)
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(result, indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
