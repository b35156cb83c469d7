"""
Seasonal Palette Catalog

Four seasons, four groups per season, five swatches per group (80 total).
Catalog order matters: the classifier breaks ΔE ties by the first swatch
encountered when walking seasons, groups and swatches in the order below.

Key Principles:
1. Spring and Autumn palettes are warm, Summer and Winter are cool
2. Neutrals anchor a wardrobe, accents and brights sit near the face,
   softs are low-chroma companions
"""

SEASONS = ('spring', 'summer', 'autumn', 'winter')

GROUPS = ('neutrals', 'accents', 'brights', 'softs')

SEASON_UNDERTONE = {
    'spring': 'warm',
    'summer': 'cool',
    'autumn': 'warm',
    'winter': 'cool',
}

SEASON_PALETTES = {
    'spring': {
        'neutrals': [
            ('Warm ivory', '#F6EAD7'),
            ('Cream', '#FFF1D6'),
            ('Light camel', '#D8B58A'),
            ('Soft beige', '#E6D2B5'),
            ('Golden sand', '#D9B77C'),
        ],
        'accents': [
            ('Coral', '#FF6F61'),
            ('Peach', '#FFB38A'),
            ('Warm rose', '#E88A8A'),
            ('Apricot', '#FF9F6B'),
            ('Melon', '#FF8C69'),
        ],
        'brights': [
            ('Cantaloupe', '#FFA64D'),
            ('Warm yellow', '#FFD84D'),
            ('Bright aqua', '#2ECED0'),
            ('Light turquoise', '#5ED6C1'),
            ('Sunny gold', '#FFC83D'),
        ],
        'softs': [
            ('Mint', '#BFE6C7'),
            ('Soft peach', '#FFD1B3'),
            ('Light warm pink', '#F6B7B2'),
            ('Soft teal', '#7FCFC3'),
            ('Buttercream', '#FFF0B3'),
        ],
    },
    'summer': {
        'neutrals': [
            ('Cool ivory', '#F2F0EB'),
            ('Soft gray', '#C8C8D0'),
            ('Rose beige', '#E3D5D2'),
            ('Misty taupe', '#CDC4C1'),
            ('Silver frost', '#DDE1E8'),
        ],
        'accents': [
            ('Dusty rose', '#D8A7A7'),
            ('Mauve', '#C8A2C8'),
            ('Soft berry', '#B58CA5'),
            ('Lavender', '#C7B8E0'),
            ('Ballet pink', '#F4C5C9'),
        ],
        'brights': [
            ('Periwinkle', '#8FA4E8'),
            ('Cool aqua', '#8FD6D5'),
            ('Powder blue', '#AFC8E7'),
            ('Soft fuchsia', '#D66DA3'),
            ('Strawberry ice', '#E87BAA'),
        ],
        'softs': [
            ('Blue gray', '#B7C4CF'),
            ('Misty blue', '#C6D7E2'),
            ('Heather', '#D8CBE2'),
            ('Soft lilac', '#E7D6F5'),
            ('Cloud pink', '#F7DDE3'),
        ],
    },
    'autumn': {
        'neutrals': [
            ('Warm beige', '#E6D5B8'),
            ('Camel', '#C1A16B'),
            ('Olive taupe', '#B6A892'),
            ('Caramel', '#B78B57'),
            ('Soft olive', '#A89F80'),
        ],
        'accents': [
            ('Terracotta', '#C96541'),
            ('Rust', '#B4441C'),
            ('Burnt sienna', '#A85F3D'),
            ('Mustard', '#D3A63C'),
            ('Warm olive', '#8E8C53'),
        ],
        'brights': [
            ('Pumpkin', '#F18F01'),
            ('Marigold', '#FFC145'),
            ('Moss green', '#8FAE3E'),
            ('Teal', '#1B998B'),
            ('Brick red', '#A23E3D'),
        ],
        'softs': [
            ('Sage', '#C4C8A8'),
            ('Dusty olive', '#A3A380'),
            ('Clay', '#C9A28C'),
            ('Soft terracotta', '#D1A38A'),
            ('Muted gold', '#D6BA6A'),
        ],
    },
    'winter': {
        'neutrals': [
            ('Snow white', '#FFFFFF'),
            ('Cool black', '#0A0A0A'),
            ('Charcoal', '#333333'),
            ('Silver gray', '#BFC3C9'),
            ('Blue-gray', '#8A97A8'),
        ],
        'accents': [
            ('Fuchsia', '#E3007E'),
            ('Berry', '#B8004E'),
            ('Royal purple', '#5A2D82'),
            ('Crimson', '#D1002C'),
            ('Electric magenta', '#FF1B8D'),
        ],
        'brights': [
            ('True red', '#FF0000'),
            ('Sapphire blue', '#0F52BA'),
            ('Emerald', '#009975'),
            ('Icy teal', '#4BC6B9'),
            ('Lemon ice', '#F2FF6E'),
        ],
        'softs': [
            ('Icy lavender', '#D6D4F7'),
            ('Ice pink', '#F6D3E6'),
            ('Frost blue', '#D8EAFE'),
            ('Soft wine', '#C79CA6'),
            ('Cool plum', '#836283'),
        ],
    },
}


def iter_palette():
    """Yield (season, group, name, hex) in catalog order."""
    for season in SEASONS:
        for group in GROUPS:
            for name, hex_code in SEASON_PALETTES[season][group]:
                yield season, group, name, hex_code
