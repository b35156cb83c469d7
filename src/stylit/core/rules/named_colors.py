"""
Named Color Reference Dataset

Human-friendly color names used to label garment colors. The first block is
the CSS/X11 set, the second covers fashion and textile names shoppers expect
to see on a product page (camel, rust, sage, ...).

Names are unique (case-insensitive). When two names share a hex value the
earlier one wins a nearest-name lookup.
"""

NAMED_COLORS = [
    # Whites and off-whites
    ('White', '#FFFFFF'),
    ('Snow', '#FFFAFA'),
    ('Ghost White', '#F8F8FF'),
    ('White Smoke', '#F5F5F5'),
    ('Floral White', '#FFFAF0'),
    ('Ivory', '#FFFFF0'),
    ('Linen', '#FAF0E6'),
    ('Old Lace', '#FDF5E6'),
    ('Seashell', '#FFF5EE'),
    ('Antique White', '#FAEBD7'),
    ('Cornsilk', '#FFF8DC'),
    ('Beige', '#F5F5DC'),
    ('Mint Cream', '#F5FFFA'),
    ('Honeydew', '#F0FFF0'),
    ('Azure', '#F0FFFF'),
    ('Alice Blue', '#F0F8FF'),
    ('Lavender Blush', '#FFF0F5'),
    ('Lavender Mist', '#E6E6FA'),
    ('Misty Rose', '#FFE4E1'),
    ('Papaya Whip', '#FFEFD5'),
    ('Blanched Almond', '#FFEBCD'),
    ('Bisque', '#FFE4C4'),
    ('Navajo White', '#FFDEAD'),
    ('Moccasin', '#FFE4B5'),
    ('Lemon Chiffon', '#FFFACD'),
    ('Light Yellow', '#FFFFE0'),
    ('Light Goldenrod Yellow', '#FAFAD2'),
    ('Eggshell', '#F0EAD6'),
    ('Off White', '#FAF9F6'),
    ('Alabaster', '#EDEADE'),
    ('Porcelain', '#F3F1EC'),
    ('Pearl', '#EAE0C8'),
    ('Bone', '#E3DAC9'),
    ('Ecru', '#C2B280'),
    ('Oatmeal', '#E3D7BF'),
    ('Vanilla', '#F3E5AB'),
    ('Cream', '#FFFDD0'),
    ('Champagne', '#F7E7CE'),
    ('Parchment', '#F1E9D2'),

    # Grays and blacks
    ('Black', '#000000'),
    ('Jet Black', '#0A0A0A'),
    ('Onyx', '#353839'),
    ('Charcoal', '#36454F'),
    ('Graphite', '#383838'),
    ('Dim Gray', '#696969'),
    ('Gray', '#808080'),
    ('Dark Gray', '#A9A9A9'),
    ('Silver', '#C0C0C0'),
    ('Light Gray', '#D3D3D3'),
    ('Gainsboro', '#DCDCDC'),
    ('Slate Gray', '#708090'),
    ('Light Slate Gray', '#778899'),
    ('Dark Slate Gray', '#2F4F4F'),
    ('Gunmetal', '#2A3439'),
    ('Pewter', '#8E9196'),
    ('Ash Gray', '#B2BEB5'),
    ('Heather Gray', '#B6B2AE'),
    ('Dove Gray', '#6D6C6C'),
    ('Stone', '#928E85'),
    ('Smoke', '#738276'),
    ('Steel Gray', '#71797E'),
    ('Platinum', '#E5E4E2'),
    ('Cool Gray', '#8C92AC'),
    ('Warm Gray', '#9A8F83'),

    # Browns and tans
    ('Brown', '#A52A2A'),
    ('Saddle Brown', '#8B4513'),
    ('Sienna', '#A0522D'),
    ('Chocolate', '#D2691E'),
    ('Peru', '#CD853F'),
    ('Sandy Brown', '#F4A460'),
    ('Burlywood', '#DEB887'),
    ('Tan', '#D2B48C'),
    ('Rosy Brown', '#BC8F8F'),
    ('Wheat', '#F5DEB3'),
    ('Maroon', '#800000'),
    ('Camel', '#C19A6B'),
    ('Khaki Tan', '#C3B091'),
    ('Taupe', '#483C32'),
    ('Greige', '#BEB6A8'),
    ('Mushroom', '#ADA291'),
    ('Mocha', '#967969'),
    ('Coffee', '#6F4E37'),
    ('Espresso', '#4B3621'),
    ('Cocoa', '#875F42'),
    ('Chestnut', '#954535'),
    ('Mahogany', '#C04000'),
    ('Walnut', '#773F1A'),
    ('Umber', '#635147'),
    ('Burnt Umber', '#8A3324'),
    ('Cognac', '#9A463D'),
    ('Cinnamon', '#D2691F'),
    ('Caramel', '#AF6F09'),
    ('Toffee', '#A0785A'),
    ('Hazelnut', '#AE9F80'),
    ('Fawn', '#E5AA70'),
    ('Sand', '#C2B280'),
    ('Desert Sand', '#EDC9AF'),
    ('Nude', '#E3BC9A'),
    ('Biscuit', '#FFE4C5'),
    ('Latte', '#C5A582'),
    ('Chocolate Brown', '#5C3317'),
    ('Rust Brown', '#8B4000'),
    ('Bronze', '#CD7F32'),
    ('Copper', '#B87333'),
    ('Russet', '#80461B'),
    ('Auburn', '#A52A2B'),
    ('Tawny', '#CD5700'),

    # Reds
    ('Red', '#FF0000'),
    ('Dark Red', '#8B0000'),
    ('Firebrick', '#B22222'),
    ('Crimson', '#DC143C'),
    ('Indian Red', '#CD5C5C'),
    ('Light Coral', '#F08080'),
    ('Salmon', '#FA8072'),
    ('Dark Salmon', '#E9967A'),
    ('Light Salmon', '#FFA07A'),
    ('Tomato', '#FF6347'),
    ('Orange Red', '#FF4500'),
    ('Scarlet', '#FF2400'),
    ('Cherry Red', '#D2042D'),
    ('Cardinal', '#C41E3A'),
    ('Carmine', '#960018'),
    ('Ruby', '#E0115F'),
    ('Garnet', '#733635'),
    ('Burgundy', '#800020'),
    ('Oxblood', '#4A0000'),
    ('Wine', '#722F37'),
    ('Bordeaux', '#5C0120'),
    ('Claret', '#7F1734'),
    ('Cranberry', '#9F000F'),
    ('Brick Red', '#CB4154'),
    ('Fire Engine Red', '#CE2029'),
    ('Candy Apple Red', '#FF0800'),
    ('Poppy', '#E35335'),
    ('Vermilion', '#E34234'),
    ('Lipstick Red', '#C0392B'),
    ('Tomato Red', '#E03C31'),
    ('Blood Red', '#660000'),
    ('Rosewood', '#65000B'),
    ('Merlot', '#73343A'),

    # Pinks
    ('Pink', '#FFC0CB'),
    ('Light Pink', '#FFB6C1'),
    ('Hot Pink', '#FF69B4'),
    ('Deep Pink', '#FF1493'),
    ('Pale Violet Red', '#DB7093'),
    ('Medium Violet Red', '#C71585'),
    ('Blush', '#DE5D83'),
    ('Blush Pink', '#FEC5E5'),
    ('Baby Pink', '#F4C2C2'),
    ('Pastel Pink', '#FFD1DC'),
    ('Powder Pink', '#FFB2D0'),
    ('Rose', '#FF007F'),
    ('Rose Pink', '#FF66CC'),
    ('Dusty Rose', '#DCAE96'),
    ('Old Rose', '#C08081'),
    ('Rose Gold', '#B76E79'),
    ('Mauve Pink', '#E0B0FF'),
    ('Bubblegum', '#FFC1CC'),
    ('Flamingo', '#FC8EAC'),
    ('Carnation', '#FFA6C9'),
    ('Watermelon', '#FC6C85'),
    ('Magenta', '#FF00FF'),
    ('Fuchsia Pink', '#FF77FF'),
    ('Raspberry', '#E30B5C'),
    ('Cerise', '#DE3163'),
    ('Punch Pink', '#EC5578'),
    ('Shocking Pink', '#FC0FC0'),
    ('Neon Pink', '#FE59C2'),
    ('Peony', '#E3829E'),
    ('Ballet Slipper', '#F7CAC9'),
    ('Petal Pink', '#F5C3C2'),
    ('Shell Pink', '#FFB3A7'),
    ('Orchid Pink', '#F2BDCD'),

    # Oranges and corals
    ('Orange', '#FFA500'),
    ('Dark Orange', '#FF8C00'),
    ('Coral', '#FF7F50'),
    ('Living Coral', '#FF6F61'),
    ('Peach', '#FFE5B4'),
    ('Peach Puff', '#FFDAB9'),
    ('Apricot', '#FBCEB1'),
    ('Tangerine', '#F28500'),
    ('Mandarin', '#F37A48'),
    ('Pumpkin', '#FF7518'),
    ('Burnt Orange', '#CC5500'),
    ('Terracotta', '#E2725B'),
    ('Rust', '#B7410E'),
    ('Persimmon', '#EC5800'),
    ('Cantaloupe', '#FFA62F'),
    ('Melon', '#FEBAAD'),
    ('Papaya', '#FFA07B'),
    ('Marigold', '#EAA221'),
    ('Saffron', '#F4C430'),
    ('Amber', '#FFBF00'),
    ('Ginger', '#B06500'),
    ('Paprika', '#8D0226'),
    ('Clay', '#B66A50'),
    ('Adobe', '#BD6C48'),
    ('Sunset Orange', '#FD5E53'),
    ('Neon Orange', '#FF5F1F'),
    ('Salmon Pink', '#FF91A4'),

    # Yellows and golds
    ('Yellow', '#FFFF00'),
    ('Gold', '#FFD700'),
    ('Goldenrod', '#DAA520'),
    ('Dark Goldenrod', '#B8860B'),
    ('Pale Goldenrod', '#EEE8AA'),
    ('Khaki', '#F0E68C'),
    ('Dark Khaki', '#BDB76B'),
    ('Lemon', '#FFF44F'),
    ('Canary Yellow', '#FFEF00'),
    ('Butter Yellow', '#FFFD74'),
    ('Buttercup', '#F3AD16'),
    ('Mustard', '#FFDB58'),
    ('Dijon', '#C49102'),
    ('Ochre', '#CC7722'),
    ('Honey', '#EBA937'),
    ('Maize', '#FBEC5D'),
    ('Sunflower', '#FFDA03'),
    ('Daffodil', '#FFFF31'),
    ('Lemon Yellow', '#FFF700'),
    ('Pastel Yellow', '#FDFD96'),
    ('Straw', '#E4D96F'),
    ('Flax', '#EEDC82'),
    ('Old Gold', '#CFB53B'),
    ('Antique Gold', '#B59410'),
    ('Metallic Gold', '#D4AF37'),
    ('Neon Yellow', '#CFFF04'),
    ('Chartreuse Yellow', '#DFFF00'),

    # Greens
    ('Green', '#008000'),
    ('Dark Green', '#006400'),
    ('Lime', '#00FF00'),
    ('Lime Green', '#32CD32'),
    ('Lawn Green', '#7CFC00'),
    ('Chartreuse', '#7FFF00'),
    ('Green Yellow', '#ADFF2F'),
    ('Yellow Green', '#9ACD32'),
    ('Olive', '#808000'),
    ('Olive Drab', '#6B8E23'),
    ('Dark Olive Green', '#556B2F'),
    ('Forest Green', '#228B22'),
    ('Sea Green', '#2E8B57'),
    ('Medium Sea Green', '#3CB371'),
    ('Dark Sea Green', '#8FBC8F'),
    ('Light Green', '#90EE90'),
    ('Pale Green', '#98FB98'),
    ('Spring Green', '#00FF7F'),
    ('Medium Spring Green', '#00FA9A'),
    ('Emerald', '#50C878'),
    ('Jade', '#00A86B'),
    ('Kelly Green', '#4CBB17'),
    ('Hunter Green', '#355E3B'),
    ('Bottle Green', '#006A4E'),
    ('British Racing Green', '#004225'),
    ('Pine Green', '#01796F'),
    ('Army Green', '#4B5320'),
    ('Military Green', '#667C3E'),
    ('Moss Green', '#8A9A5B'),
    ('Fern Green', '#4F7942'),
    ('Sage', '#BCB88A'),
    ('Sage Green', '#9CAF88'),
    ('Eucalyptus', '#5F8575'),
    ('Pistachio', '#93C572'),
    ('Mint', '#3EB489'),
    ('Mint Green', '#98FF98'),
    ('Seafoam Green', '#9FE2BF'),
    ('Celadon', '#ACE1AF'),
    ('Pastel Green', '#77DD77'),
    ('Avocado', '#568203'),
    ('Artichoke', '#8F9779'),
    ('Khaki Green', '#8A865D'),
    ('Shamrock', '#009E60'),
    ('Malachite', '#0BDA51'),
    ('Neon Green', '#39FF14'),
    ('Apple Green', '#8DB600'),
    ('Pear', '#D1E231'),
    ('Matcha', '#A4B494'),
    ('Juniper', '#6D9292'),

    # Blues and teals
    ('Blue', '#0000FF'),
    ('Navy', '#000080'),
    ('Dark Blue', '#00008B'),
    ('Medium Blue', '#0000CD'),
    ('Midnight Blue', '#191970'),
    ('Royal Blue', '#4169E1'),
    ('Cornflower Blue', '#6495ED'),
    ('Dodger Blue', '#1E90FF'),
    ('Deep Sky Blue', '#00BFFF'),
    ('Sky Blue', '#87CEEB'),
    ('Light Sky Blue', '#87CEFA'),
    ('Light Blue', '#ADD8E6'),
    ('Powder Blue', '#B0E0E6'),
    ('Light Steel Blue', '#B0C4DE'),
    ('Steel Blue', '#4682B4'),
    ('Cadet Blue', '#5F9EA0'),
    ('Slate Blue', '#6A5ACD'),
    ('Dark Slate Blue', '#483D8B'),
    ('Cobalt Blue', '#0047AB'),
    ('Sapphire', '#0F52BA'),
    ('Cerulean', '#007BA7'),
    ('Azure Blue', '#007FFF'),
    ('Denim', '#1560BD'),
    ('Dark Denim', '#1E2F4E'),
    ('Light Denim', '#6F8FAF'),
    ('Indigo Blue', '#1A237E'),
    ('Prussian Blue', '#003153'),
    ('Oxford Blue', '#002147'),
    ('Navy Blue', '#1F305E'),
    ('Ink Blue', '#1B2A49'),
    ('French Blue', '#0072BB'),
    ('Baby Blue', '#89CFF0'),
    ('Periwinkle', '#CCCCFF'),
    ('Ice Blue', '#DDF3F5'),
    ('Electric Blue', '#7DF9FF'),
    ('Ultramarine', '#3F00FF'),
    ('Lapis', '#26619C'),
    ('Chambray', '#4A6B8A'),
    ('Dusty Blue', '#8BA3B8'),
    ('Cornflower', '#9ACEEB'),
    ('Teal', '#008080'),
    ('Dark Cyan', '#008B8B'),
    ('Cyan', '#00FFFF'),
    ('Light Cyan', '#E0FFFF'),
    ('Aquamarine', '#7FFFD4'),
    ('Turquoise', '#40E0D0'),
    ('Medium Turquoise', '#48D1CC'),
    ('Dark Turquoise', '#00CED1'),
    ('Pale Turquoise', '#AFEEEE'),
    ('Light Sea Green', '#20B2AA'),
    ('Peacock Blue', '#005F69'),
    ('Petrol', '#005F6A'),
    ('Duck Egg Blue', '#C3DBD5'),
    ('Aqua Marine', '#5FD3C5'),
    ('Robin Egg Blue', '#00CCCC'),
    ('Tiffany Blue', '#0ABAB5'),
    ('Caribbean', '#1AC1DD'),
    ('Deep Teal', '#00555A'),
    ('Spruce', '#2C5545'),

    # Purples
    ('Purple', '#800080'),
    ('Indigo', '#4B0082'),
    ('Dark Magenta', '#8B008B'),
    ('Dark Violet', '#9400D3'),
    ('Dark Orchid', '#9932CC'),
    ('Medium Orchid', '#BA55D3'),
    ('Orchid', '#DA70D6'),
    ('Violet', '#EE82EE'),
    ('Plum', '#DDA0DD'),
    ('Thistle', '#D8BFD8'),
    ('Medium Purple', '#9370DB'),
    ('Blue Violet', '#8A2BE2'),
    ('Rebecca Purple', '#663399'),
    ('Lavender', '#B57EDC'),
    ('Lilac', '#C8A2C8'),
    ('Wisteria', '#C9A0DC'),
    ('Mauve', '#915F6D'),
    ('Amethyst', '#9966CC'),
    ('Grape', '#6F2DA8'),
    ('Eggplant', '#614051'),
    ('Aubergine', '#3D0734'),
    ('Royal Purple', '#7851A9'),
    ('Byzantium', '#702963'),
    ('Heliotrope', '#DF73FF'),
    ('Iris', '#5A4FCF'),
    ('Periwinkle Purple', '#8E82FE'),
    ('Boysenberry', '#873260'),
    ('Mulberry', '#C54B8C'),
    ('Plum Purple', '#580F41'),
    ('Orchid Purple', '#AF69EF'),
    ('Pastel Purple', '#B39EB5'),
    ('Dusty Lavender', '#AC92B0'),
    ('Heather Purple', '#9A7EA6'),
    ('Ultra Violet', '#5F4B8B'),
]
