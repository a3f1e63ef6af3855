"""Palette-based BrickColor values."""

from __future__ import annotations

import enum
from typing import Any


class BrickColor(enum.Enum):
    """A color from the legacy BrickColor palette.

    Each member's value is its number; ``label`` is its display name and
    ``rgb`` its color as three 8-bit channels.
    """

    WHITE = (1, "White", (242, 243, 243))
    GREY = (2, "Grey", (161, 165, 162))
    LIGHT_YELLOW = (3, "Light yellow", (249, 233, 153))
    BRICK_YELLOW = (5, "Brick yellow", (215, 197, 154))
    LIGHT_GREEN_MINT = (6, "Light green (Mint)", (194, 218, 184))
    LIGHT_REDDISH_VIOLET = (9, "Light reddish violet", (232, 186, 200))
    PASTEL_BLUE = (11, "Pastel Blue", (128, 187, 219))
    LIGHT_ORANGE_BROWN = (12, "Light orange brown", (203, 132, 66))
    NOUGAT = (18, "Nougat", (204, 142, 105))
    BRIGHT_RED = (21, "Bright red", (196, 40, 28))
    MED_REDDISH_VIOLET = (22, "Med. reddish violet", (196, 112, 160))
    BRIGHT_BLUE = (23, "Bright blue", (13, 105, 172))
    BRIGHT_YELLOW = (24, "Bright yellow", (245, 205, 48))
    EARTH_ORANGE = (25, "Earth orange", (98, 71, 50))
    BLACK = (26, "Black", (27, 42, 53))
    DARK_GREY = (27, "Dark grey", (109, 110, 108))
    DARK_GREEN = (28, "Dark green", (40, 127, 71))
    MEDIUM_GREEN = (29, "Medium green", (161, 196, 140))
    LIG_YELLOWICH_ORANGE = (36, "Lig. Yellowich orange", (243, 207, 155))
    BRIGHT_GREEN = (37, "Bright green", (75, 151, 75))
    DARK_ORANGE = (38, "Dark orange", (160, 95, 53))
    LIGHT_BLUISH_VIOLET = (39, "Light bluish violet", (193, 202, 222))
    TRANSPARENT = (40, "Transparent", (236, 236, 236))
    TR_RED = (41, "Tr. Red", (205, 84, 75))
    TR_LG_BLUE = (42, "Tr. Lg blue", (193, 223, 240))
    TR_BLUE = (43, "Tr. Blue", (123, 182, 232))
    TR_YELLOW = (44, "Tr. Yellow", (247, 241, 141))
    LIGHT_BLUE = (45, "Light blue", (180, 210, 228))
    TR_FLU_REDDISH_ORANGE = (47, "Tr. Flu. Reddish orange", (217, 133, 108))
    TR_GREEN = (48, "Tr. Green", (132, 182, 141))
    TR_FLU_GREEN = (49, "Tr. Flu. Green", (248, 241, 132))
    PHOSPH_WHITE = (50, "Phosph. White", (236, 232, 222))
    LIGHT_RED = (100, "Light red", (238, 196, 182))
    MEDIUM_RED = (101, "Medium red", (218, 134, 122))
    MEDIUM_BLUE = (102, "Medium blue", (110, 153, 202))
    LIGHT_GREY = (103, "Light grey", (199, 193, 183))
    BRIGHT_VIOLET = (104, "Bright violet", (107, 50, 124))
    BR_YELLOWISH_ORANGE = (105, "Br. yellowish orange", (226, 155, 64))
    BRIGHT_ORANGE = (106, "Bright orange", (218, 133, 65))
    BRIGHT_BLUISH_GREEN = (107, "Bright bluish green", (0, 143, 156))
    EARTH_YELLOW = (108, "Earth yellow", (104, 92, 67))
    BRIGHT_BLUISH_VIOLET = (110, "Bright bluish violet", (67, 84, 147))
    TR_BROWN = (111, "Tr. Brown", (191, 183, 177))
    MEDIUM_BLUISH_VIOLET = (112, "Medium bluish violet", (104, 116, 172))
    TR_MEDI_REDDISH_VIOLET = (113, "Tr. Medi. reddish violet", (229, 173, 200))
    MED_YELLOWISH_GREEN = (115, "Med. yellowish green", (199, 210, 60))
    MED_BLUISH_GREEN = (116, "Med. bluish green", (85, 165, 175))
    LIGHT_BLUISH_GREEN = (118, "Light bluish green", (183, 215, 213))
    BR_YELLOWISH_GREEN = (119, "Br. yellowish green", (164, 189, 71))
    LIG_YELLOWISH_GREEN = (120, "Lig. yellowish green", (217, 228, 167))
    MED_YELLOWISH_ORANGE = (121, "Med. yellowish orange", (231, 172, 88))
    BR_REDDISH_ORANGE = (123, "Br. reddish orange", (211, 111, 76))
    BRIGHT_REDDISH_VIOLET = (124, "Bright reddish violet", (146, 57, 120))
    LIGHT_ORANGE = (125, "Light orange", (234, 184, 146))
    TR_BRIGHT_BLUISH_VIOLET = (126, "Tr. Bright bluish violet", (165, 165, 203))
    GOLD = (127, "Gold", (220, 188, 129))
    DARK_NOUGAT = (128, "Dark nougat", (174, 122, 89))
    SILVER = (131, "Silver", (156, 163, 168))
    NEON_ORANGE = (133, "Neon orange", (213, 115, 61))
    NEON_GREEN = (134, "Neon green", (216, 221, 86))
    SAND_BLUE = (135, "Sand blue", (116, 134, 157))
    SAND_VIOLET = (136, "Sand violet", (135, 124, 144))
    MEDIUM_ORANGE = (137, "Medium orange", (224, 152, 100))
    SAND_YELLOW = (138, "Sand yellow", (149, 138, 115))
    EARTH_BLUE = (140, "Earth blue", (32, 58, 86))
    EARTH_GREEN = (141, "Earth green", (39, 70, 45))
    TR_FLU_BLUE = (143, "Tr. Flu. Blue", (207, 226, 247))
    SAND_BLUE_METALLIC = (145, "Sand blue metallic", (121, 136, 161))
    SAND_VIOLET_METALLIC = (146, "Sand violet metallic", (149, 142, 163))
    SAND_YELLOW_METALLIC = (147, "Sand yellow metallic", (147, 135, 103))
    DARK_GREY_METALLIC = (148, "Dark grey metallic", (87, 88, 87))
    BLACK_METALLIC = (149, "Black metallic", (22, 29, 50))
    LIGHT_GREY_METALLIC = (150, "Light grey metallic", (171, 173, 172))
    SAND_GREEN = (151, "Sand green", (120, 144, 130))
    SAND_RED = (153, "Sand red", (149, 121, 119))
    DARK_RED = (154, "Dark red", (123, 46, 47))
    TR_FLU_YELLOW = (157, "Tr. Flu. Yellow", (255, 246, 123))
    TR_FLU_RED = (158, "Tr. Flu. Red", (225, 164, 194))
    GUN_METALLIC = (168, "Gun metallic", (117, 108, 98))
    RED_FLIP_FLOP = (176, "Red flip/flop", (151, 105, 91))
    YELLOW_FLIP_FLOP = (178, "Yellow flip/flop", (180, 132, 85))
    SILVER_FLIP_FLOP = (179, "Silver flip/flop", (137, 135, 136))
    CURRY = (180, "Curry", (215, 169, 75))
    FIRE_YELLOW = (190, "Fire Yellow", (249, 214, 46))
    FLAME_YELLOWISH_ORANGE = (191, "Flame yellowish orange", (232, 171, 45))
    REDDISH_BROWN = (192, "Reddish brown", (105, 64, 40))
    FLAME_REDDISH_ORANGE = (193, "Flame reddish orange", (207, 96, 36))
    MEDIUM_STONE_GREY = (194, "Medium stone grey", (163, 162, 165))
    ROYAL_BLUE = (195, "Royal blue", (70, 103, 164))
    DARK_ROYAL_BLUE = (196, "Dark Royal blue", (35, 71, 139))
    BRIGHT_REDDISH_LILAC = (198, "Bright reddish lilac", (142, 66, 133))
    DARK_STONE_GREY = (199, "Dark stone grey", (99, 95, 98))
    LEMON_METALIC = (200, "Lemon metalic", (130, 138, 93))
    LIGHT_STONE_GREY = (208, "Light stone grey", (229, 228, 223))
    DARK_CURRY = (209, "Dark Curry", (176, 142, 68))
    FADED_GREEN = (210, "Faded green", (112, 149, 120))
    TURQUOISE = (211, "Turquoise", (121, 181, 181))
    LIGHT_ROYAL_BLUE = (212, "Light Royal blue", (159, 195, 233))
    MEDIUM_ROYAL_BLUE = (213, "Medium Royal blue", (108, 129, 183))
    RUST = (216, "Rust", (144, 76, 42))
    BROWN = (217, "Brown", (124, 92, 70))
    REDDISH_LILAC = (218, "Reddish lilac", (150, 112, 159))
    LILAC2 = (219, "Lilac", (107, 98, 155))
    LIGHT_LILAC = (220, "Light lilac", (167, 169, 206))
    BRIGHT_PURPLE = (221, "Bright purple", (205, 98, 152))
    LIGHT_PURPLE = (222, "Light purple", (228, 173, 200))
    LIGHT_PINK = (223, "Light pink", (220, 144, 149))
    LIGHT_BRICK_YELLOW = (224, "Light brick yellow", (240, 213, 160))
    WARM_YELLOWISH_ORANGE = (225, "Warm yellowish orange", (235, 184, 127))
    COOL_YELLOW = (226, "Cool yellow", (253, 234, 141))
    DOVE_BLUE = (232, "Dove blue", (125, 187, 221))
    MEDIUM_LILAC = (268, "Medium lilac", (52, 43, 117))
    SLIME_GREEN = (301, "Slime green", (80, 109, 84))
    SMOKY_GREY = (302, "Smoky grey", (91, 93, 105))
    DARK_BLUE = (303, "Dark blue", (0, 16, 176))
    PARSLEY_GREEN = (304, "Parsley green", (44, 101, 29))
    STEEL_BLUE = (305, "Steel blue", (82, 124, 174))
    STORM_BLUE = (306, "Storm blue", (51, 88, 130))
    LAPIS = (307, "Lapis", (16, 42, 220))
    DARK_INDIGO = (308, "Dark indigo", (61, 21, 133))
    SEA_GREEN = (309, "Sea green", (52, 142, 64))
    SHAMROCK = (310, "Shamrock", (91, 154, 76))
    FOSSIL = (311, "Fossil", (159, 161, 172))
    MULBERRY = (312, "Mulberry", (89, 34, 89))
    FOREST_GREEN = (313, "Forest green", (31, 128, 29))
    CADET_BLUE = (314, "Cadet blue", (159, 173, 192))
    ELECTRIC_BLUE = (315, "Electric blue", (9, 137, 207))
    EGGPLANT = (316, "Eggplant", (123, 0, 123))
    MOSS = (317, "Moss", (124, 156, 107))
    ARTICHOKE = (318, "Artichoke", (138, 171, 133))
    SAGE_GREEN = (319, "Sage green", (185, 196, 177))
    GHOST_GREY = (320, "Ghost grey", (202, 203, 209))
    LILAC = (321, "Lilac", (167, 94, 155))
    PLUM = (322, "Plum", (123, 47, 123))
    OLIVINE = (323, "Olivine", (148, 190, 129))
    LAUREL_GREEN = (324, "Laurel green", (168, 189, 153))
    QUILL_GREY = (325, "Quill grey", (223, 223, 222))
    CRIMSON = (327, "Crimson", (151, 0, 0))
    MINT = (328, "Mint", (177, 229, 166))
    BABY_BLUE = (329, "Baby blue", (152, 194, 219))
    CARNATION_PINK = (330, "Carnation pink", (255, 152, 220))
    PERSIMMON = (331, "Persimmon", (255, 89, 89))
    MAROON = (332, "Maroon", (117, 0, 0))
    GOLD2 = (333, "Gold", (239, 184, 56))
    DAISY_ORANGE = (334, "Daisy orange", (248, 217, 109))
    PEARL = (335, "Pearl", (231, 231, 236))
    FOG = (336, "Fog", (199, 212, 228))
    SALMON = (337, "Salmon", (255, 148, 148))
    TERRA_COTTA = (338, "Terra Cotta", (190, 104, 98))
    COCOA = (339, "Cocoa", (86, 36, 36))
    WHEAT = (340, "Wheat", (241, 231, 199))
    BUTTERMILK = (341, "Buttermilk", (254, 243, 187))
    MAUVE = (342, "Mauve", (224, 178, 208))
    SUNRISE = (343, "Sunrise", (212, 144, 189))
    TAWNY = (344, "Tawny", (150, 85, 85))
    RUST2 = (345, "Rust", (143, 76, 42))
    CASHMERE = (346, "Cashmere", (211, 190, 150))
    KHAKI = (347, "Khaki", (226, 220, 188))
    LILY_WHITE = (348, "Lily white", (237, 234, 234))
    SEASHELL = (349, "Seashell", (233, 218, 218))
    BURGUNDY = (350, "Burgundy", (136, 62, 62))
    CORK = (351, "Cork", (188, 155, 93))
    BURLAP = (352, "Burlap", (199, 172, 120))
    BEIGE = (353, "Beige", (202, 191, 163))
    OYSTER = (354, "Oyster", (187, 179, 178))
    PINE_CONE = (355, "Pine Cone", (108, 88, 75))
    FAWN_BROWN = (356, "Fawn brown", (160, 132, 79))
    HURRICANE_GREY = (357, "Hurricane grey", (149, 137, 136))
    CLOUDY_GREY = (358, "Cloudy grey", (171, 168, 158))
    LINEN = (359, "Linen", (175, 148, 131))
    COPPER = (360, "Copper", (150, 103, 102))
    DIRT_BROWN = (361, "Dirt brown", (86, 66, 54))
    BRONZE = (362, "Bronze", (126, 104, 63))
    FLINT = (363, "Flint", (105, 102, 92))
    DARK_TAUPE = (364, "Dark taupe", (90, 76, 66))
    BURNT_SIENNA = (365, "Burnt Sienna", (106, 57, 9))
    INSTITUTIONAL_WHITE = (1001, "Institutional white", (248, 248, 248))
    MID_GRAY = (1002, "Mid gray", (205, 205, 205))
    REALLY_BLACK = (1003, "Really black", (17, 17, 17))
    REALLY_RED = (1004, "Really red", (255, 0, 0))
    DEEP_ORANGE = (1005, "Deep orange", (255, 176, 0))
    ALDER = (1006, "Alder", (180, 128, 255))
    DUSTY_ROSE = (1007, "Dusty Rose", (163, 75, 75))
    OLIVE = (1008, "Olive", (193, 190, 66))
    NEW_YELLER = (1009, "New Yeller", (255, 255, 0))
    REALLY_BLUE = (1010, "Really blue", (0, 0, 255))
    NAVY_BLUE = (1011, "Navy blue", (0, 32, 96))
    DEEP_BLUE = (1012, "Deep blue", (33, 84, 185))
    CYAN = (1013, "Cyan", (4, 175, 236))
    CGA_BROWN = (1014, "CGA brown", (170, 85, 0))
    MAGENTA = (1015, "Magenta", (170, 0, 170))
    PINK = (1016, "Pink", (255, 102, 204))
    DEEP_ORANGE2 = (1017, "Deep orange", (255, 175, 0))
    TEAL = (1018, "Teal", (18, 238, 212))
    TOOTHPASTE = (1019, "Toothpaste", (0, 255, 255))
    LIME_GREEN = (1020, "Lime green", (0, 255, 0))
    CAMO = (1021, "Camo", (58, 125, 21))
    GRIME = (1022, "Grime", (127, 142, 100))
    LAVENDER = (1023, "Lavender", (140, 91, 159))
    PASTEL_LIGHT_BLUE = (1024, "Pastel light blue", (175, 221, 255))
    PASTEL_ORANGE = (1025, "Pastel orange", (255, 201, 201))
    PASTEL_VIOLET = (1026, "Pastel violet", (177, 167, 255))
    PASTEL_BLUE_GREEN = (1027, "Pastel blue-green", (159, 243, 233))
    PASTEL_GREEN = (1028, "Pastel green", (204, 255, 204))
    PASTEL_YELLOW = (1029, "Pastel yellow", (255, 255, 204))
    PASTEL_BROWN = (1030, "Pastel brown", (255, 204, 153))
    ROYAL_PURPLE = (1031, "Royal purple", (98, 37, 209))
    HOT_PINK = (1032, "Hot pink", (255, 0, 191))

    label: str
    rgb: tuple[int, int, int]

    def __new__(cls, number: int, label: str, rgb: tuple[int, int, int]) -> BrickColor:
        member = object.__new__(cls)
        member._value_ = number
        member.label = label
        member.rgb = rgb
        return member

    def __str__(self) -> str:
        return self.label

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> BrickColor | None:
        """Return the first color with this display name, or None.

        Lilac, Rust, Gold and Deep orange each name two colors; only the one
        listed first can be found by name.
        """
        return _BY_NAME.get(name)

    @classmethod
    def from_number(cls, value: int) -> BrickColor | None:
        """Return the color with this number, or None if there is none."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    def to_json(self) -> int:
        """Return the JSON form: the color's number."""
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> BrickColor:
        """Build a color from its number; raise ValueError if unknown."""
        if isinstance(data, bool) or not isinstance(data, int):
            raise TypeError(f"expected an integer, found {type(data).__name__}")
        if not 0 <= data <= 0xFFFF:
            raise ValueError(f"{data} does not fit in u16")
        color = cls.from_number(data)
        if color is None:
            raise ValueError(f"{data} is not a valid BrickColor number")
        return color


_BY_NAME: dict[str, BrickColor] = {}
for _color in BrickColor:
    _BY_NAME.setdefault(_color.label, _color)
del _color