# Reference byte tuples (red, green, blue, alpha)
TRANSPARENT_BYTES = (0, 0, 0, 0)
RED_BYTES = (255, 0, 0, 255)
GREEN_BYTES = (0, 255, 0, 255)
BLUE_BYTES = (0, 0, 255, 255)
CYAN_BYTES = (0, 255, 255, 255)
MAGENTA_BYTES = (255, 0, 255, 255)
YELLOW_BYTES = (255, 255, 0, 255)
WHITE_BYTES = (255, 255, 255, 255)
BLACK_BYTES = (0, 0, 0, 255)
GREY_BYTES = (127, 127, 127, 255)

palette_bytes = {
    "transparent": TRANSPARENT_BYTES,
    "red": RED_BYTES,
    "green": GREEN_BYTES,
    "blue": BLUE_BYTES,
    "cyan": CYAN_BYTES,
    "magenta": MAGENTA_BYTES,
    "yellow": YELLOW_BYTES,
    "white": WHITE_BYTES,
    "black": BLACK_BYTES,
    "grey": GREY_BYTES,
}

# packed 0xRRGGBB -> (r, g, b)
samples_rgb24 = {
    0x000000: (0, 0, 0),
    0xffffff: (255, 255, 255),
    0xff8000: (255, 128, 0),
    0x123456: (0x12, 0x34, 0x56),
    0x7f7f7f: (127, 127, 127),
    0xab000000 | 0x0a0b0c: (10, 11, 12),  # upper byte ignored
}

# unit float -> byte, truncated toward zero
samples_unit_to_byte = {
    0.0: 0,
    0.5: 127,
    0.999999: 254,
    1.0: 255,
    -1.0: 0,
    2.0: 255,
    0.1: 25,
    0.25: 63,
}

samples_hex = {
    "#ff8000": (255, 128, 0, 255),
    "ff800080": (255, 128, 0, 128),
    "#f80": (255, 136, 0, 255),
    "#f808": (255, 136, 0, 136),
    "#ABCDEF": (0xab, 0xcd, 0xef, 255),
}

# temperature (K) -> (visible total, red, green, blue, bytes) as produced by the
# existing black-body data; floats are exact
samples_black_body = {
    1000.0: (0.00025106661481395705, 1.0581563884824197, 0.05576482617117605, 0.0006669054761554908, (255, 13, 0, 0)),
    2000.0: (8.476102410506774, 1.6186198441300697, 0.5193397879519502, 0.07507118157593871, (255, 81, 11, 255)),
    5778.0: (19966.488110143706, 0.9556868492070694, 1.0815578114113429, 1.0428250747348176, (225, 255, 245, 255)),
    6500.0: (33789.84351041355, 0.8761744529434872, 1.0668237544110852, 1.1617872593650123, (192, 234, 255, 255)),
    20000.0: (855042.7513655038, 0.5048454117012636, 0.8764431064823479, 1.7756414333128796, (72, 125, 255, 255)),
}
