"""Basic Chromabyte usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromabyte import Color, FormatType, black_body


def demonstrate_colors() -> None:
    # Construct colors from packed ints, bytes and unit floats.
    accent = Color.rgb24(0xff8040)
    print("Packed 0xff8040:", accent)

    nearly_full = Color.rgb_f64(0.999999, 0.5, 2.0)
    print("Truncated and clamped floats:", nearly_full.to_tuple())

    faded = Color.RED.with_alpha(64)
    print("Red at quarter alpha:", faded.to_hex())
    print("As percentages:", faded.as_array(FormatType.PERCENTAGE))


def demonstrate_black_body() -> None:
    for temperature in (1800, 3000, 5778, 6500, 10000, 20000):
        color = black_body(temperature)
        print(f"{temperature:>6} K -> {color.to_hex()}")


def demonstrate_wire_format() -> None:
    data = Color.GREY.to_bytes()
    print("Grey on the wire:", data.hex())
    print("Decoded:", Color.from_bytes(data))


def main() -> None:
    demonstrate_colors()
    demonstrate_black_body()
    demonstrate_wire_format()


if __name__ == "__main__":
    main()
