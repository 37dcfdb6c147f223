from ..bitflag import Bitflag
from ..enums import renderMasks, renderOptions

RENDER_NAMES = [
    "IS_VISIBLE",
    "IS_PAUSED",
    "ENABLE_VSYNC",
    "RENDER_SHADOWS",
    "DEBUG_OVERLAY",
]


def run() -> Bitflag:
    """String keys, with enum members resolving to the same names."""
    print("== String-Based Bitflag Demo ==")

    flags = Bitflag.from_names(RENDER_NAMES)

    flags.set_named(["IS_VISIBLE", "RENDER_SHADOWS"])
    flags.toggle_named(["ENABLE_VSYNC"])
    print(f"Bitfield value: 0x{flags.value:X}")

    if flags.get_by_name(renderOptions.ENABLE_VSYNC):
        print("VSync is ON (accessed via enum)")
    if flags.get_by_name("ENABLE_VSYNC"):
        print("VSync is ON (accessed via string)")

    # DEBUG_OPTIONS = RENDER_SHADOWS + DEBUG_OVERLAY
    flags.define_masks(renderMasks)
    flags.apply_mask(renderMasks.DEBUG_OPTIONS)
    print(f"After applying DEBUG_OPTIONS: 0x{flags.value:X}")

    debug_bit = flags.extract_range(4, 4)
    print(f"DEBUG_OVERLAY bit: {'ON' if debug_bit == 1 else 'OFF'}")

    clean = flags.clear_masked_bits_new(renderMasks.DEBUG_OPTIONS)
    print(f"After clearing debug: 0x{clean.value:X}")
    print("Set flags:")
    for name in clean.set_named_bits():
        print(f" - {name}")
    return clean
