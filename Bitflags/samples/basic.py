from ..bitflag import Bitflag


def run() -> Bitflag:
    """Using Bitflag as a bit-twiddler."""
    print("== Basic Bitflag Demo ==")

    flags = Bitflag()

    # Set a few bits directly by index
    flags.set(0)
    flags.set(3)
    flags.set(55)
    print(f"Value after setting bits 0, 3 and 55: 0x{flags.value:X}")

    flags.clear(55)
    print(f"Cleared bit 55: 0x{flags.value:X}")

    flags.toggle(3)
    print(f"Toggled bit 3: 0x{flags.value:X}")

    flags.insert_range(0xAB, 8, 15)
    print(f"Inserted 0xAB into bits 8-15: 0x{flags.value:X}")
    print(f"Extracted bits 8-15: 0x{flags.extract_range(8, 15):02X}")

    print(f"PopCount: {flags.pop_count()}")
    print(f"First set bit: {flags.first_set_bit_index()}")
    print(f"Last set bit: {flags.last_set_bit_index()}")
    return flags
