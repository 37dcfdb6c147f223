from ..bitflag import Bitflag
from ..enums import elfArmFlags

ABI_VERSION_LOW = 24
ABI_VERSION_HIGH = 27


def run() -> Bitflag:
    """Models the ARM e_flags field of an ELF header."""
    print("== Comprehensive ELF Bitflag Demo ==")

    # Step 1: Name bits one at a time
    eflags = Bitflag()
    for flag in elfArmFlags:
        eflags.try_register_bit(flag.name, flag.value)

    # Step 2: Initial flags
    eflags.set_named(["EF_ARM_HASENTRY", "EF_ARM_ALIGN8", "EF_ARM_SOFT_FLOAT"])
    print(f"Initial e_flags: 0x{eflags.value:X}")

    # Step 3: Soft float -> VFP
    eflags.clear_by_name("EF_ARM_SOFT_FLOAT")
    eflags.set_named(["EF_ARM_VFP_FLOAT"])
    print(f"After float mode change: 0x{eflags.value:X}")

    # Step 4: ABI version lives in bits 24-27
    eflags.insert_range(3, ABI_VERSION_LOW, ABI_VERSION_HIGH)
    print(f"After inserting ABI version (3): 0x{eflags.value:X}")
    abi = eflags.extract_range(ABI_VERSION_LOW, ABI_VERSION_HIGH)
    print(f"Extracted ABI version: {abi}")

    # Step 5: Values-only copy, names attached afterwards
    stripped = eflags.clone_value_only()
    stripped.attach_names_from(eflags)
    stripped.set_named(["EF_ARM_HASENTRY", "EF_ARM_ALIGN8"])
    print(f"Stripped flags: 0x{stripped.value:X}")

    print("Active flags:")
    for name in eflags.set_named_bits():
        print(f" - {name}")

    name10 = eflags.reverse_lookup(10)
    if name10 is not None:
        print(f"Bit 10 is named: {name10}")
    return eflags
