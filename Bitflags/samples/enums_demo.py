from ..bitflag import Bitflag
from ..enums import playerAbilities


def run() -> Bitflag:
    """Named bits taken from an IntEnum; members are used directly as keys."""
    print("== Enum-Based Bitflag Demo ==")

    flags = Bitflag.from_labels(playerAbilities)

    flags.set_named([playerAbilities.CAN_JUMP, playerAbilities.HAS_JETPACK])
    print(f"Set CAN_JUMP and HAS_JETPACK: 0x{flags.value:X}")

    flags.clear_named([playerAbilities.CAN_JUMP])
    print(f"Cleared CAN_JUMP: 0x{flags.value:X}")

    if flags.get_by_name(playerAbilities.HAS_JETPACK):
        print("Jetpack enabled!")

    flags.toggle_named([playerAbilities.CAN_JUMP])
    print(f"Toggled CAN_JUMP: 0x{flags.value:X}")

    # Clone it for another player
    player2 = flags.clone()
    player2.set_by_name(playerAbilities.IS_DEAD, True)

    print(f"Player 1: 0x{flags.value:X}")
    print(f"Player 2: 0x{player2.value:X}")
    print("Active player 2 flags:")
    for name in player2.set_named_bits():
        print(f" - {name}")
    return player2
