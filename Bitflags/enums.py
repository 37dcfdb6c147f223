from enum import Enum, IntEnum


class deviceType(Enum):
    SERVO = 0x00
    CAN2PWM = 0x0A


class messageTypes(Enum):
    MULTI_COMMAND = 0x00
    PWM_COMMAND = 0x10
    HOME_COMMAND = 0x15
    DISABLE_PACKET = 0x20


# 29-bit extended CAN identifier:
#
# +---------+--------------+-------------+----------------+
# | GroupID | Message Type | Device Type | Device Address |
# | 5 bits  | 8 bits       | 8 bits      | 8 bits         |
# +---------+--------------+-------------+----------------+
class canIdFields(IntEnum):
    GROUP_ID = 0x1F000000
    MESSAGE_TYPE = 0x00FF0000
    DEVICE_TYPE = 0x0000FF00
    DEVICE_ADDRESS = 0x000000FF


# ELF e_flags (ARM), value is the bit index
class elfArmFlags(IntEnum):
    EF_ARM_RELEXEC = 0
    EF_ARM_HASENTRY = 1
    EF_ARM_INTERWORK = 2
    EF_ARM_APCS_26 = 3
    EF_ARM_ALIGN8 = 4
    EF_ARM_NEW_ABI = 5
    EF_ARM_OLD_ABI = 6
    EF_ARM_SOFT_FLOAT = 9
    EF_ARM_VFP_FLOAT = 10


class renderOptions(IntEnum):
    IS_VISIBLE = 0
    IS_PAUSED = 1
    ENABLE_VSYNC = 2
    RENDER_SHADOWS = 3
    DEBUG_OVERLAY = 4


class renderMasks(IntEnum):
    DEBUG_OPTIONS = 0b00011000
    DISPLAY = 0b00000101
    NONE = 0


class playerAbilities(IntEnum):
    CAN_JUMP = 0
    CAN_SHOOT = 1
    CAN_DOUBLE_JUMP = 2
    HAS_JETPACK = 3
    IS_DEAD = 4
