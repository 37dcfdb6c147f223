"""
Runnable walkthroughs of the Bitflag API.

    basic   - Using Bitflag as a bit-twiddler
    enums   - Named bits from an IntEnum
    strings - Named bits from string keys, named masks
    comp    - Modelling ELF e_flags (ARM)
    can     - Composing and decoding CAN identifiers over python-can
"""

from . import basic, can_demo, comp, enums_demo, strings_demo

SAMPLES = {
    "basic": basic.run,
    "enums": enums_demo.run,
    "strings": strings_demo.run,
    "comp": comp.run,
    "can": can_demo.run,
}


def run_sample(name, **kwargs):
    """Runs the sample registered as `name` and returns its bitfield."""
    try:
        sample = SAMPLES[name.lower()]
    except KeyError:
        raise KeyError(
            f"Unknown sample: {name}. Available: {', '.join(SAMPLES)}"
        ) from None
    return sample(**kwargs)
