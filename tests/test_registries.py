#!/usr/bin/env python3

import unittest
from Bitflags import Bitflag
from Bitflags.enums import playerAbilities, renderMasks
from Bitflags.errors import BitNameError, BitRangeError, BitShapeError


class TestNamedBits(unittest.TestCase):

    def test_scenario_ordered_labels(self):
        """["A","B","C"], set A and C -> 0b101 with {A, C} set."""
        flags = Bitflag.from_names(["A", "B", "C"])
        flags.set_named(["A", "C"])

        self.assertEqual(flags.value, 0b101)
        self.assertEqual(set(flags.set_named_bits()), {"A", "C"})

    def test_try_register_bit(self):
        flags = Bitflag()
        self.assertTrue(flags.try_register_bit("A", 0))
        self.assertFalse(flags.try_register_bit("A", 1))  # name taken
        self.assertFalse(flags.try_register_bit("B", 0))  # bit taken
        self.assertTrue(flags.try_register_bitmask("B", 0x2))
        self.assertFalse(flags.try_register_bitmask("C", 0x2))
        self.assertEqual(flags.named_bits, {"A": 0x1, "B": 0x2})

    def test_try_register_validates_before_duplicates(self):
        flags = Bitflag()
        flags.register_bit("A", 0)
        with self.assertRaises(BitRangeError):
            flags.try_register_bit("A", 64)
        with self.assertRaises(BitShapeError):
            flags.try_register_bitmask("A", 0x3)

    def test_register_bit_strict(self):
        flags = Bitflag()
        flags.register_bit("A", 4)
        flags.register_bitmask("B", 1 << 40)

        with self.assertRaises(BitNameError):
            flags.register_bit("A", 5)
        with self.assertRaises(BitNameError):
            flags.register_bit("C", 4)
        with self.assertRaises(BitNameError):
            flags.register_bitmask("C", 1 << 40)
        with self.assertRaises(BitRangeError):
            flags.register_bit("D", -1)
        with self.assertRaises(BitShapeError):
            flags.register_bitmask("D", 0)

    def test_get_set_by_name(self):
        flags = Bitflag.from_names(["A", "B"])
        flags.set_by_name("B", True)
        self.assertTrue(flags.get_by_name("B"))
        self.assertFalse(flags.get_by_name("A"))
        flags.set_by_name("B", False)
        self.assertFalse(flags.get_by_name("B"))

        flags.set_by_name("A", True)
        flags.clear_by_name("A")
        self.assertEqual(flags.value, 0)

    def test_by_name_unknown_raises(self):
        flags = Bitflag.from_names(["A"])
        with self.assertRaises(BitNameError):
            flags.get_by_name("Missing")
        with self.assertRaises(BitNameError):
            flags.set_by_name("Missing", True)
        with self.assertRaises(BitNameError):
            flags.clear_by_name("Missing")
        # Still a LookupError for generic handlers
        with self.assertRaises(LookupError):
            flags.get_by_name("Missing")

    def test_enum_members_as_names(self):
        flags = Bitflag.from_labels(playerAbilities)
        flags.set_named([playerAbilities.CAN_JUMP, playerAbilities.IS_DEAD])

        self.assertEqual(flags.value, 0b10001)
        self.assertTrue(flags.get_by_name(playerAbilities.IS_DEAD))
        self.assertTrue(flags.get_by_name("IS_DEAD"))

    def test_bulk_names(self):
        flags = Bitflag.from_names(["A", "B", "C", "D"])
        flags.set_named(["A", "B", "D"])
        self.assertEqual(flags.value, 0b1011)
        flags.clear_named(["B", "D"])
        self.assertEqual(flags.value, 0b0001)
        flags.toggle_named(["A", "C"])
        self.assertEqual(flags.value, 0b0100)

    def test_bulk_names_strict(self):
        flags = Bitflag.from_names(["A", "B"])
        for call in (flags.set_named, flags.clear_named, flags.toggle_named):
            with self.assertRaises(BitNameError):
                call(["A", "Missing"])
        # Unknown name fails before anything is applied
        self.assertEqual(flags.value, 0)

    def test_bulk_names_rejects_bare_string(self):
        flags = Bitflag.from_names(["A"])
        with self.assertRaises(TypeError):
            flags.set_named("A")

    def test_discovery_lookups(self):
        flags = Bitflag.from_names(["A", "B"])
        self.assertEqual(flags.get_bitmask_for_name("B"), 0x2)
        self.assertIsNone(flags.get_bitmask_for_name("Missing"))
        self.assertEqual(flags.reverse_lookup(1), "B")
        self.assertIsNone(flags.reverse_lookup(2))
        with self.assertRaises(BitRangeError):
            flags.reverse_lookup(64)

    def test_enumerate_flags(self):
        flags = Bitflag.from_names(["A", "B", "C"])
        flags.set_named(["B"])
        self.assertEqual(
            list(flags.enumerate_flags()), [("A", False), ("B", True), ("C", False)]
        )

    def test_named_bits_snapshot(self):
        flags = Bitflag.from_names(["A"])
        snapshot = flags.named_bits
        snapshot["B"] = 0x2
        self.assertIsNone(flags.get_bitmask_for_name("B"))


class TestNamedMasks(unittest.TestCase):

    def test_define_mask(self):
        flags = Bitflag()
        flags.define_mask("Low", 0x0F)
        flags.define_mask("Empty", 0)
        flags.define_mask("All", 0xFFFFFFFFFFFFFFFF)
        flags.define_mask("Alias", 0x0F)
        self.assertEqual(flags.get_mask_for_name("Low"), 0x0F)
        self.assertEqual(flags.get_mask_for_name("Alias"), 0x0F)
        self.assertIsNone(flags.get_mask_for_name("Missing"))

    def test_scenario_duplicate_mask(self):
        """Strict define raises on a duplicate name; try define returns False."""
        flags = Bitflag()
        flags.define_mask("Dup", 0xFF)
        with self.assertRaises(BitNameError):
            flags.define_mask("Dup", 0xF0)
        self.assertFalse(flags.try_define_mask("Dup", 0xF0))
        self.assertEqual(flags.get_mask_for_name("Dup"), 0xFF)

    def test_define_mask_out_of_range(self):
        flags = Bitflag()
        with self.assertRaises(BitRangeError):
            flags.define_mask("Big", 1 << 64)

    def test_define_mask_label(self):
        flags = Bitflag()
        flags.define_mask_label(renderMasks.DISPLAY)
        self.assertEqual(flags.get_mask_for_name("DISPLAY"), 0b101)
        with self.assertRaises(TypeError):
            flags.define_mask_label("DISPLAY")

    def test_define_masks_from_enum(self):
        flags = Bitflag()
        flags.define_masks(renderMasks)
        self.assertEqual(
            flags.named_masks,
            {"DEBUG_OPTIONS": 0b11000, "DISPLAY": 0b101, "NONE": 0},
        )

    def test_define_masks_duplicate(self):
        flags = Bitflag()
        flags.define_mask("DISPLAY", 0x1)
        with self.assertRaises(BitNameError):
            flags.define_masks(renderMasks)
        self.assertEqual(flags.named_masks, {"DISPLAY": 0x1})

        with self.assertRaises(BitNameError):
            Bitflag().define_masks([("M", 0x1), ("N", 0x2), ("M", 0x4)])

    def test_single_name_lenient(self):
        """Single-name mask ops return False for an unknown name."""
        flags = Bitflag(0b1001)
        flags.define_mask("M", 0b0110)

        self.assertFalse(flags.apply_mask("Unknown"))
        self.assertFalse(flags.clear_masked_bits("Unknown"))
        self.assertFalse(flags.toggle_by_mask("Unknown"))
        self.assertEqual(flags.value, 0b1001)

        self.assertTrue(flags.apply_mask("M"))
        self.assertEqual(flags.value, 0b1111)
        self.assertTrue(flags.clear_masked_bits("M"))
        self.assertEqual(flags.value, 0b1001)
        self.assertTrue(flags.toggle_by_mask("M"))
        self.assertEqual(flags.value, 0b1111)

    def test_bulk_skips_unknown(self):
        """Bulk mask ops skip unknown names without raising."""
        flags = Bitflag()
        flags.define_mask("Low", 0x0F)
        flags.define_mask("High", 0xF0)

        flags.apply_masks(["Unknown"])
        self.assertEqual(flags.value, 0)

        flags.apply_masks(["Low", "Unknown", "High"])
        self.assertEqual(flags.value, 0xFF)
        flags.clear_masks(["Unknown", "Low"])
        self.assertEqual(flags.value, 0xF0)
        flags.toggle_masks(["High", "Low", "Nope"])
        self.assertEqual(flags.value, 0x0F)

    def test_pure_single(self):
        flags = Bitflag.from_names(["A", "B", "C", "D"])
        flags.value = 0b0011
        flags.define_mask("M", 0b0110)

        applied = flags.apply_mask_new("M")
        cleared = flags.clear_masked_bits_new("M")
        toggled = flags.toggle_by_mask_new("M")

        self.assertEqual(applied.value, 0b0111)
        self.assertEqual(cleared.value, 0b0001)
        self.assertEqual(toggled.value, 0b0101)
        self.assertEqual(flags.value, 0b0011)

        # Registries travel with the derived bitfield
        self.assertEqual(applied.named_bits, flags.named_bits)
        self.assertEqual(applied.named_masks, flags.named_masks)

        self.assertIsNone(flags.apply_mask_new("Unknown"))
        self.assertIsNone(flags.clear_masked_bits_new("Unknown"))
        self.assertIsNone(flags.toggle_by_mask_new("Unknown"))

    def test_pure_bulk(self):
        flags = Bitflag(0x0F)
        flags.define_mask("High", 0xF0)
        flags.define_mask("Bit0", 0x01)

        self.assertEqual(flags.apply_masks_new(["High", "Unknown"]).value, 0xFF)
        self.assertEqual(flags.clear_masks_new(["Bit0", "Unknown"]).value, 0x0E)
        self.assertEqual(flags.toggle_masks_new(["High", "Bit0"]).value, 0xFE)
        self.assertEqual(flags.apply_masks_new(["Unknown"]).value, 0x0F)
        self.assertEqual(flags.value, 0x0F)

    def test_enum_members_as_mask_names(self):
        flags = Bitflag()
        flags.define_masks(renderMasks)
        self.assertTrue(flags.apply_mask(renderMasks.DISPLAY))
        self.assertEqual(flags.value, 0b101)
        flags.apply_masks([renderMasks.DEBUG_OPTIONS])
        self.assertEqual(flags.value, 0b11101)

    def test_extract_masked_value(self):
        flags = Bitflag(0xABCD)
        flags.define_mask("Mid", 0x0FF0)
        self.assertEqual(flags.extract_masked_value("Mid"), 0x0BC0)
        with self.assertRaises(BitNameError):
            flags.extract_masked_value("Unknown")


if __name__ == '__main__':
    unittest.main()
