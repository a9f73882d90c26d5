from __future__ import annotations

import unittest

from headless_forms.a11y import (
    build_accessible_error_props,
    build_described_by_props,
    build_label_props,
    compact_props,
)
from headless_forms.component_schema import BoundingBox, ElementRef
from headless_forms.config import DEFAULT_CONFIG, LOCALE_ENV_VAR, load_forms_config, validate_forms_config
from headless_forms.events import (
    BeforeInputEvent,
    KeyEvent,
    PointerEvent,
    ValueEvent,
    WheelEvent,
    parse_input_event,
)
from headless_forms.field import FormField, FunctionSchema
from headless_forms.ids import FieldTypePrefixes, uniq_id
from headless_forms.locale import LocaleContext, direction_for_locale
from headless_forms.validation import InputConstraints, InputValidity, check_constraints


class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(validate_forms_config(), DEFAULT_CONFIG)
        self.assertEqual((DEFAULT_CONFIG.slider_min, DEFAULT_CONFIG.slider_max, DEFAULT_CONFIG.slider_step), (0, 100, 1))

    def test_rejects_unknown_key(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown forms config key"):
            validate_forms_config({"colour": "red"})

    def test_rejects_bad_numbers(self) -> None:
        with self.assertRaisesRegex(ValueError, "positive"):
            validate_forms_config({"slider_step": 0})
        with self.assertRaisesRegex(ValueError, "finite"):
            validate_forms_config({"slider_max": float("inf")})
        with self.assertRaisesRegex(ValueError, "slider_min"):
            validate_forms_config({"slider_min": 50, "slider_max": 10})

    def test_rejects_bad_locale(self) -> None:
        with self.assertRaisesRegex(ValueError, "default_locale"):
            validate_forms_config({"default_locale": "not a locale"})

    def test_load_reads_locale_from_environment(self) -> None:
        self.assertEqual(load_forms_config({LOCALE_ENV_VAR: "he-IL"}).default_locale, "he-IL")
        self.assertEqual(load_forms_config({}).default_locale, DEFAULT_CONFIG.default_locale)


class LocaleTests(unittest.TestCase):
    def test_direction_from_language(self) -> None:
        self.assertEqual(direction_for_locale("en-US"), "ltr")
        self.assertEqual(direction_for_locale("ar"), "rtl")
        self.assertEqual(direction_for_locale("fa_IR"), "rtl")
        self.assertEqual(LocaleContext("he-IL").direction, "rtl")
        self.assertEqual(LocaleContext().direction, "ltr")

    def test_empty_locale_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "non-empty"):
            LocaleContext(" ")


class IdsTests(unittest.TestCase):
    def test_ids_are_unique_and_prefixed(self) -> None:
        first = uniq_id(FieldTypePrefixes.Slider)
        second = uniq_id(FieldTypePrefixes.Slider)
        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("s-"))
        self.assertTrue(uniq_id().startswith("hf-"))


class A11yTests(unittest.TestCase):
    def test_label_links_only_with_text(self) -> None:
        labelled = build_label_props("x", "Name", target_ref=ElementRef(tag_name="input"))
        self.assertEqual(labelled.label_props, {"id": "x-l", "for": "x"})
        self.assertEqual(labelled.labelled_by_props, {"aria-labelledby": "x-l"})

        unlabelled = build_label_props("y", None, target_ref=ElementRef(tag_name="div"))
        self.assertEqual(unlabelled.label_props, {"id": "y-l"})
        self.assertEqual(unlabelled.labelled_by_props, {})

    def test_error_props(self) -> None:
        ok = build_accessible_error_props("f", None)
        self.assertEqual(ok.error_message_props, {"id": "f-r", "aria-live": "polite", "aria-atomic": True})
        self.assertEqual(ok.accessible_error_props, {})

        bad = build_accessible_error_props("f", "Required")
        self.assertEqual(bad.accessible_error_props, {"aria-invalid": True, "aria-errormessage": "f-r"})

    def test_described_by_prefers_error(self) -> None:
        self.assertEqual(build_described_by_props("f").described_by_props, {})
        self.assertEqual(
            build_described_by_props("f", description="Hint").described_by_props,
            {"aria-describedby": "f-d"},
        )
        self.assertEqual(
            build_described_by_props("f", description="Hint", error_message="Oops").described_by_props,
            {"aria-describedby": "f-r"},
        )

    def test_compact_props_keeps_falsy_values(self) -> None:
        self.assertEqual(compact_props({"a": None, "b": False, "c": 0, "d": ""}), {"b": False, "c": 0, "d": ""})


class FieldTests(unittest.TestCase):
    def test_dirty_touched_and_reset(self) -> None:
        field = FormField([1, 2], path="range")
        self.assertFalse(field.is_dirty)
        field.set_value([1, 3])
        field.set_touched(True)
        self.assertTrue(field.is_dirty)
        self.assertTrue(field.touched)
        field.reset()
        self.assertEqual(field.value, [1, 2])
        self.assertFalse(field.touched)

    def test_initial_value_is_copied(self) -> None:
        initial = [1, 2]
        field = FormField(initial)
        initial.append(3)
        self.assertEqual(field.value, [1, 2])

    def test_schema_objects_and_callables(self) -> None:
        field = FormField(5, schema=FunctionSchema(lambda v: v > 10, "Too small"))
        self.assertEqual(field.revalidate(), ("Too small",))
        self.assertEqual(field.error_message, "Too small")

        field.schema = lambda v: [] if v else ["Empty"]
        self.assertEqual(field.revalidate(), ())
        self.assertTrue(field.is_valid)

    def test_set_errors_accepts_string(self) -> None:
        field = FormField("x")
        field.set_errors("Bad")
        self.assertEqual(field.errors, ("Bad",))
        field.set_errors("")
        self.assertEqual(field.errors, ())


class ValidationTests(unittest.TestCase):
    def test_text_constraints(self) -> None:
        constraints = InputConstraints(required=True, min_length=2, max_length=4, pattern=r"[a-z]+")
        self.assertTrue(check_constraints("", constraints).value_missing)
        self.assertTrue(check_constraints("a", constraints).too_short)
        self.assertTrue(check_constraints("abcde", constraints).too_long)
        self.assertTrue(check_constraints("AB", constraints).pattern_mismatch)
        self.assertTrue(check_constraints("abc", constraints).valid)

    def test_numeric_constraints(self) -> None:
        constraints = InputConstraints(min=0, max=10)
        self.assertTrue(check_constraints(-1, constraints).range_underflow)
        self.assertTrue(check_constraints(11.5, constraints).range_overflow)
        self.assertTrue(check_constraints(None, constraints).valid)

    def test_input_validity_merges_native_and_schema_errors(self) -> None:
        field = FormField("", schema=FunctionSchema(lambda v: v != "admin", "Reserved name"))
        validity = InputValidity(field, constraints=InputConstraints(required=True))

        details = validity.update_validity()
        self.assertTrue(details.value_missing)
        self.assertEqual(field.errors, ("Please fill out this field.",))

        field.set_value("admin")
        validity.update_validity()
        self.assertEqual(field.errors, ("Reserved name",))
        self.assertTrue(validity.is_invalid)

    def test_disabled_html_validation_only_runs_schema(self) -> None:
        field = FormField("")
        validity = InputValidity(field, constraints=InputConstraints(required=True), disable_html_validation=True)
        validity.update_validity()
        self.assertTrue(field.is_valid)


class EventsTests(unittest.TestCase):
    def test_parse_known_events(self) -> None:
        self.assertEqual(parse_input_event("pointer_down", {"x": 1, "y": "2.5"}), PointerEvent(x=1.0, y=2.5))
        self.assertEqual(parse_input_event("key_down", {"key": " ", "code": "Space"}), KeyEvent(key=" ", code="Space"))
        self.assertEqual(parse_input_event("change", {"value": "abc"}), ValueEvent(value="abc"))
        self.assertEqual(parse_input_event("wheel", {"delta_y": -3}), WheelEvent(delta_y=-3.0))
        before = parse_input_event("before_input", {"data": "4", "current_text": "12", "selection_start": 1, "selection_end": 1})
        self.assertEqual(before, BeforeInputEvent(data="4", current_text="12", selection_start=1, selection_end=1))

    def test_parse_rejects_unknown_shapes(self) -> None:
        self.assertIsNone(parse_input_event("pointer_down", {"x": 1}))
        self.assertIsNone(parse_input_event("pointer_down", {"x": True, "y": 1}))
        self.assertIsNone(parse_input_event("key_down", {"code": "Space"}))
        self.assertIsNone(parse_input_event("input", {}))
        self.assertIsNone(parse_input_event("scroll", {"delta_y": 1}))
        self.assertIsNone(parse_input_event("wheel", None))

    def test_predicted_text_replaces_selection(self) -> None:
        self.assertEqual(BeforeInputEvent(data="9", current_text="123", selection_start=1, selection_end=2).predicted_text(), "193")
        self.assertEqual(BeforeInputEvent(data="9", current_text="12").predicted_text(), "129")
        self.assertEqual(BeforeInputEvent(data=None, current_text="12").predicted_text(), "12")


class ElementRefTests(unittest.TestCase):
    def test_mount_and_focus(self) -> None:
        calls: list[int] = []
        ref = ElementRef(on_focus=lambda: calls.append(1))
        self.assertFalse(ref.is_mounted)
        ref.mount(BoundingBox(0, 0, 10, 10), tag_name="input")
        self.assertTrue(ref.is_mounted)
        self.assertTrue(ref.is_input_element())
        ref.focus()
        self.assertEqual((ref.focus_count, calls), (1, [1]))
        ref.unmount()
        self.assertFalse(ref.is_mounted)

    def test_bounding_box_rejects_negative_extent(self) -> None:
        with self.assertRaisesRegex(ValueError, ">= 0"):
            BoundingBox(0, 0, -1, 1)
        self.assertTrue(BoundingBox(0, 0, 10, 10).contains(5, 5))


if __name__ == "__main__":
    unittest.main()
