from __future__ import annotations

import unittest

from headless_forms.component_schema import ElementRef
from headless_forms.controls.search_field import SearchField, SearchFieldProps
from headless_forms.controls.text_field import TextField, TextFieldProps
from headless_forms.events import KeyEvent, ValueEvent
from headless_forms.field import FunctionSchema


class TextFieldTests(unittest.TestCase):
    def test_input_updates_value_and_validity(self) -> None:
        field = TextField(TextFieldProps(label="Name", min_length=3, description="Your full name"))

        field.on_input(ValueEvent(value="Al"))
        self.assertEqual(field.field_value, "Al")
        self.assertTrue(field.is_invalid)
        self.assertTrue(field.validity_details.too_short)
        props = field.input_props
        self.assertIs(props["aria-invalid"], True)
        self.assertEqual(props["aria-describedby"], f"{field.input_id}-r")

        field.on_change(ValueEvent(value="Alice"))
        props = field.input_props
        self.assertNotIn("aria-invalid", props)
        self.assertEqual(props["aria-describedby"], f"{field.input_id}-d")
        self.assertEqual(props["value"], "Alice")
        self.assertEqual(props["minlength"], 3)

    def test_blur_marks_touched_and_validates(self) -> None:
        field = TextField(TextFieldProps(label="Email", type="email", required=True))
        self.assertIsNone(field.error_message)
        field.on_blur()
        self.assertTrue(field.field.touched)
        self.assertEqual(field.error_message, "Please fill out this field.")
        self.assertEqual(field.input_props["type"], "email")

    def test_schema_errors_surface(self) -> None:
        field = TextField(TextFieldProps(label="User", schema=FunctionSchema(lambda v: v != "root", "Reserved")))
        field.on_input(ValueEvent(value="root"))
        self.assertEqual(field.error_message, "Reserved")
        self.assertEqual(field.error_message_props["id"], f"{field.input_id}-r")

    def test_pattern_dropped_for_textarea(self) -> None:
        textarea = TextField(TextFieldProps(label="Bio", pattern="[a-z]+"), input_ref=ElementRef(tag_name="textarea"))
        self.assertNotIn("pattern", textarea.input_props)
        self.assertNotIn("for", textarea.label_props)

        text = TextField(TextFieldProps(label="Bio", pattern="[a-z]+"))
        self.assertEqual(text.input_props["pattern"], "[a-z]+")
        self.assertEqual(text.label_props["for"], text.input_id)

    def test_update_props_refreshes_constraints(self) -> None:
        field = TextField(TextFieldProps(label="Code", model_value="abc"))
        field.update_props(max_length=2)
        field.on_blur()
        self.assertTrue(field.validity_details.too_long)
        field.update_props(model_value="ab")
        field.on_blur()
        self.assertIsNone(field.error_message)


class SearchFieldTests(unittest.TestCase):
    def test_escape_clears(self) -> None:
        search = SearchField(SearchFieldProps(label="Search", model_value="cats"))
        self.assertTrue(search.on_key_down(KeyEvent(key="Escape")))
        self.assertEqual(search.field_value, "")

    def test_enter_submits_when_valid(self) -> None:
        submitted: list[str] = []
        search = SearchField(SearchFieldProps(label="Search", on_submit=submitted.append, min_length=2))

        search.on_input(ValueEvent(value="d"))
        self.assertTrue(search.on_key_down(KeyEvent(key="Enter")))
        self.assertEqual(submitted, [])

        search.on_input(ValueEvent(value="dogs"))
        self.assertTrue(search.on_key_down(KeyEvent(key="Enter")))
        self.assertEqual(submitted, ["dogs"])

    def test_enter_inside_form_is_left_to_the_form(self) -> None:
        submitted: list[str] = []
        search = SearchField(
            SearchFieldProps(label="Search", on_submit=submitted.append),
            input_ref=ElementRef(tag_name="input", in_form=True),
        )
        self.assertFalse(search.on_key_down(KeyEvent(key="Enter")))
        self.assertEqual(submitted, [])

    def test_clear_button_and_input_props(self) -> None:
        search = SearchField(SearchFieldProps(label="Search", model_value="x", placeholder="Find"))
        button = search.clear_button_props
        self.assertEqual(
            {k: button[k] for k in ("tabindex", "type", "aria-label")},
            {"tabindex": "-1", "type": "button", "aria-label": "Clear search"},
        )
        button["on_click"]()
        self.assertEqual(search.field_value, "")

        props = search.input_props
        self.assertEqual(props["type"], "search")
        self.assertEqual(props["placeholder"], "Find")
        self.assertEqual(props["id"], search.input_id)


if __name__ == "__main__":
    unittest.main()
