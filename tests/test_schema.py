import unittest

from jsonpo import schema


class TestWebExtValidation(unittest.TestCase):
    def test_valid_messages(self):
        outcome = schema.validate_webext(
            {
                "key1": {"message": "Key 1", "description": "First key"},
                "key2": {
                    "message": "Hello $USER$",
                    "placeholders": {"user": {"content": "$1", "example": "Ann"}},
                },
            }
        )
        self.assertTrue(outcome.ok)
        messages = outcome.unwrap()
        self.assertEqual(list(messages), ["key1", "key2"])
        self.assertEqual(messages["key1"].description, "First key")
        self.assertEqual(messages["key2"].placeholders["user"]["content"], "$1")

    def test_unknown_fields_are_ignored(self):
        messages = schema.validate_webext({"key1": {"message": "Key 1", "hash": "x"}}).unwrap()
        self.assertEqual(messages["key1"].message, "Key 1")

    def test_missing_message_reports_field(self):
        outcome = schema.validate_webext({"key1": {"description": "no message"}})
        self.assertFalse(outcome.ok)
        self.assertIsNone(outcome.value)
        self.assertTrue(any("key1" in error and "message" in error for error in outcome.errors))

    def test_non_string_message_rejected(self):
        outcome = schema.validate_webext({"key1": {"message": 3}})
        self.assertFalse(outcome.ok)

    def test_unwrap_raises_schema_error(self):
        outcome = schema.validate_webext({"key1": "plain string"}, label="messages.json")
        with self.assertRaises(schema.SchemaError) as caught:
            outcome.unwrap()
        self.assertIn("messages.json", str(caught.exception))
        self.assertIn("key1", str(caught.exception))
        self.assertIsInstance(caught.exception, ValueError)
        self.assertEqual(caught.exception.errors, outcome.errors)


class TestRainbeamValidation(unittest.TestCase):
    def test_valid_file(self):
        rainbeam_file = schema.validate_rainbeam(
            {"name": "hello", "version": "0.1", "data": {"key1": "Key 1"}}
        ).unwrap()
        self.assertEqual(rainbeam_file.name, "hello")
        self.assertEqual(rainbeam_file.data, {"key1": "Key 1"})

    def test_missing_data(self):
        outcome = schema.validate_rainbeam({"name": "hello", "version": "0.1"})
        self.assertFalse(outcome.ok)
        self.assertTrue(any(error.startswith("data") for error in outcome.errors))

    def test_non_string_value_in_data(self):
        outcome = schema.validate_rainbeam(
            {"name": "hello", "version": "0.1", "data": {"key1": 1}}
        )
        self.assertFalse(outcome.ok)
        self.assertTrue(any(error.startswith("data.key1") for error in outcome.errors))

    def test_numeric_version_rejected(self):
        outcome = schema.validate_rainbeam({"name": "hello", "version": 1, "data": {}})
        self.assertFalse(outcome.ok)


if __name__ == "__main__":
    unittest.main()
