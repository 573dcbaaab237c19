import unittest

from util.option_edits import append_option, delete_option, next_option_label, replace_option


class TestReplaceOption(unittest.TestCase):
    def test_replaces_only_the_given_index(self) -> None:
        self.assertEqual(replace_option(("a", "b", "c"), 1, "x"), ("a", "x", "c"))

    def test_does_not_mutate_input(self) -> None:
        options = ["a", "b"]
        replace_option(options, 0, "x")
        self.assertEqual(options, ["a", "b"])

    def test_out_of_range_raises(self) -> None:
        with self.assertRaises(IndexError):
            replace_option(("a",), 3, "x")

    def test_negative_index_raises(self) -> None:
        with self.assertRaises(IndexError):
            replace_option(("a", "b"), -1, "x")


class TestDeleteOption(unittest.TestCase):
    def test_delete_first_shifts_the_rest(self) -> None:
        self.assertEqual(delete_option(("a", "b"), 0), ("b",))

    def test_delete_middle(self) -> None:
        self.assertEqual(delete_option(("a", "b", "c"), 1), ("a", "c"))

    def test_delete_down_to_zero(self) -> None:
        self.assertEqual(delete_option(("only",), 0), ())

    def test_does_not_mutate_input(self) -> None:
        options = ["a", "b"]
        delete_option(options, 1)
        self.assertEqual(options, ["a", "b"])

    def test_out_of_range_raises(self) -> None:
        with self.assertRaises(IndexError):
            delete_option((), 0)

    def test_negative_index_raises(self) -> None:
        with self.assertRaises(IndexError):
            delete_option(("a", "b"), -1)


class TestAppendOption(unittest.TestCase):
    def test_label_follows_current_length(self) -> None:
        self.assertEqual(append_option(("option 1",)), ("option 1", "option 2"))
        self.assertEqual(append_option(()), ("option 1",))

    def test_labels_can_repeat_after_deletion(self) -> None:
        options = append_option(append_option(("option 1",)))
        options = delete_option(options, 0)
        self.assertEqual(options, ("option 2", "option 3"))
        self.assertEqual(append_option(options), ("option 2", "option 3", "option 3"))

    def test_next_option_label(self) -> None:
        self.assertEqual(next_option_label(["a", "b"]), "option 3")


if __name__ == "__main__":
    unittest.main()
