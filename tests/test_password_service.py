from __future__ import annotations

from collections import Counter
import unittest

from yapg import GenerationRequest, InvalidInput, generate, generate_passwords
from yapg.core.password_engine import SeededIndexSampler


class GenerateTests(unittest.TestCase):
    def test_single_character_alphabet_is_deterministic(self) -> None:
        self.assertEqual(generate("a", 5, 1), ["aaaaa"])

    def test_returns_count_passwords_of_length_from_alphabet(self) -> None:
        outputs = generate("abc", 4, 3)
        self.assertEqual(len(outputs), 3)
        for value in outputs:
            self.assertEqual(len(value), 4)
            self.assertTrue(set(value).issubset({"a", "b", "c"}))

    def test_empty_alphabet_raises_invalid_input(self) -> None:
        with self.assertRaisesRegex(InvalidInput, "alphabet is empty"):
            generate("", 4, 3)

    def test_empty_alphabet_wins_over_other_bad_fields(self) -> None:
        with self.assertRaises(InvalidInput):
            generate("", 0, 0)

    def test_zero_length_raises_invalid_input(self) -> None:
        with self.assertRaisesRegex(InvalidInput, "length must be > 0"):
            generate("abc", 0, 3)

    def test_zero_count_raises_invalid_input(self) -> None:
        with self.assertRaisesRegex(InvalidInput, "count must be > 0"):
            generate("abc", 4, 0)

    def test_negative_values_raise_invalid_input(self) -> None:
        with self.assertRaises(InvalidInput):
            generate("abc", -1, 3)
        with self.assertRaises(InvalidInput):
            generate("abc", 4, -2)

    def test_non_integer_length_and_count_are_rejected(self) -> None:
        with self.assertRaisesRegex(InvalidInput, "length must be an integer"):
            generate("abc", 4.0, 1)  # type: ignore[arg-type]
        with self.assertRaisesRegex(InvalidInput, "count must be an integer"):
            generate("abc", 4, True)  # type: ignore[arg-type]

    def test_invalid_input_is_a_value_error_with_code(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            generate("", 1, 1)
        self.assertEqual(getattr(ctx.exception, "code", None), "invalid_input")

    def test_accepts_sequence_of_characters(self) -> None:
        outputs = generate(["x", "y"], 6, 2)
        self.assertEqual(len(outputs), 2)
        for value in outputs:
            self.assertTrue(set(value).issubset({"x", "y"}))

    def test_rejects_multi_character_sequence_entries(self) -> None:
        with self.assertRaisesRegex(InvalidInput, "single characters"):
            generate(["ab", "c"], 4, 1)

    def test_seeded_sampler_is_reproducible(self) -> None:
        first = generate("abcdef", 12, 5, SeededIndexSampler(1234))
        second = generate("abcdef", 12, 5, SeededIndexSampler(1234))
        self.assertEqual(first, second)
        self.assertEqual(len(first), 5)

    def test_passwords_follow_sampler_draw_order(self) -> None:
        class Scripted:
            def __init__(self, draws: list[int]) -> None:
                self._draws = iter(draws)

            def randbelow(self, n: int) -> int:
                value = next(self._draws)
                assert 0 <= value < n
                return value

        outputs = generate("abc", 2, 3, Scripted([0, 1, 2, 2, 1, 0]))
        self.assertEqual(outputs, ["ab", "cc", "ba"])

    def test_duplicates_in_batch_are_allowed(self) -> None:
        outputs = generate("ab", 1, 50, SeededIndexSampler(7))
        self.assertEqual(len(outputs), 50)
        self.assertLess(len(set(outputs)), 50)

    def test_duplicate_characters_bias_selection(self) -> None:
        value = generate("aaab", 20000, 1, SeededIndexSampler(42))[0]
        counts = Counter(value)
        self.assertAlmostEqual(counts["a"] / len(value), 0.75, delta=0.02)
        self.assertAlmostEqual(counts["b"] / len(value), 0.25, delta=0.02)

    def test_two_letter_alphabet_is_roughly_uniform(self) -> None:
        value = generate("ab", 1000, 1)[0]
        counts = Counter(value)
        self.assertEqual(sum(counts.values()), 1000)
        # 1000 fair draws: sigma ~ 15.8, so +/-100 is more than six sigma.
        self.assertLess(abs(counts["a"] - 500), 100)
        self.assertLess(abs(counts["b"] - 500), 100)


class GeneratePasswordsTests(unittest.TestCase):
    def test_result_carries_outputs_entropy_and_warnings(self) -> None:
        result = generate_passwords(GenerationRequest(alphabet="ab", length=12, count=3))
        self.assertEqual(len(result.outputs), 3)
        self.assertEqual(result.entropy_bits, 12.0)
        self.assertEqual(result.quality, "poor")
        self.assertEqual(
            result.warnings,
            (
                "Any eavesdropper will have an easy time trying one of your 3 passphrases!",
                "Low password entropy of 12 bits!",
            ),
        )
        self.assertEqual(result.as_lines(), result.outputs)

    def test_strong_request_has_no_warnings(self) -> None:
        alphabet = "".join(chr(c) for c in range(33, 33 + 64))
        result = generate_passwords(GenerationRequest(alphabet=alphabet, length=24, count=20))
        self.assertEqual(result.entropy_bits, 144.0)
        self.assertEqual(result.quality, "excellent")
        self.assertEqual(result.warnings, ())

    def test_defaults_apply_to_request(self) -> None:
        result = generate_passwords(GenerationRequest(alphabet="xyz"))
        self.assertEqual(len(result.outputs), 20)
        self.assertTrue(all(len(value) == 24 for value in result.outputs))

    def test_invalid_request_raises_before_generation(self) -> None:
        class Exploding:
            def randbelow(self, n: int) -> int:
                raise AssertionError("sampler must not be called")

        with self.assertRaises(InvalidInput):
            generate_passwords(GenerationRequest(alphabet="abc", length=4, count=0), Exploding())

    def test_rng_os_error_is_reported_as_value_error(self) -> None:
        class Broken:
            def randbelow(self, n: int) -> int:
                raise OSError("rng unavailable")

        with self.assertRaisesRegex(ValueError, "rng unavailable") as ctx:
            generate_passwords(GenerationRequest(alphabet="abc", length=4, count=1), Broken())
        self.assertEqual(ctx.exception.code, "rng_failure")


if __name__ == "__main__":
    unittest.main()
