from aoc2024.day03 import Do, Dont, Mul, Tokenizer, solve_a, solve_b

EXAMPLE_A = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_B = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_tokens_of_example():
    assert list(Tokenizer(EXAMPLE_A)) == [Mul(2, 4), Mul(5, 5), Mul(11, 8), Mul(8, 5)]


def test_do_and_dont_tokens():
    assert list(Tokenizer(EXAMPLE_B)) == [
        Mul(2, 4),
        Dont(),
        Mul(5, 5),
        Mul(11, 8),
        Do(),
        Mul(8, 5),
    ]


def test_numbers_longer_than_three_digits_rejected():
    assert list(Tokenizer("mul(1234,5)")) == []


def test_spaces_rejected():
    assert list(Tokenizer("mul( 2,4)mul(2 ,4)")) == []


def test_empty_number_rejected():
    assert list(Tokenizer("mul(,4)mul(4,)")) == []


def test_three_digit_numbers_accepted():
    assert list(Tokenizer("mul(123,456)")) == [Mul(123, 456)]


def test_example_sums():
    assert solve_a(EXAMPLE_A) == 161
    assert solve_b(EXAMPLE_B) == 48


def test_without_switches_both_parts_agree():
    assert solve_a(EXAMPLE_A) == solve_b(EXAMPLE_A)


def test_disabled_disables_everything():
    assert solve_b("don't()mul(3,3)mul(9,9)") == 0