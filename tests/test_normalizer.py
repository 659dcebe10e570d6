import pytest

from hunter_data.core.scraping.normalizer import camel_case, snake_case, trim

SAMPLES = [
    "Cast time",
    "  Effect #1 ",
    "GCD category",
    "--Mechanic__ -",
    "castTime",
    "1st Effect",
    "http://www.wowhead.com/spell=883",
    "http://www.wowhead.com/hunter-pet-abilities/live-only:on#50+1+17+2",
    "Can't be removed",
    "",
    "   ",
    "_-_",
    "Ünïcode Label",
]


def test_snake_case_examples():
    assert snake_case("Cast time") == "cast_time"
    assert snake_case("  --Cast   Time__ ") == "cast_time"
    assert snake_case("a -b") == "a_b"
    assert snake_case("http://www.wowhead.com/spell=883") == "httpwwwwowheadcomspell883"
    assert (
        snake_case("http://www.wowhead.com/hunter-pet-abilities/live-only:on")
        == "httpwwwwowheadcomhunter_pet_abilitieslive_onlyon"
    )


def test_camel_case_examples():
    assert camel_case("Cast time") == "castTime"
    assert camel_case("Effect #1") == "effect1"
    assert camel_case("Flags") == "flags"
    assert camel_case("GCD") == "gcd"
    assert camel_case("GCD category") == "gcdCategory"
    assert camel_case("  power_type ") == "powerType"


def test_empty_and_separator_only_inputs():
    assert snake_case("") == ""
    assert camel_case("") == ""
    assert snake_case(" -_ ") == ""
    assert camel_case(" -_ ") == ""


@pytest.mark.parametrize("value", SAMPLES)
def test_normalizers_are_idempotent(value):
    assert snake_case(snake_case(value)) == snake_case(value)
    assert camel_case(camel_case(value)) == camel_case(value)


def test_trim():
    assert trim("  Instant \n") == "Instant"
