import pytest

from l10nsync.xliff.locale_mapping import (
    PONTOON_TO_XCODE,
    XCODE_TO_PONTOON,
    to_pontoon,
    to_xcode,
)


@pytest.mark.parametrize(
    "pontoon, xcode",
    [("ga-IE", "ga"), ("nb-NO", "nb"), ("nn-NO", "nn"), ("sv-SE", "sv"),
     ("tl", "fil"), ("sat", "sat-Olck"), ("zgh", "tzm")],
)
def test_mapped_locales(pontoon: str, xcode: str) -> None:
    assert to_xcode(pontoon) == xcode
    assert to_pontoon(xcode) == pontoon


def test_unmapped_locales_pass_through() -> None:
    assert to_xcode("fr") == "fr"
    assert to_pontoon("de") == "de"
    assert to_pontoon("zh-Hans") == "zh-Hans"


def test_en_maps_to_en_us() -> None:
    assert to_pontoon("en") == "en-US"
    assert to_xcode("en-US") == "en-US"


def test_inverse_table_mirrors_forward_table() -> None:
    assert len(XCODE_TO_PONTOON) == len(PONTOON_TO_XCODE)
    for pontoon, xcode in PONTOON_TO_XCODE.items():
        assert XCODE_TO_PONTOON[xcode] == pontoon


@pytest.mark.parametrize("code", ["fr", "de", "ga", "nb", "fil", "sat-Olck", "tzm", "pt-BR"])
def test_application_locales_round_trip(code: str) -> None:
    assert to_xcode(to_pontoon(code)) == code
