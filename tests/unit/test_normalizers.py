import pytest

from locationdata.normalizers import demographics, health, livability, safety


@pytest.mark.parametrize("module", [demographics, health, livability])
def test_unknown_key_falls_back_to_raw_key(module):
    assert module.readable_key("UnknownKey_999") == "UnknownKey_999"
    assert module.is_known_key("UnknownKey_999") is False


def test_known_keys_are_relabelled():
    assert demographics.readable_key("AantalInwoners_5") == "Aantal Inwoners"
    assert health.readable_key("Roker_11") == "Roker"
    assert livability.is_known_key("RapportcijferLeefbaarheidWoonbuurt_18")


def test_normalize_keys_keeps_values():
    record = {"Gemeentenaam_1": "Utrecht", "Mystery_0": 3}
    assert demographics.normalize_keys(record) == {"Gemeentenaam": "Utrecht", "Mystery_0": 3}


def test_health_metadata_keys_are_known():
    assert all(health.is_known_key(key) for key in health.METADATA_KEYS)


def test_safety_key_accepts_prefixed_and_bare_codes():
    assert safety.normalize_safety_key("Crime_1.1.1") == "Diefstal/inbraak woning"
    assert safety.normalize_safety_key("1.1.1") == "Diefstal/inbraak woning"


def test_safety_key_falls_back_for_unknown_or_missing_codes():
    assert safety.normalize_safety_key("Crime_9.9.9") == "Crime_9.9.9"
    assert safety.normalize_safety_key("WijkenEnBuurten") == "WijkenEnBuurten"


def test_extract_crime_code_takes_first_match():
    assert safety.extract_crime_code("Crime_2.6.10") == "2.6.10"
    assert safety.extract_crime_code("no code here") is None


def test_crime_type_lookup():
    crime = safety.crime_type("Crime_1.1.1")
    assert crime is not None
    assert crime.code == "1.1.1"
    assert crime.major == 1
    assert crime.offences[0] == "A20 Gekwal. Diefstal in/uit woning"
    assert safety.crime_type("0.0.0").offences == ()
    assert safety.crime_type("7.7.7") is None
    assert safety.is_known_crime_code("0.0.0")


def test_crime_key_is_idempotent():
    assert safety.crime_key("1.1.1") == "Crime_1.1.1"
    assert safety.crime_key("Crime_1.1.1") == "Crime_1.1.1"


def test_all_crime_types_cover_the_table():
    types = safety.all_crime_types()
    assert len(types) == len(safety.CRIME_TITLES)
    assert types[0].title == "Totaal misdrijven"
    assert set(safety.CRIME_OFFENCES) <= set(safety.CRIME_TITLES)
