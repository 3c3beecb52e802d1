"""RIVM Gezondheid per wijk en buurt (50120NED) key labels."""

from __future__ import annotations

from typing import Any, Mapping

HEALTH_KEY_MAP: dict[str, str] = {
    "Gemeentenaam_1": "Gemeentenaam",
    "SoortRegio_2": "Soort Regio",
    "Codering_3": "Codering",
    "ErvarenGezondheidGoedZeerGoed_4": "Ervaren Gezondheid Goed / Zeer Goed",
    "VoldoetAanBeweegrichtlijn_5": "Voldoet Aan Beweegrichtlijn",
    "WekelijkseSporters_6": "Wekelijkse Sporters",
    "Ondergewicht_7": "Ondergewicht",
    "NormaalGewicht_8": "Normaal Gewicht",
    "Overgewicht_9": "Overgewicht",
    "ErnstigOvergewicht_10": "Ernstig Overgewicht",
    "Roker_11": "Roker",
    "VoldoetAanAlcoholRichtlijn_12": "Voldoet Aan Alcohol Richtlijn",
    "Drinker_13": "Drinker",
    "ZwareDrinker_14": "Zware Drinker",
    "OvermatigeDrinker_15": "Overmatige Drinker",
    "EenOfMeerLangdurigeAandoeningen_16": "Een Of Meer Langdurige Aandoeningen",
    "BeperktVanwegeGezondheid_17": "Beperkt Vanwege Gezondheid",
    "ErnstigBeperktVanwegeGezondheid_18": "Ernstig Beperkt Vanwege Gezondheid",
    "LangdurigErnstigBeperkt_19": "Langdurig Ernstig Beperkt",
    "PsychischeKlachten_20": "Psychische Klachten",
    "ZeerLageVeerkracht_21": "Zeer Lage Veerkracht",
    "ZeerHogeVeerkracht_22": "Zeer Hoge Veerkracht",
    "MistEmotioneleSteun_23": "Mist Emotionele Steun",
    "SuicideGedachtenLaatste12Maanden_24": "Suicide Gedachten Laatste 12 Maanden",
    "HoogRisicoOpAngstOfDepressie_25": "Hoog Risico Op Angst Of Depressie",
    "HeelVeelStressInAfgelopen4Weken_26": "Heel Veel Stress In Afgelopen 4 Weken",
    "Eenzaam_27": "Eenzaam",
    "ErnstigZeerErnstigEenzaam_28": "Ernstig / Zeer Ernstig Eenzaam",
    "EmotioneelEenzaam_29": "Emotioneel Eenzaam",
    "SociaalEenzaam_30": "Sociaal Eenzaam",
    "Mantelzorger_31": "Mantelzorger",
    "Vrijwilligerswerk_32": "Vrijwilligerswerk",
    "MoeiteMetRondkomen_33": "Moeite Met Rondkomen",
    "LopenEnOfFietsenNaarSchoolOfWerk_34": "Lopen En/Of Fietsen Naar School Of Werk",
    "LopenNaarSchoolOfWerk_35": "Lopen Naar School Of Werk",
    "FietsenNaarSchoolOfWerk_36": "Fietsen Naar School Of Werk",
    "NietSpecifiekeKlachten_37": "Niet Specifieke Klachten",
}

METADATA_KEYS = ("Gemeentenaam_1", "SoortRegio_2", "Codering_3")


def readable_key(key: str) -> str:
    return HEALTH_KEY_MAP.get(key, key)


def is_known_key(key: str) -> bool:
    return key in HEALTH_KEY_MAP


def normalize_keys(record: Mapping[str, Any]) -> dict[str, Any]:
    return {readable_key(key): value for key, value in record.items()}
