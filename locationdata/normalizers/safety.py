"""Politie geregistreerde criminaliteit (47018NED) crime-type labels.

Keys follow the ``SoortMisdrijf`` taxonomy (``major.minor.sub``), either bare
(``"1.1.1"``) or prefixed (``"Crime_1.1.1"``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

CRIME_KEY_PREFIX = "Crime_"
CRIME_CODE_RE = re.compile(r"(\d+\.\d+\.\d+)")


@dataclass(frozen=True)
class CrimeType:
    code: str
    title: str
    major: int
    offences: tuple[str, ...] = ()


CRIME_TITLES: dict[str, str] = {
    "0.0.0": "Totaal misdrijven",
    "1.1.1": "Diefstal/inbraak woning",
    "1.1.2": "Diefstal/inbraak box/garage/schuur",
    "1.2.1": "Diefstal uit/vanaf motorvoertuigen",
    "1.2.2": "Diefstal van motorvoertuigen",
    "1.2.3": "Diefstal van brom-, snor-, fietsen",
    "1.2.4": "Zakkenrollerij",
    "1.2.5": "Diefstal af/uit/van ov. voertuigen",
    "1.3.1": "Ongevallen (weg)",
    "1.4.1": "Zedenmisdrijf",
    "1.4.2": "Moord, doodslag",
    "1.4.3": "Openlijk geweld (persoon)",
    "1.4.4": "Bedreiging",
    "1.4.5": "Mishandeling",
    "1.4.6": "Straatroof",
    "1.4.7": "Overval",
    "1.5.2": "Diefstallen (water)",
    "1.6.1": "Brand/ontploffing",
    "1.6.2": "Overige vermogensdelicten",
    "1.6.3": "Mensenhandel",
    "2.1.1": "Drugs/drankoverlast",
    "2.2.1": "Vernieling cq. zaakbeschadiging",
    "2.4.1": "Burengerucht (relatieproblemen)",
    "2.4.2": "Huisvredebreuk",
    "2.5.1": "Diefstal/inbraak bedrijven enz.",
    "2.5.2": "Winkeldiefstal",
    "2.6.1": "Inrichting Wet Milieubeheer",
    "2.6.2": "Bodem",
    "2.6.3": "Water",
    "2.6.4": "Afval",
    "2.6.5": "Bouwstoffen",
    "2.6.7": "Mest",
    "2.6.8": "Transport gevaarlijke stoffen",
    "2.6.9": "Vuurwerk",
    "2.6.10": "Bestrijdingsmiddelen",
    "2.6.11": "Natuur en landschap",
    "2.6.12": "Ruimtelijke ordening",
    "2.6.13": "Dieren",
    "2.6.14": "Voedselveiligheid",
    "2.7.2": "Bijzondere wetten",
    "2.7.3": "Leefbaarheid (overig)",
    "3.1.1": "Drugshandel",
    "3.1.2": "Mensensmokkel",
    "3.1.3": "Wapenhandel",
    "3.2.1": "Kinderporno",
    "3.2.2": "Kinderprostitutie",
    "3.3.2": "Onder invloed (lucht)",
    "3.3.5": "Lucht (overig)",
    "3.4.2": "Onder invloed (water)",
    "3.5.2": "Onder invloed (weg)",
    "3.5.5": "Weg (overig)",
    "3.6.4": "Aantasting openbare orde",
    "3.7.1": "Discriminatie",
    "3.7.2": "Vreemdelingenzorg",
    "3.7.3": "Maatsch. integriteit (overig)",
    "3.7.4": "Cybercrime",
    "3.9.1": "Horizontale fraude",
    "3.9.2": "Verticale fraude",
    "3.9.3": "Fraude (overig)",
}


# Police offence sub-codes grouped under each crime type.
CRIME_OFFENCES: dict[str, tuple[str, ...]] = {
    "1.1.1": (
        "A20 Gekwal. Diefstal in/uit woning",
        "A30 Diefstal in/uit woning (niet gekwal.)",
        "B20 Gekwal. Diefstal met geweld in/uit woning",
        "B30 Diefstal met geweld in/uit woning (niet gekwal.)",
    ),
    "1.1.2": (
        "A21 Gekwal. Diefstal in/uit box/garage/schuur",
        "A34 Diefstal in/uit box/garage/schuur/erf (niet gekwal.)",
        "B21 Gekwal. Diefstal met geweld in/uit box/garage/schuur",
        "B34 Diefstal met geweld in/uit box/garage/schuur (niet gekwal.)",
    ),
    "1.2.1": (
        "A10 Diefstal uit/vanaf personenauto",
        "B10 Diefstal met geweld uit/vanaf personenauto",
    ),
    "1.2.2": (
        "A70 Diefstal personenauto",
        "A71 Diefstal motor",
        "A76 Diefstal vrachtauto/bestelauto",
        "B60 Diefstal van personenauto met geweld",
        "B61 Diefstal met geweld motor",
        "B66 Diefstal met geweld vrachtauto/bestelauto",
    ),
    "1.2.3": (
        "A72 Diefstal fiets",
        "A73 Diefstal bromfiets/snorfiets",
        "B62 Diefstal met geweld fiets",
        "B63 Diefstal met geweld bromfiets/snorfiets",
    ),
    "1.2.4": (
        "A40 Zakkenrollerij/tassenrollerij",
    ),
    "1.2.5": (
        "A12 Diefstal uit/vanaf andere vervoermiddelen",
        "A74 Diefstal ander vervoermiddel",
        "B12 Diefstal met geweld uit/vanaf ander vervoermiddel",
        "B64 Diefstal met geweld ander vervoermiddel",
    ),
    "1.3.1": (
        "D11 Verkeersongeval met letsel",
        "D12 Verkeersongeval met dodelijke afloop",
        "D13 Verlaten plaats na verkeersongeval",
    ),
    "1.4.1": (
        "F520 Openbare schennis der eerbaarheid",
        "F521 Verkrachting",
        "F522 Aanranding",
        "F523 Overige zedenmisdrijven",
        "F525 Pornografie",
        "F526 Incest/afhankelijkheid/wilsonbekwame",
        "F527 Seksueel misbruik kinderen (geen incest)",
        "F5295 Sexting",
        "F5296 Grooming",
    ),
    "1.4.2": (
        "F540 Doodslag/moord",
        "F541 Euthanasie",
        "F542 Overige misdrijven tegen het leven",
        "F543 Illegale abortus",
        "F544 Behulpzaam bij zelfmoord",
    ),
    "1.4.3": (
        "F12 Openlijke geweldpleging tegen personen",
    ),
    "1.4.4": (
        "F530 Bedreiging",
        "F531 Overige misdrijven tegen de persoonlijke vrijheid",
        "F532 Gijzeling/ontvoering",
        "F533 Stalking",
    ),
    "1.4.5": (
        "F550 Eenvoudige mishandeling",
        "F551 Zware mishandeling",
    ),
    "1.4.6": (
        "B70 Straatroof",
    ),
    "1.4.7": (
        "B72 Overval in woning",
        "B73 Overval op overige objecten",
        "B74 Overval op geld- en waardetransport",
    ),
    "1.5.2": (
        "A11 Diefstal uit/vanaf vaartuig",
        "A75 Diefstal vaartuig",
        "B11 Diefstal met geweld uit/vanaf vaartuig",
        "B65 Diefstal met geweld vaartuig",
    ),
    "1.6.1": (
        "F13 Brandstichting",
        "F14 Bomaanslag",
    ),
    "1.6.2": (
        "A27 Gekwal. Diefstal in/uit andere gebouwen",
        "A36 Diefstal in/uit andere gebouwen (niet gekwal.)",
        "A60 Diefstal van een dier",
        "A80 Verduistering (evt. In dienstbetrekking)",
        "A81 Heling",
        "A82 Chantage / afpersing",
        "A90 Overige (eenvoudige) diefstal",
        "A95 Overige gekwal. Diefstal",
        "B27 Gekwal. Diefstal met geweld in/uit andere gebouwen",
        "B36 Diefstal met geweld in/uit andere gebouwen (niet gekwal.)",
        "B95 Overige diefstallen met geweld",
    ),
    "1.6.3": (
        "F5293 Mensenhandel",
        "F563 Mensenhandel uitbuiting in strafbare activiteiten",
        "F564 Mensenhandel gedwongen orgaanverwijdering",
        "F562 Mensenhandel arbeidsuitbuiting",
        "F565 Mensenhandel overige vormen van uitbuiting",
        "F561 Mensenhandel sexuele uitbuiting",
    ),
    "2.1.1": (
        "F47 Overige drugsdelicten",
    ),
    "2.2.1": (
        "C20 Vernieling van/aan openbaar vervoer/abri",
        "C30 Vernieling van/aan openbaar gebouw",
        "C40 Vernieling overige objecten",
        "F11 Openlijke geweldpleging tegen goederen",
    ),
    "2.4.1": (
        "F95 Overtreding huisverbod",
    ),
    "2.4.2": (
        "F15 Huisvredebreuk",
    ),
    "2.5.1": (
        "A22 Gekwal. Diefstal in/uit winkel",
        "A23 Gekwal. Diefstal in/uit bedrijf/kantoor",
        "A24 Gekwal. Diefstal in/uit sportcomplex",
        "A25 Gekwal. Diefstal in/uit hotel/pension",
        "A26 Gekwal. Diefstal in/uit school",
        "A31 Diefstal in/uit school (niet gekwal.)",
        "A32 Diefstal in/uit bedrijf/kantoor (niet gekwal.)",
        "A33 Diefstal in/uit hotel/pension (niet gekwal.)",
        "A35 Diefstal in/uit sportcomplex (niet gekwal.)",
        "B22 Gekwal. Diefstal met geweld in/uit winkel",
        "B23 Gekwal. Diefstal met geweld in/uit bedrijf/kantoor",
        "B24 Gekwal. Diefstal met geweld in/uit sportcomplex",
        "B25 Gekwal. Diefstal met geweld in/uit hotel/pension",
        "B26 Gekwal. Diefstal met geweld in/uit school",
        "B31 Diefstal met geweld in/uit school (niet gekwal.)",
        "B32 Diefstal met geweld in/uit bedrijf/kantoor (niet gekwal.)",
        "B33 Diefstal met geweld in/uit hotel/pension (niet gekwal.)",
        "B35 Diefstal met geweld in/uit sportcomplex (niet gekwal.)",
    ),
    "2.5.2": (
        "A50 Winkeldiefstal",
        "B50 Winkeldiefstal met geweld",
    ),
    "2.6.1": (
        "M08 Inrichtingen wet milieubeheer",
        "M135 Inrichtingen vuurwerk",
    ),
    "2.6.2": (
        "M011 Op/in bodem brengen afvalstoffen",
        "M0111 Afval drugslab",
        "M031 Bodembescherming",
        "M032 Ontgrondingen",
        "M033 Ondergrondse tanks",
        "M034 Bodemsanering",
    ),
    "2.6.3": (
        "M141 Verontreinigingen oppervlaktewater",
        "M144 Slootdemping",
    ),
    "2.6.4": (
        "M012 Afvaltransport",
        "M013 Huishoudelijk afval aanbieden/doorzoeke/inzamelen",
        "M014 Afval verbranden",
        "M015 Autowrak (milieu)",
        "M016 Afvallozing in riool",
        "M017 Afvalstoffen inzamelen",
        "M019 Asbest",
    ),
    "2.6.5": (
        "M018 Bouw- en sloopafval",
        "M041 Bouwstoffen op of in de bodem",
        "M042 Bouwstoffen in oppervlaktewater",
    ),
    "2.6.7": (
        "M091 Uitrijden mest",
        "M092 Opslag mest",
        "M093 Vervoer mest",
    ),
    "2.6.8": (
        "M071 Transport gevaarlijke stoffen over de weg",
        "M072 Transport gevaarlijke stoffen over binnenwater",
        "M073 Transport gevaarlijke stoffen over de rijn",
        "M074 Transport gevaarlijke stoffen over zee",
        "M075 Transport gevaarlijke stoffen over het spoor",
        "M076 Transport gevaarlijke stoffen door de lucht",
        "M077 Cfk (handel, in-/uitvoer, vullen)",
        "M078 Koelinstallatie",
    ),
    "2.6.9": (
        "M132 Transport vuurwerk",
        "M134 Bezitten/vervaardigen/voorhanden hebben/afleveren vuurwerk",
    ),
    "2.6.10": (
        "M021 Gebruik bestrijdingsmiddelen",
        "M022 Opslag en voorhanden hebben bestrijdingsmiddelen",
    ),
    "2.6.11": (
        "M23 Wet inzake luchtverontreiniging",
    ),
    "2.6.12": (
        "M11 Ruimtelijke ordening",
    ),
    "2.6.13": (
        "M051 Gezondheid en welzijn dieren en dierenvervoer",
        " M102 Cites (uitheemse planten en dieren)",
    ),
    "2.6.14": (
        "M12 Voedselveiligheid en slacht",
    ),
    "2.7.2": (
        "F91 Misdrijven wet op de kansspelen",
        "F92 Telecommunicatiewet",
        "F93 Misdrijven anders",
        "F94 Witwassen",
    ),
    "2.7.3": (
        "F16 Lokaalvredebreuk",
    ),
    "3.1.1": (
        "F40 Bezit hard-drugs (lijst 1)",
        "F41 Bezit softdrugs (lijst 2)",
        "F42 Handel e.d. hard-drugs (lijst 1)",
        "F43 Handel e.d. softdrugs (lijst 2)",
        "F44 Vervaardigen hard-drugs (lijst 1)",
        "F45 Vervaardigen softdrugs (lijst 2)",
    ),
    "3.1.2": (
        "F5294 Mensensmokkel",
    ),
    "3.1.3": (
        "F70 Bezit vuurwapens",
        "F71 Handel vuurwapens",
        "F72 Bezit overige wapens",
        "F73 Handel overige wapens",
    ),
    "3.2.1": (
        "F5291 Kinderpornografie",
    ),
    "3.2.2": (
        "F5292 Kinderprostitutie",
    ),
    "3.3.2": (
        "L90 Vliegen onder invloed drugs/medicijnen",
        "L91 Vliegen onder invloed alcohol",
    ),
    "3.3.5": (
        "L21 Luchtvaartwet",
    ),
    "3.4.2": (
        "L80 Varen onder invloed drugs/medicijnen",
        "L81 Varen onder invloed alcohol",
        "L83 Weigeren ademanalyse (varen)",
    ),
    "3.5.2": (
        "D20 Rijden onder invloed drugs/medicijnen",
        "D21 Rijden onder invloed alcohol",
        "D23 Weigeren ademanalyse",
        "D24 Weigeren bloedproef",
        "D25 Weigeren vervangend (urine)onderzoek",
    ),
    "3.5.5": (
        "D40 Rijden tijdens rijverbod",
        "D41 Rijden terwijl rijbewijs is ingevorderd",
        "D42 Rijden tijdens ontzegging rijbevoegdheid",
        "D44 Rijden met ongeldig verklaard rijbewijs",
        "D50 Joyriding",
        "D51 Vals kenteken/kentekenplaten",
        "D52 Overig verkeersmisdrijf",
    ),
    "3.6.4": (
        "F10 Overige delicten openbare orde",
        "F17 Wederspannigheid (verzet)",
        "F18 Niet voldoen aan bevel/vordering",
        "F19 Overige misdrijven tegen het openbaar gezag",
        "F30 Valse identiteit opgeven",
    ),
    "3.7.1": (
        "F50 Discriminatie",
    ),
    "3.7.2": (
        "F0064 Zich als ongewenst verklaarde vreemdeling in NL bevinden",
    ),
    "3.7.3": (
        "F51 Belediging",
        "F5231 Ontucht met dieren / dierenporno",
    ),
    "3.7.4": (
        "F90 Cybercrime",
    ),
    "3.9.1": (
        "F614 Fraude met betaalproducten",
        "F616 Ie-fraude/namaakgoederen",
        "F617 Identiteitsfraude",
        "F620 Overige horizontale fraude",
        "F622 Verzekerings en assurantiefraude",
        "F625 Faillissementsfraude",
        "F631 Krediet-,hypotheek- en depotfraude",
        "F632 Aquisitiefraude",
        "F633 Vastgoedfraude",
        "F634 Fraude met kilometertellers",
        "F635 Fraude in de zorg",
        "F636 Fraude met onlinehandel",
        "F637 Voorschotfraude",
        "F638 Telecomfraude",
        "F639 Beleggingsfraude",
    ),
    "3.9.2": (
        "F621 Uitkeringsfraude",
        "F623 Subsidiefraude",
        "F649 Overige verticale fraude",
    ),
    "3.9.3": (
        "F600 Oplichting",
        "F601 Flessentrekkerij",
        "F602 Overig bedrog",
        "F610 Vals geld aanmaken",
        "F611 Vals geld uitgeven",
        "F612 Vervalsingen overig",
        "F613 Vervalsen paspoort/identiteitskaart/reisdocument",
        "F614 Vervalsing bankpas/giropas/cheques",
        "F615 Vervalsen rijbewijs",
        "F624 Valse aangifte",
    ),
}


def extract_crime_code(value: str) -> str | None:
    match = CRIME_CODE_RE.search(value)
    if not match:
        return None
    return match.group(1)


def crime_key(code: str) -> str:
    """Canonical indicator key for a crime code, e.g. ``"1.1.1" -> "Crime_1.1.1"``."""
    code = code.strip()
    if code.startswith(CRIME_KEY_PREFIX):
        return code
    return f"{CRIME_KEY_PREFIX}{code}"


def normalize_safety_key(raw_key: str) -> str:
    code = extract_crime_code(raw_key)
    if code is None:
        return raw_key
    return CRIME_TITLES.get(code, raw_key)


def is_crime_key(raw_key: str) -> bool:
    return extract_crime_code(raw_key) is not None


def is_known_crime_code(code: str) -> bool:
    return code.replace(CRIME_KEY_PREFIX, "").strip() in CRIME_TITLES


def crime_type(code: str) -> CrimeType | None:
    bare = code.replace(CRIME_KEY_PREFIX, "").strip()
    title = CRIME_TITLES.get(bare)
    if title is None:
        return None
    return CrimeType(
        code=bare,
        title=title,
        major=int(bare.split(".")[0]),
        offences=CRIME_OFFENCES.get(bare, ()),
    )


def all_crime_types() -> list[CrimeType]:
    return [crime_type(code) for code in CRIME_TITLES]


def normalize_keys(record: Mapping[str, Any]) -> dict[str, Any]:
    return {normalize_safety_key(key): value for key, value in record.items()}
