"""Kerncijfers wijken en buurten parser.

Counts carry their share of the matching denominator (population,
households, income recipients, businesses or cars). Stock totals and
scalars stay absolute, and fields CBS already publishes as percentages stay
relative. ``Autochtoon`` is derived from the migration background totals.
"""

from __future__ import annotations

from locationdata.common.constants import POPULATION_KEY
from locationdata.common.models import ParsedDataset, RawRecord
from locationdata.common.numbers import parse_number, share_of
from locationdata.normalizers.demographics import readable_key
from locationdata.parsers.rules import (
    FieldRule,
    Figures,
    ParseContext,
    absolute_only,
    build_dataset,
    count_share,
    relative_only,
    text,
)

SOURCE = "demographics"

AUTOCHTOON_KEY = "Autochtoon"
WESTERN_TOTAL_KEY = "WestersTotaal_17"
NON_WESTERN_TOTAL_KEY = "NietWestersTotaal_18"

# Denominator name -> raw key it is read from.
DENOMINATOR_KEYS = {
    "households": "HuishoudensTotaal_28",
    "income_recipients": "AantalInkomensontvangers_70",
    "businesses": "BedrijfsvestigingenTotaal_91",
    "cars": "PersonenautoSTotaal_99",
}


def total_population(record: RawRecord) -> float | None:
    return parse_number(record.get(POPULATION_KEY))


def _autochtoon_count(record: RawRecord, context: ParseContext) -> float | None:
    western = parse_number(record.get(WESTERN_TOTAL_KEY))
    non_western = parse_number(record.get(NON_WESTERN_TOTAL_KEY))
    if context.total_population is None or western is None or non_western is None:
        return None
    return context.total_population - western - non_western


def _autochtoon(record: RawRecord, context: ParseContext) -> Figures:
    count = _autochtoon_count(record, context)
    return count, share_of(count, context.total_population)


def _text(key: str) -> FieldRule:
    return FieldRule(key, text)


def _count(key: str, denominator: str = "population") -> FieldRule:
    return FieldRule(key, count_share(key, denominator))


def _scalar(key: str, unit: str | None = None) -> FieldRule:
    return FieldRule(key, absolute_only(key), unit)


def _percentage(key: str, unit: str = "%") -> FieldRule:
    return FieldRule(key, relative_only(key), unit)


DEMOGRAPHICS_RULES: tuple[FieldRule, ...] = (
    _text("Gemeentenaam_1"),
    _text("SoortRegio_2"),
    _text("Codering_3"),
    _text("IndelingswijzigingWijkenEnBuurten_4"),
    _scalar(POPULATION_KEY),
    _count("Mannen_6"),
    _count("Vrouwen_7"),
    _count("k_0Tot15Jaar_8"),
    _count("k_15Tot25Jaar_9"),
    _count("k_25Tot45Jaar_10"),
    _count("k_45Tot65Jaar_11"),
    _count("k_65JaarOfOuder_12"),
    _count("Ongehuwd_13"),
    _count("Gehuwd_14"),
    _count("Gescheiden_15"),
    _count("Verweduwd_16"),
    FieldRule(AUTOCHTOON_KEY, _autochtoon, "%", source_value=_autochtoon_count),
    _count(WESTERN_TOTAL_KEY),
    _count(NON_WESTERN_TOTAL_KEY),
    _count("Marokko_19"),
    _count("NederlandseAntillenEnAruba_20"),
    _count("Suriname_21"),
    _count("Turkije_22"),
    _count("OverigNietWesters_23"),
    _scalar("GeboorteTotaal_24"),
    _scalar("GeboorteRelatief_25", "per 1000"),
    _scalar("SterfteTotaal_26"),
    _scalar("SterfteRelatief_27", "per 1000"),
    _scalar("HuishoudensTotaal_28"),
    _count("Eenpersoonshuishoudens_29", "households"),
    _count("HuishoudensZonderKinderen_30", "households"),
    _count("HuishoudensMetKinderen_31", "households"),
    _scalar("GemiddeldeHuishoudensgrootte_32"),
    _scalar("Bevolkingsdichtheid_33"),
    _scalar("Woningvoorraad_34"),
    _scalar("GemiddeldeWOZWaardeVanWoningen_35", "x1000"),
    _percentage("PercentageEengezinswoning_36"),
    _percentage("PercentageMeergezinswoning_37"),
    _percentage("PercentageBewoond_38"),
    _percentage("PercentageOnbewoond_39"),
    _percentage("Koopwoningen_40"),
    _percentage("HuurwoningenTotaal_41"),
    _percentage("InBezitWoningcorporatie_42"),
    _percentage("InBezitOverigeVerhuurders_43"),
    _percentage("EigendomOnbekend_44"),
    _percentage("BouwjaarVoor2000_45"),
    _percentage("BouwjaarVanaf2000_46"),
    _scalar("GemiddeldElektriciteitsverbruikTotaal_47", "kWh"),
    _scalar("Appartement_48", "kWh"),
    _scalar("Tussenwoning_49", "kWh"),
    _scalar("Hoekwoning_50", "kWh"),
    _scalar("TweeOnderEenKapWoning_51", "kWh"),
    _scalar("VrijstaandeWoning_52", "kWh"),
    _scalar("Huurwoning_53", "kWh"),
    _scalar("EigenWoning_54", "kWh"),
    _scalar("GemiddeldAardgasverbruikTotaal_55", "m³"),
    _scalar("Appartement_56", "m³"),
    _scalar("Tussenwoning_57", "m³"),
    _scalar("Hoekwoning_58", "m³"),
    _scalar("TweeOnderEenKapWoning_59", "m³"),
    _scalar("VrijstaandeWoning_60", "m³"),
    _scalar("Huurwoning_61", "m³"),
    _scalar("EigenWoning_62", "m³"),
    _percentage("PercentageWoningenMetStadsverwarming_63"),
    _percentage("OpleidingsniveauLaag_64"),
    _percentage("OpleidingsniveauMiddelbaar_65"),
    _percentage("OpleidingsniveauHoog_66"),
    _percentage("Nettoarbeidsparticipatie_67"),
    _percentage("PercentageWerknemers_68"),
    _percentage("PercentageZelfstandigen_69"),
    _scalar("AantalInkomensontvangers_70"),
    _scalar("GemiddeldInkomenPerInkomensontvanger_71", "x1000"),
    _scalar("GemiddeldInkomenPerInwoner_72", "x1000"),
    _percentage("k_40PersonenMetLaagsteInkomen_73"),
    _percentage("k_20PersonenMetHoogsteInkomen_74"),
    _scalar("GemGestandaardiseerdInkomenVanHuish_75", "x1000"),
    _percentage("k_40HuishoudensMetLaagsteInkomen_76"),
    _percentage("k_20HuishoudensMetHoogsteInkomen_77"),
    _percentage("HuishoudensMetEenLaagInkomen_78"),
    _percentage("HuishOnderOfRondSociaalMinimum_79"),
    _percentage("HuishoudensTot110VanSociaalMinimum_80"),
    _percentage("HuishoudensTot120VanSociaalMinimum_81"),
    _scalar("MediaanVermogenVanParticuliereHuish_82", "x1000"),
    _count("PersonenPerSoortUitkeringBijstand_83", "income_recipients"),
    _count("PersonenPerSoortUitkeringAO_84", "income_recipients"),
    _count("PersonenPerSoortUitkeringWW_85", "income_recipients"),
    _count("PersonenPerSoortUitkeringAOW_86", "income_recipients"),
    _count("JongerenMetJeugdzorgInNatura_87"),
    _percentage("PercentageJongerenMetJeugdzorg_88"),
    _scalar("WmoClienten_89"),
    _percentage("WmoClientenRelatief_90", "per 1000"),
    _scalar("BedrijfsvestigingenTotaal_91"),
    _count("ALandbouwBosbouwEnVisserij_92", "businesses"),
    _count("BFNijverheidEnEnergie_93", "businesses"),
    _count("GIHandelEnHoreca_94", "businesses"),
    _count("HJVervoerInformatieEnCommunicatie_95", "businesses"),
    _count("KLFinancieleDienstenOnroerendGoed_96", "businesses"),
    _count("MNZakelijkeDienstverlening_97", "businesses"),
    _count("RUCultuurRecreatieOverigeDiensten_98", "businesses"),
    _scalar("PersonenautoSTotaal_99"),
    _count("PersonenautoSBrandstofBenzine_100", "cars"),
    _count("PersonenautoSOverigeBrandstof_101", "cars"),
    _scalar("PersonenautoSPerHuishouden_102"),
    _scalar("PersonenautoSNaarOppervlakte_103"),
    _scalar("Motorfietsen_104"),
    _scalar("AfstandTotHuisartsenpraktijk_105", "km"),
    _scalar("AfstandTotGroteSupermarkt_106", "km"),
    _scalar("AfstandTotKinderdagverblijf_107", "km"),
    _scalar("AfstandTotSchool_108", "km"),
    _scalar("ScholenBinnen3Km_109"),
    _scalar("OppervlakteTotaal_110", "ha"),
    _scalar("OppervlakteLand_111", "ha"),
    _scalar("OppervlakteWater_112", "ha"),
    _text("MeestVoorkomendePostcode_113"),
    _text("Dekkingspercentage_114"),
    _scalar("MateVanStedelijkheid_115"),
    _scalar("Omgevingsadressendichtheid_116"),
)


def parse_demographics(record: RawRecord, *, fetched_at: str | None = None) -> ParsedDataset:
    context = ParseContext(
        total_population=total_population(record),
        denominators={name: parse_number(record.get(key)) for name, key in DENOMINATOR_KEYS.items()},
    )
    return build_dataset(
        SOURCE,
        DEMOGRAPHICS_RULES,
        record,
        context,
        title_for=readable_key,
        fetched_at=fetched_at,
    )
