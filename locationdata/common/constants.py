"""Application constants."""

USER_AGENT = "locationdata/0.3 (+open-data; contact: configured-email)"
SOURCES = ("demographics", "health", "livability", "safety")
LEVELS = ("national", "municipality", "district", "neighborhood")
NATIONAL_LEVEL = "national"
NATIONAL_CODES = ("NL00", "NL01")
COMMANDS = ("parse", "score", "report", "fetch")

# CBS marks suppressed or unavailable cells with a single dot.
CBS_NULL_SENTINELS = frozenset({"", ".", "n/a"})

POPULATION_KEY = "AantalInwoners_5"

EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "level",
    "event",
    "status",
    "indicators_in",
    "indicators_out",
    "error_code",
    "message",
)
