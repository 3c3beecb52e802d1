from locationdata.cli import parse_args


def test_parse_args_defaults():
    args = parse_args(["report"])
    assert args.command == "report"
    assert args.config == "config/scoring_rules.yml"
    assert args.overlay_config is None
    assert args.log_level == "INFO"


def test_parse_args_accepts_overlay_config():
    args = parse_args(["score", "--source", "health", "--overlay-config", "config/live.yml"])
    assert args.source == "health"
    assert args.overlay_config == "config/live.yml"


def test_parse_args_population_is_numeric():
    args = parse_args(["parse", "--source", "safety", "--population", "5000"])
    assert args.population == 5000.0
