"""Pipeline error types.

The parsing and scoring core never raises on data. These errors belong to
the boundaries: config files, CLI inputs and the fetch stage.
"""


class PipelineError(Exception):
    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Scoring override file is missing, unreadable or fails the schema."""

    error_code = "CONFIG_ERROR"


class ContractError(PipelineError):
    """A CLI input file is not the raw record, parsed dataset or level tree it should be."""

    error_code = "CONTRACT_ERROR"


class StageError(PipelineError):
    """A fetch stage produced nothing usable."""

    error_code = "STAGE_ERROR"
