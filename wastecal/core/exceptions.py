"""Custom exception hierarchy for schedule conversion errors.

Every fatal condition raised while turning a collection sheet into calendar
events derives from ScheduleError, so callers (the CLI, the pipeline) can
abort the whole conversion with a single except clause. Recoverable cell-level
problems are not exceptions; they are logged and recorded as skipped cells.
"""


class ScheduleError(Exception):
    """Base exception for all schedule conversion errors.

    Any error of this type aborts the conversion; no output file is written.
    """


class EmptyInputError(ScheduleError):
    """The row stream ended where a required row was expected.

    Raised when:
    - The sheet has no year row
    - The sheet has no category-name row
    """


class ScheduleFormatError(ScheduleError):
    """The sheet does not follow the positional layout.

    Raised when:
    - The year cell is missing or not an integer
    - A month cell is not an integer in 1..12
    - More than seven category names are declared
    - A non-empty entry cell sits beyond the seventh category group
    - An override row has a source date but no target date
    - An override cell is not a "day/month" pair of integers
    """


class InvalidScheduleDateError(ScheduleError):
    """A concrete date could not be built for the schedule year.

    Raised when:
    - A literal-day rule names a day the month does not have (e.g. 31 April)
    - An override target resolves to a date that does not exist
    """


class MissingCategoryNameError(ScheduleError):
    """A rule references a category that has no display name.

    Events cannot be emitted without a title, so the run fails instead of
    silently dropping the rule.
    """


class ConfigError(ScheduleError):
    """The configuration file could not be used.

    Raised when:
    - The file is not valid YAML
    - The top level of the file is not a mapping
    """
