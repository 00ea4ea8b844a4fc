"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the artifact-validator CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING_BOLD = "bold yellow"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    DIM = "grey62"

    # -------------------------------------------------------------------------
    # Table columns
    # -------------------------------------------------------------------------
    TABLE_LOCATION = "cyan"
    TABLE_KIND = "bold"
    TABLE_FIELD = "magenta"

    # -------------------------------------------------------------------------
    # Panel borders
    # -------------------------------------------------------------------------
    BORDER_ERROR = "red"


# Default theme instance - import this in other modules
theme = Theme()
