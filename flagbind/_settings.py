"""Settings for flagbind.

These are process-wide, and are read at the time they are used; changing them affects
every :class:`flagbind.CommandLine` created afterwards.
"""

from __future__ import annotations

from typing_extensions import TypedDict


class OptionsDict(TypedDict):
    """Options for flagbind.

    Attributes:
        spinner_interval: Seconds between two frames of the progress spinner.
        use_color: Whether usage and error output carries ANSI color codes.
    """

    spinner_interval: float
    use_color: bool


# Global options dictionary.
options: OptionsDict = {
    "spinner_interval": 0.3,
    "use_color": True,
}
