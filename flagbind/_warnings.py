"""Custom warning category for flagbind."""


class FlagbindWarning(UserWarning):
    """Warning category for flagbind-specific warnings. Emitted when a tag is lenient
    parsed, for example an unknown `type` string that falls back to `string`.

    This can be used to filter flagbind warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=FlagbindWarning)
    """

    pass
