import copy

import pytest

import flagbind


@pytest.fixture(autouse=True)
def restore_options():
    """Tests may change flagbind's global options; put them back afterwards."""
    original = copy.deepcopy(flagbind._settings.options)
    flagbind._settings.options["use_color"] = False
    flagbind._settings.options["spinner_interval"] = 0.01
    yield
    flagbind._settings.options.clear()
    flagbind._settings.options.update(original)
