from core.desktop.devtools.interface.cli_commands import COMMAND_NAMES
from core.desktop.devtools.interface.constants import HELP_TEXT, LANG_PACK, PROMPT


def test_constants_values_present():
    assert PROMPT == "> "
    assert "en" in LANG_PACK and "ru" in LANG_PACK
    assert LANG_PACK["en"]["PANEL_DETAIL"] == "Show"


def test_help_mentions_every_command():
    listed = {line.split()[0] for line in HELP_TEXT.strip().splitlines()[1:]}
    assert listed == set(COMMAND_NAMES)
