from actionskit.command import EOL
from actionskit.core import ExitCode, InputOptions, set_secret


def test_set_secret_issues_add_mask(capsys):
    set_secret("secret")
    assert capsys.readouterr().out == "::add-mask::secret" + EOL


def test_set_secret_escapes_value(capsys):
    set_secret("percent % cr \r lf \n")
    assert capsys.readouterr().out == "::add-mask::percent %25 cr %0D lf %0A" + EOL


def test_exit_codes():
    assert ExitCode.SUCCESS == 0
    assert ExitCode.FAILURE == 1
    assert ExitCode(1) is ExitCode.FAILURE


def test_input_options_defaults_unset():
    options = InputOptions()
    assert options.required is None
    assert options.trim_whitespace is None
    assert InputOptions(required=True).required is True