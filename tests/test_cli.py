import json
import logging

import pytest

from signalcast.cli import cast_literal, cli, main, validate_config
from signalcast.core.exceptions import MalformedLiteralError
from signalcast.core.types import BUILTIN_TYPE_KEYS


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("signalcast")
    handlers, root_level, package_level = list(root.handlers), root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package.setLevel(package_level)


def _write_config(tmp_path, signals):
    path = tmp_path / "signals.json"
    path.write_text(json.dumps({"name": "demo", "signals": signals}))
    return path


def test_cast_literal_vector():
    rendered = cast_literal("vector", "[5](0,0,1,0,0)")

    assert rendered == {"get": "[ 0 0 1 0 0  ];\n", "trace": "0 0 1 0 0 \n"}


def test_cast_literal_propagates_parse_errors():
    with pytest.raises(MalformedLiteralError):
        cast_literal("matrix", "[5,3]((1,")


def test_main_requires_a_config():
    with pytest.raises(ValueError, match="Either config_path or config_dict"):
        main()


def test_main_with_config_dict():
    result = main(config_dict={"signals": [{"name": "x", "type": "int", "value": "3"}]})

    assert result["status"] == "success"
    assert result["signals"] == {"x": "3\n"}
    assert "vector" in result["types"]


def test_validate_config(tmp_path):
    good = _write_config(tmp_path, [{"name": "x", "type": "double", "value": "1.5"}])

    assert validate_config(str(good)) is True


def test_validate_config_rejects_bad_literal(tmp_path):
    bad = _write_config(tmp_path, [{"name": "x", "type": "double", "value": "one"}])

    with pytest.raises(Exception, match="Cannot convert"):
        validate_config(str(bad))


def test_cli_cast_prints_get_and_trace(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli(["cast", "double", "42.0"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "42\n42\n"


def test_cli_cast_failure_exits_non_zero():
    with pytest.raises(SystemExit) as excinfo:
        cli(["cast", "vector", "[5](1,2,3,4,5]"])

    assert excinfo.value.code == 1


def test_cli_types_lists_builtin_keys(capsys):
    with pytest.raises(SystemExit):
        cli(["types"])

    assert capsys.readouterr().out.split() == sorted(BUILTIN_TYPE_KEYS)


def test_cli_load_prints_each_signal(tmp_path, capsys):
    path = _write_config(
        tmp_path,
        [
            {"name": "v", "type": "vector", "value": "[2](1 2)"},
            {"name": "idle", "type": "matrix"},
        ],
    )

    with pytest.raises(SystemExit) as excinfo:
        cli(["load", str(path)])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "v: [ 1 2  ];\n" in out
    assert "idle: Sig:idle (Type Cst)\n" in out


def test_cli_validate_missing_file_exits_non_zero(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli(["validate", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 1
