import json
import pytest

from frontend.__main__ import main


def _run_json(capsys, *argv):
    assert main([*argv, "--json"]) == 0
    return json.loads(capsys.readouterr().out)


@pytest.mark.e2e
def test_cli_linear_lookup_json(capsys):
    data = _run_json(capsys, "--dataset", "test", "--linear", "32")
    assert data["found"] is True
    assert data["comparisons"] == 12
    assert data["product"]["name"] == "Final Product"


@pytest.mark.e2e
def test_cli_binary_and_recursive_agree(capsys):
    a = _run_json(capsys, "--dataset", "test", "--binary", "15")
    b = _run_json(capsys, "--dataset", "test", "--recursive", "15")
    assert a["comparisons"] == b["comparisons"] == 4
    assert a["product"] == b["product"]


@pytest.mark.e2e
def test_cli_name_search(capsys):
    data = _run_json(capsys, "--dataset", "test", "--name", "Samsung")
    assert data["count"] == 3
    assert data["comparisons"] == 12


@pytest.mark.e2e
def test_cli_compare_json(capsys):
    data = _run_json(capsys, "--dataset", "test", "--compare", "99")
    assert data["linear_found"] is False and data["binary_found"] is False
    assert data["linear_ops"] == 12


@pytest.mark.e2e
def test_cli_text_output(capsys):
    assert main(["--dataset", "test", "--category", "laptops"]) == 0
    out = capsys.readouterr().out
    assert "Samsung Laptop" in out and "Test Laptop" in out
    assert "12 comparisons" in out


@pytest.mark.e2e
def test_cli_reports_run(capsys):
    for flag in ("--scenarios", "--benchmark", "--theory", "--info", "--list"):
        assert main(["--dataset", "budget", flag]) == 0
    assert main(["--perf", "5", "10", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Product ID Range: 4001 - 4006" in out
    assert "Speedup" in out


@pytest.mark.e2e
@pytest.mark.parametrize("argv", [
    ["--linear", "abc"],
    ["--dataset", "nope", "--list"],
    ["--linear", "1", "--binary", "2"],
    [],
    ["--dataset", "random", "--size", "-1", "--list"],
    ["--perf", "0"],
])
def test_cli_rejects_bad_input(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
