import pytest

from four_fours.cli import build_configs, build_parser, main


def test_prints_report(capsys):
    assert main(["--games", "2", "2", "--start", "0", "--end", "5", "--quiet"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "4: 3 solutions available. First found: add(2,2)" in out
    assert "3: No solution available." in out


def test_logging_writes_report_files(tmp_path, capsys):
    assert main(["--games", "1", "2", "--start", "0", "--end", "4", "--quiet",
                 "--logging", "--output-dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""
    assert (tmp_path / "game_1.txt").read_text().splitlines()[1] == \
        "1: 1 solutions available. First found: 1"
    assert (tmp_path / "game_2.txt").exists()
    assert (tmp_path / "game_scores.txt").read_text().splitlines() == [
        "0, 1, 0, 0, 0",
        "2, 2, 0, 0, 3",
    ]


def test_digit_override_and_extensions():
    args = build_parser().parse_args(["--games", "3", "4", "--digit", "4", "--concatenate",
                                      "--unary", "negate", "factorial"])
    configs = build_configs(args)
    assert [(c.digit, c.n) for c in configs] == [(4, 3), (4, 4)]
    assert configs[0].concatenate
    assert configs[0].unary_operators == ("negate", "factorial")


def test_bad_arguments_exit():
    with pytest.raises(SystemExit):
        main(["--games", "3", "2"])
    with pytest.raises(SystemExit):
        main(["--games", "2", "2", "--workers", "0"])
    with pytest.raises(SystemExit):
        main(["--unary", "sqrt"])
