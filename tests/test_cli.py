# tests/test_cli.py - CLI smoke checks
import json

import pytest
from rich.console import Console

from markov_sequences.cli import load_sequences, main, train


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("the quick brown fox\n\nthe lazy dog\nthe lazy penguin\n", encoding="utf8")
    return str(path)


def run_cli(argv):
    console = Console(record=True, width=120)
    code = main(argv, console=console)
    return code, console.export_text()


def test_load_sequences_skips_blank_lines(corpus):
    seqs = load_sequences(corpus)
    assert seqs == [
        ["the", "quick", "brown", "fox"],
        ["the", "lazy", "dog"],
        ["the", "lazy", "penguin"],
    ]


def test_train_builds_model(corpus):
    model = train(load_sequences(corpus), order=1)
    assert model.order == 1
    assert len(model) > 0


def test_predict_command(corpus):
    code, out = run_cli(["predict", corpus, "the", "--order", "1"])
    assert code == 0
    assert "the lazy dog" in out


def test_predict_unknown_word(corpus):
    code, out = run_cli(["predict", corpus, "zebra", "--order", "1"])
    assert code == 0
    assert "no prediction" in out


def test_generate_command(corpus):
    code, out = run_cli(["generate", corpus, "--count", "3", "--seed", "5", "--order", "1"])
    assert code == 0
    lines = [ln for ln in out.splitlines() if ln.strip()]
    assert len(lines) == 3
    assert all(ln.startswith("the") for ln in lines)


def test_generate_chars(corpus):
    code, out = run_cli(["generate", corpus, "--chars", "--count", "1", "--seed", "1", "--max-length", "8"])
    assert code == 0
    line = out.strip()
    assert 0 < len(line) <= 8


def test_stats_command(corpus):
    code, out = run_cli(["stats", corpus, "--order", "1"])
    assert code == 0
    assert "<start>" in out
    assert "lazy" in out


def test_config_file_is_used(corpus, tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"order": 1, "max_length": 2}))
    code, out = run_cli(["--config", str(cfg), "predict", corpus, "the"])
    assert code == 0
    assert "the lazy dog" in out
    assert "penguin" not in out


def test_bad_config_exits_1(corpus, tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"tokenizer": "bytes"}))
    code, out = run_cli(["--config", str(cfg), "stats", corpus])
    assert code == 1
    assert "error" in out


def test_missing_file_exits_1(tmp_path):
    code, out = run_cli(["stats", str(tmp_path / "missing.txt")])
    assert code == 1
    assert "error" in out


def test_non_utf8_file_exits_1(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"the \xff\xfe fox\n")
    code, out = run_cli(["stats", str(path)])
    assert code == 1
    assert "UTF-8" in out


def test_stats_top_limits_rows(corpus):
    code, out = run_cli(["stats", corpus, "--order", "1", "--top", "0"])
    assert code == 0
    assert "<start>" not in out


def test_negative_top_is_rejected(corpus, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["stats", corpus, "--top", "-1"], console=Console(record=True))
    assert exc.value.code == 2
    assert "must be >= 0" in capsys.readouterr().err
