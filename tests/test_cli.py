"""
CLI tests for bloop.py.

Drives main() with an argv list and checks stdout, stderr and the exit
code. Flavor text is random, so those checks only look for membership
in the message tables.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
import bloop
from bloop_vm.flavor import (
    BLAME, EXISTENTIAL_SUFFIXES, KONAMI_NOTICE, RICK_ROLL, SNARKY_MESSAGES,
    STEP_LIMIT_MESSAGES, ZEN_KOANS,
)


def _cli(capsys, *argv):
    """Run the CLI, return (exit_code, stdout, stderr)."""
    code = bloop.main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


# ─── Running programs ─────────────────────

class TestRun:

    def test_inline_code(self, capsys):
        code, out, err = _cli(capsys, "-c", "OBOBO")
        assert code == 0
        assert out == "1BD"

    def test_file(self, capsys, tmp_path):
        src = tmp_path / "loop.bloop"
        src.write_text("# even loop\nB(B)O\n", encoding="utf-8")
        code, out, err = _cli(capsys, str(src))
        assert code == 0
        assert out == "F"
        assert "warning" not in err

    def test_wrong_extension_warns(self, capsys, tmp_path):
        src = tmp_path / "prog.txt"
        src.write_text("O", encoding="utf-8")
        code, out, err = _cli(capsys, str(src))
        assert code == 0
        assert out == "1"
        assert "does not have a .bloop extension" in err

    def test_missing_file(self, capsys, tmp_path):
        code, out, err = _cli(capsys, str(tmp_path / "nope.bloop"))
        assert code == 1
        assert "error reading file" in err

    def test_no_code(self, capsys):
        code, out, err = _cli(capsys)
        assert code == 1
        assert "no BLOOP code provided" in err
        assert "usage:" in err

    def test_empty_file(self, capsys, tmp_path):
        src = tmp_path / "empty.bloop"
        src.write_text("", encoding="utf-8")
        code, out, err = _cli(capsys, str(src))
        assert code == 1
        assert "no BLOOP code provided" in err


# ─── Step limit ─────────────────────

class TestStepLimit:

    def test_limit_exit_code(self, capsys):
        code, out, err = _cli(capsys, "-c", "(B)", "--max", "100")
        assert code == 2
        assert "step limit reached (100 steps)" in err
        assert any(msg in err for msg in STEP_LIMIT_MESSAGES)

    def test_partial_output_printed(self, capsys):
        code, out, err = _cli(capsys, "-c", "O(B)", "--max", "50")
        assert code == 2
        assert out == "1"

    def test_ceiling_hit_on_last_command(self, capsys):
        code, out, err = _cli(capsys, "-c", "BBO", "--max", "3")
        assert code == 2
        assert out == "D"
        assert "step limit reached (3 steps)" in err

    def test_bad_max_values(self, capsys):
        for bad in ("0", "-5", "lots"):
            code, out, err = _cli(capsys, "-c", "O", "--max", bad)
            assert code == 1, bad
            assert "positive integer" in err

    def test_konami_doubles_limit(self, capsys):
        # BBLLBBLL leaves 6, P → 5, (B) entered odd never sees 1 again
        code, out, err = _cli(capsys, "-c", "BBLLBBLLP(B)", "--max", "10")
        assert code == 2
        assert KONAMI_NOTICE in err
        assert "step limit reached (20 steps)" in err


# ─── Easter eggs ─────────────────────

class TestEasterEggs:

    def test_rick(self, capsys):
        code, out, err = _cli(capsys, "--rick")
        assert code == 0
        assert out.strip() == RICK_ROLL

    def test_blame(self, capsys):
        code, out, err = _cli(capsys, "--blame")
        assert code == 0
        assert out.strip() == BLAME

    def test_koan_for_program_without_commands(self, capsys):
        code, out, err = _cli(capsys, "-c", "just some words")
        assert code == 0
        assert out.strip() in ZEN_KOANS

    def test_bang_snarks_without_changing_output(self, capsys):
        code, out, err = _cli(capsys, "-c", "!O")
        assert code == 0
        assert out == "1"
        assert any(msg in err for msg in SNARKY_MESSAGES)

    def test_snarks_are_capped(self, capsys):
        code, out, err = _cli(capsys, "-c", "!" * 20 + "O")
        assert code == 0
        lines = [line for line in err.splitlines() if line in SNARKY_MESSAGES]
        assert len(lines) == 3

    def test_snark_per_bang_in_source_not_per_pass(self, capsys):
        # loop body runs twice (4, then 6) but holds a single '!'
        code, out, err = _cli(capsys, "-c", "B(!B)O")
        assert code == 0
        assert out == "F"
        lines = [line for line in err.splitlines() if line in SNARKY_MESSAGES]
        assert len(lines) == 1

    def test_existential_decorates_display_only(self, capsys):
        code, out, err = _cli(capsys, "-c", "O", "--existential")
        assert code == 0
        assert out.startswith("1")
        assert out[1:] in EXISTENTIAL_SUFFIXES

    def test_speedrun(self, capsys):
        code, out, err = _cli(capsys, "-c", "O", "--speedrun")
        assert code == 0
        assert out == "1"
        assert "⏱" in err


# ─── Debug output ─────────────────────

class TestDebug:

    def test_tokens(self, capsys):
        code, out, err = _cli(capsys, "-c", "B x(", "--tokens")
        assert code == 0
        lines = out.splitlines()
        assert lines[0].split() == ["0", "B", "BUMP"]
        assert lines[1].split() == ["3", "(", "LOOP"]

    def test_trace(self, capsys):
        code, out, err = _cli(capsys, "-c", "BO", "--trace")
        assert code == 0
        assert out == "B"
        assert "0000: B BUMP" in err
        assert "0001: O OUT" in err

    def test_log_file(self, capsys, tmp_path):
        log = tmp_path / "logs" / "bloop.log"
        code, out, err = _cli(capsys, "-c", "O", "--log-file", str(log))
        assert code == 0
        assert "program finished after 1 steps" in log.read_text(encoding="utf-8")


# ─── Bundled examples ─────────────────────

EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "examples")

EXPECTED_EXAMPLE_OUTPUT = {
    "count.bloop": "1BD",
    "hello.bloop": "1B3D5F",
    "loop.bloop": "F",
    "nested.bloop": "BFF",
}


@pytest.mark.parametrize("name, expected", sorted(EXPECTED_EXAMPLE_OUTPUT.items()))
def test_examples(capsys, name, expected):
    code, out, err = _cli(capsys, os.path.join(EXAMPLES_DIR, name))
    assert code == 0
    assert out == expected
