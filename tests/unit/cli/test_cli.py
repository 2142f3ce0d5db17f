"""Tests for the command line interface."""

import json

from narration_sync.cli import main


class TestAlignCommand:
    def test_prints_words_and_summary(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files

        code = main(["--config-dir", str(config_dir), "align", str(text_file), str(timestamps_file)])

        out = capsys.readouterr().out
        assert code == 0
        assert "Leah's" in out
        assert "Matched: 4  Mismatched: 0" in out
        assert "Timestamps used: 4/4" in out

    def test_json_output(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files

        main(["--config-dir", str(config_dir), "align", str(text_file), str(timestamps_file), "--json"])

        out = capsys.readouterr().out
        records = json.loads(out[: out.index("\nTokens:")])
        assert records[1] == {
            "originalWord": "toy",
            "normalizedWord": "toy",
            "start": 0.4,
            "end": 0.7,
            "index": 1,
        }

    def test_writes_output_file(self, narration_files, config_dir, tmp_path):
        text_file, timestamps_file = narration_files
        output = tmp_path / "out" / "aligned.json"

        code = main([
            "--config-dir", str(config_dir),
            "align", str(text_file), str(timestamps_file), "--output", str(output),
        ])

        assert code == 0
        assert len(json.loads(output.read_text(encoding="utf-8"))) == 4

    def test_missing_text_file(self, narration_files, config_dir, tmp_path, capsys):
        _, timestamps_file = narration_files

        code = main([
            "--config-dir", str(config_dir),
            "align", str(tmp_path / "missing.txt"), str(timestamps_file),
        ])

        assert code == 1
        assert "Text file not found" in capsys.readouterr().err

    def test_invalid_timestamps(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files
        timestamps_file.write_text("{broken", encoding="utf-8")

        code = main(["--config-dir", str(config_dir), "align", str(text_file), str(timestamps_file)])

        assert code == 1
        assert "Invalid word timestamps" in capsys.readouterr().err


class TestLocateCommand:
    def test_active_words(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files

        code = main([
            "--config-dir", str(config_dir),
            "locate", str(text_file), str(timestamps_file), "-1", "0.5", "5",
        ])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0].endswith("-")
        assert lines[1].endswith("[1] toy")
        assert lines[2].endswith("[3] red")

    def test_steps_by_poll_interval_without_times(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files
        (config_dir / "base.yaml").write_text("playback:\n  poll_interval: 0.1\n")

        code = main(["--config-dir", str(config_dir), "locate", str(text_file), str(timestamps_file)])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert [line.split(None, 1)[1] for line in lines] == ["[0] Leah's", "[1] toy", "[2] was", "[3] red"]

    def test_coarse_poll_interval_skips_words(self, narration_files, config_dir, capsys):
        text_file, timestamps_file = narration_files
        (config_dir / "base.yaml").write_text("playback:\n  poll_interval: 0.5\n")

        main(["--config-dir", str(config_dir), "locate", str(text_file), str(timestamps_file)])

        out = capsys.readouterr().out
        assert "[2] was" not in out
        assert "[3] red" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
