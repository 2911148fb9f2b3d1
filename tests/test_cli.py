"""
CLI Tests
=========
"""

import json

from fseq_validator.cli import main


class TestCli:
    """Tests for the fseq-validate entry point."""

    def test_valid_file(self, tmp_path, lightshow_valid, capsys):
        """Verify an accepted file prints the summary and exits 0."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)

        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert "Found 2247 frames, step time of 20 ms" in out
        assert "Used 3.2% of the available memory" in out

    def test_invalid_file(self, tmp_path, lightshow_valid, capsys):
        """Verify a rejected file prints its errors and exits 1."""
        lightshow_valid[11] = 79
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)

        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert "VALIDATION ERROR: Expected 48 channels, got 20272" in err

    def test_json_output(self, tmp_path, lightshow_over_memory, capsys):
        """Verify --json prints the result model."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_over_memory)

        assert main([str(path), "--json"]) == 1
        payload = json.loads(capsys.readouterr().out)
        assert payload["command_count"] == 4000
        assert payload["errors"] == [5]

    def test_config_override(self, tmp_path, lightshow_valid, capsys):
        """Verify --config limits are applied and quoted in messages."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)
        config = tmp_path / "config.yaml"
        config.write_text("validation:\n  memory_limit: 50\n")

        assert main([str(path), "--config", str(config)]) == 1
        err = capsys.readouterr().err
        assert "Sequence uses 112 commands, but the maximum allowed is 50!" in err

    def test_config_channel_count_in_message(self, tmp_path, lightshow_valid, capsys):
        """Verify the expected channel count is taken from --config."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)
        config = tmp_path / "config.yaml"
        config.write_text("validation:\n  required_channel_count: 40\n")

        assert main([str(path), "--config", str(config)]) == 1
        err = capsys.readouterr().err
        assert "VALIDATION ERROR: Expected 40 channels, got 48" in err

    def test_config_duration_in_message(self, tmp_path, lightshow_valid, capsys):
        """Verify the duration ceiling in the message follows --config."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)
        config = tmp_path / "config.yaml"
        config.write_text("validation:\n  max_duration_ms: 30000\n")

        assert main([str(path), "--config", str(config)]) == 1
        err = capsys.readouterr().err
        assert (
            "Expected total duration to be less than 00:00:30.000, got 00:00:44.940"
            in err
        )

    def test_missing_config(self, tmp_path, lightshow_valid, capsys):
        """Verify a --config path that does not exist exits 2."""
        path = tmp_path / "lightshow.fseq"
        path.write_bytes(lightshow_valid)

        assert main([str(path), "--config", str(tmp_path / "nope.yaml")]) == 2
        captured = capsys.readouterr()
        assert "ERROR: cannot read config" in captured.err
        assert captured.out == ""

    def test_missing_file(self, tmp_path, capsys):
        """Verify an unreadable sequence file exits 2."""
        assert main([str(tmp_path / "missing.fseq")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_truncated_file(self, tmp_path, fseq_builder, frame_builder, capsys):
        """Verify truncated frame data exits 2."""
        path = tmp_path / "short.fseq"
        path.write_bytes(fseq_builder([frame_builder()], frame_count=5))

        assert main([str(path)]) == 2
        assert "ERROR" in capsys.readouterr().err
