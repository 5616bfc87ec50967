#!/usr/bin/env python3
"""
Full run: entry point, fresh root, and repeated runs against the same root.
"""
from __future__ import annotations

import setup_project
from src.config.paths import FrameworkPaths
from src.parser.log_parser import parse_framework_log, summarize_log
from src.runner.execution import run_all
from src.setup.initializer import initialize_environment


def _run_once(paths):
    logger = initialize_environment(paths, pause_s=0)
    run_all(paths, logger)
    return logger.line_count()


class TestEndToEnd:
    def test_main_fresh_root(self, tmp_path, monkeypatch, capsys):
        """Real child processes; banner, tree and log all produced."""
        monkeypatch.setattr(setup_project, "clear_screen", lambda: None)
        monkeypatch.setattr("src.setup.initializer.time.sleep", lambda s: None)
        root = tmp_path / "fw"
        assert setup_project.main(root) == 0

        paths = FrameworkPaths.from_root(root)
        for name in ("scripts", "resources", "logs", "docs"):
            assert (root / name).is_dir()
        assert len(paths.log_file.read_text(encoding="utf-8").splitlines()) >= 8
        body = (root / "scripts" / "neural_network_training.py").read_text(encoding="utf-8")
        assert "Training the neural network..." in body
        assert "SACRED FRAMEWORK" in capsys.readouterr().out

    def test_second_run_doubles_log(self, paths, fake_run):
        first = _run_once(paths)
        second = _run_once(paths)
        # README line is only written on the first run
        assert second == 2 * first - 1
        summary = summarize_log(parse_framework_log(paths.log_file))
        assert summary["runs"] == 2
        assert len(summary["resonance_values"]) == 2

    def test_main_reports_unwritable_root(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(setup_project, "clear_screen", lambda: None)
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        assert setup_project.main(blocker / "fw") == 1
        assert "Error:" in capsys.readouterr().err
