import logging
import os

import pytest

from py_psychrocalc import (basicConfig, get_solver_config, restore_solver_defaults, create_solver_config,
                            SolverConfig, DEFAULT_SOLVER_CONFIG)

pytestmark = pytest.mark.extended

PACKAGE_CONFIG = os.path.join(
    os.path.dirname(
        os.path.dirname(__file__)
    ), 'py_psychrocalc', '.pypsychro.toml')


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestConfigLoader:

    @pytest.mark.parametrize(
        "test_name, content, expected_tolerance, expected_iterations",
        [
            ("both", "[pypsychro.solver]\ncWetBulbTolerance = 1e-5\ncMaxIterations = 42\n", 1e-5, 42),
            ("tolerance", "[pypsychro.solver]\ncWetBulbTolerance = 0.01\n", 0.01, 100),
            ("iterations", "[pypsychro.solver]\ncMaxIterations = 7\n", 0.001, 7),
        ],
    )
    def test_solver_load(self, tmp_path, test_name, content, expected_tolerance, expected_iterations):
        basicConfig(_write(tmp_path / f"{test_name}.toml", content))
        assert get_solver_config().cWetBulbTolerance == expected_tolerance
        assert get_solver_config().cMaxIterations == expected_iterations
        restore_solver_defaults()
        assert get_solver_config() == DEFAULT_SOLVER_CONFIG

    def test_package_config(self):
        basicConfig(PACKAGE_CONFIG)
        assert get_solver_config() == DEFAULT_SOLVER_CONFIG

    def test_search_from_working_directory(self, tmp_path, monkeypatch):
        _write(tmp_path / "pypsychro.toml", "[pypsychro.solver]\ncMaxIterations = 55\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        basicConfig()
        assert get_solver_config().cMaxIterations == 55

    @pytest.mark.parametrize("content, message", [
        ("[other]\nx = 1\n", "no `pypsychro` section"),
        ("[pypsychro]\nname = 'x'\n", "no `pypsychro.solver` section"),
    ])
    def test_missing_sections_warn(self, tmp_path, caplog, content, message):
        path = _write(tmp_path / "cfg.toml", content)
        with caplog.at_level(logging.WARNING, logger='py_psychro'):
            basicConfig(path)
        assert message in caplog.text
        assert get_solver_config() == DEFAULT_SOLVER_CONFIG

        caplog.clear()
        with caplog.at_level(logging.WARNING, logger='py_psychro'):
            basicConfig(path, suppress_warnings=True)
        assert message not in caplog.text

    def test_invalid_values(self, tmp_path):
        with pytest.raises(ValueError):
            basicConfig(_write(tmp_path / "bad.toml", "[pypsychro.solver]\ncWetBulbTolerance = -1.0\n"))
        with pytest.raises(ValueError):
            basicConfig(_write(tmp_path / "bad2.toml", "[pypsychro.solver]\ncMaxIterations = 0\n"))
        with pytest.raises(TypeError):
            basicConfig(_write(tmp_path / "bad3.toml", "[pypsychro.solver]\nunknown = 1\n"))

    def test_file_and_mapping_conflict(self, tmp_path):
        with pytest.raises(ValueError):
            basicConfig(PACKAGE_CONFIG, solver={'cMaxIterations': 5})

    def test_create_solver_config(self):
        config = create_solver_config({'cMaxIterations': 10})
        assert config == SolverConfig(cWetBulbTolerance=0.001, cMaxIterations=10)
        assert create_solver_config() == DEFAULT_SOLVER_CONFIG
        assert create_solver_config({'cMaxIterations': None}) == DEFAULT_SOLVER_CONFIG
