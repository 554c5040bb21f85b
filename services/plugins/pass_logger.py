"""
===================================================================================
PASS_LOGGER - Журналирование прошедших тестов и режим --resume
===================================================================================

pytest плагин, сохраняющий node id успешно прошедших тестов
в test-results/passed_tests.json.

РЕЖИМ --resume:
    Тесты, уже записанные в passed_tests.json, помечаются skip,
    а новые успешные тесты дописываются к существующему списку.
    Без --resume файл перезаписывается результатами текущего прогона.

ФОРМАТ ФАЙЛА:
    {"passed": ["services/brands/test_brands.py::test_x", ...]}
===================================================================================
"""

import json
import logging

import pytest

from services.plugins.results_dir import results_dir

logger = logging.getLogger(__name__)

PASSED_FILE = "passed_tests.json"


def load_passed(path) -> set:
    """Читает множество node id из passed_tests.json (пустое, если файла нет)."""
    if not path.exists():
        return set()
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Cannot read {path}: {e}. Starting from scratch.")
        return set()
    return set(data.get("passed", []))


class PassLogger:
    """
    АТРИБУТЫ:
        config: pytest.Config
        resume: bool - Включён ли режим --resume
        previously_passed: set[str] - Тесты, прошедшие в прошлых прогонах
        passed: set[str] - Тесты, прошедшие в текущем прогоне
    """

    def __init__(self, config):
        self.config = config
        self.resume = bool(config.getoption("--resume", default=False))
        self.path = results_dir(config) / PASSED_FILE
        self.previously_passed = load_passed(self.path) if self.resume else set()
        self.passed = set()

    def pytest_collection_modifyitems(self, items):
        if not self.resume:
            return
        skip = pytest.mark.skip(reason="passed in a previous run (--resume)")
        for item in items:
            if item.nodeid in self.previously_passed:
                item.add_marker(skip)

    def pytest_runtest_logreport(self, report):
        if report.when == "call" and report.passed:
            self.passed.add(report.nodeid)

    def pytest_sessionfinish(self):
        passed = sorted(self.previously_passed | self.passed)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump({"passed": passed}, f, indent=2, ensure_ascii=False)


def pytest_configure(config):
    config.pluginmanager.register(PassLogger(config), "qa-pass-logger")
